"""Property-based tests for typeset normalization and checking."""

from hypothesis import given
from hypothesis import strategies as st

from rtv import Qualifier, Type, check
from rtv.qualifiers import DEFAULT_QUALIFIER
from rtv.typeset import fully_qualify, is_typeset, iter_types, to_typeset
from rtv.validation import is_finite


@st.composite
def list_typesets(draw):
    """Generate valid list typesets of plain types, some with args."""
    units = draw(
        st.lists(
            st.one_of(
                st.sampled_from(list(Type)).map(lambda t: [t]),
                st.integers(min_value=0, max_value=5).map(
                    lambda n: [Type.STRING, {"min": n}]
                ),
            ),
            min_size=1,
            max_size=4,
        )
    )
    qualifier = draw(st.one_of(st.none(), st.sampled_from(list(Qualifier))))

    typeset = [] if qualifier is None else [qualifier]
    for unit in units:
        typeset.extend(unit)
    return typeset


shapes = st.dictionaries(
    st.text(min_size=1, max_size=5), st.sampled_from(list(Type)), max_size=3
)


class TestPropertyBasedTypesets:
    """Normalization properties."""

    @given(st.one_of(list_typesets(), shapes, st.sampled_from(list(Type))))
    def test_fully_qualify_idempotent(self, typeset):
        once = fully_qualify(typeset)
        assert fully_qualify(once) == once
        assert is_typeset(once, fully_qualified=True)

    @given(list_typesets())
    def test_fully_qualify_keeps_qualifier(self, typeset):
        own = typeset[0] if isinstance(typeset[0], Qualifier) else DEFAULT_QUALIFIER
        assert fully_qualify(typeset)[0] == own

    @given(st.sampled_from(list(Type)), st.sampled_from(list(Qualifier)))
    def test_to_typeset_round_trip(self, type_, qualifier):
        typeset = to_typeset(type_, qualifier)
        assert is_typeset(typeset)
        assert fully_qualify(typeset) == [qualifier, type_]
        assert to_typeset(type_, qualifier, fully_qualified=True) == [qualifier, type_]

    @given(list_typesets())
    def test_iter_types_covers_typeset(self, typeset):
        subtypes = list(iter_types(typeset))
        assert [rule for subtype in subtypes for rule in subtype] == typeset


class TestPropertyBasedCheck:
    """Checking never raises for valid typesets."""

    @given(
        st.one_of(
            st.none(),
            st.booleans(),
            st.integers(),
            st.floats(),
            st.text(max_size=10),
            st.lists(st.integers(), max_size=3),
        )
    )
    def test_optional_string_or_finite(self, value):
        result = check(value, [Qualifier.OPTIONAL, Type.STRING, Type.FINITE])
        expected = value is None or isinstance(value, str) or is_finite(value)
        assert result.valid == expected

    @given(st.dictionaries(st.text(max_size=5), st.integers(), max_size=5))
    def test_hash_map_mvv(self, value):
        result = check(value, [Type.HASH_MAP, {"$values": Type.INT}])
        assert result.valid
        assert result.mvv == value
        assert result.mvv is not value
