from typing import Any

import pytest

from rtv.engine import Engine
from rtv.validators import default_validators


@pytest.fixture(scope="function")
def engine() -> Engine:
    return Engine().configure(default_validators())


class Recorder:
    """Custom validator that records its calls and returns a fixed verdict."""

    def __init__(self, verdict: Any = True):
        self.verdict = verdict
        self.calls: list[tuple] = []

    def __call__(self, value, match, typeset, context):
        self.calls.append((value, match, typeset, context))
        return self.verdict


@pytest.fixture(scope="function")
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture(scope="function")
def rejecting() -> Recorder:
    return Recorder(verdict=False)
