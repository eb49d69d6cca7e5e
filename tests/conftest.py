import pytest

from nonempty import NonEmptySequence
from nonempty.logging import global_warn_once_filter


@pytest.fixture(autouse=True)
def reset_warn_once_filter():
    global_warn_once_filter.clear()
    yield
    global_warn_once_filter.clear()


@pytest.fixture
def one_to_five() -> NonEmptySequence[int]:
    return NonEmptySequence.range(1, 5)


@pytest.fixture
def single() -> NonEmptySequence[str]:
    return NonEmptySequence.singleton("x")


@pytest.fixture
def pairs() -> NonEmptySequence:
    return NonEmptySequence.create(("a", 1), [("b", 2), ("c", 3)])
