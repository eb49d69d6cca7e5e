import pytest

from tests.utils import does_not_raise
from nonempty.models.validators import at_least_size, non_empty_list


@pytest.mark.parametrize(
    "seq, expectation",
    [
        ([1], does_not_raise()),
        ((1, 2), does_not_raise()),
        ([], pytest.raises(ValueError, match="list must not be empty.")),
        ((), pytest.raises(ValueError)),
    ],
)
def test_non_empty_list(seq, expectation):
    with expectation:
        assert non_empty_list(seq) is seq


@pytest.mark.parametrize(
    "n, seq, expectation",
    [
        (1, [1], does_not_raise()),
        (2, [1, 2, 3], does_not_raise()),
        (2, [1], pytest.raises(ValueError, match="at least 2")),
        (1, (), pytest.raises(ValueError)),
    ],
)
def test_at_least_size(n, seq, expectation):
    with expectation:
        assert at_least_size(n)(seq) is seq
