import os, sys
import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "..")))
from lanescore.exceptions import IllegalThrow
from lanescore.scoring import throws


@pytest.mark.parametrize(
    "prior, frame_number, expected",
    [
        ([], 1, 10),
        ([6], 1, 4),
        ([0], 9, 10),
        ([], 10, 10),
        ([10], 10, 10),
        ([3], 10, 7),
        ([10, 10], 10, 10),
        ([10, 4], 10, 6),
        ([7, 3], 10, 10),
        ([0, 10], 10, 10),
    ],
    ids=[
        "first-ball",
        "second-ball",
        "second-after-gutter",
        "tenth-first",
        "tenth-after-strike",
        "tenth-second",
        "tenth-double",
        "tenth-strike-then-four",
        "tenth-after-spare",
        "tenth-after-gutter-spare",
    ],
)
def test_max_legal_pins(prior, frame_number, expected):
    assert throws.max_legal_pins(prior, frame_number) == expected


@pytest.mark.parametrize(
    "prior, frame_number, expected",
    [
        ([], 1, True),
        ([3], 1, True),
        ([10], 1, False),
        ([3, 4], 1, False),
        ([10], 10, True),
        ([3], 10, True),
        ([10, 2], 10, True),
        ([3, 7], 10, True),
        ([3, 4], 10, False),
        ([10, 10, 10], 10, False),
        ([3, 7, 2], 10, False),
    ],
    ids=[
        "empty",
        "after-first",
        "after-strike",
        "after-two",
        "tenth-after-strike",
        "tenth-after-first",
        "tenth-strike-bonus",
        "tenth-spare-bonus",
        "tenth-open",
        "tenth-three-strikes",
        "tenth-spare-done",
    ],
)
def test_can_accept_throw(prior, frame_number, expected):
    assert throws.can_accept_throw(prior, frame_number) is expected


def test_max_legal_pins_is_zero_when_frame_is_over():
    assert throws.max_legal_pins([10], 4) == 0
    assert throws.max_legal_pins([3, 4], 10) == 0


def test_validate_throw_returns_pins():
    assert throws.validate_throw([6], 1, 4) == 4
    assert throws.validate_throw([10, 10], 10, 10) == 10


@pytest.mark.parametrize(
    "prior, frame_number, pins, msg",
    [
        ([6], 1, 5, "between 0 and 4"),
        ([], 1, 11, "between 0 and 10"),
        ([], 1, -1, "between 0 and 10"),
        ([10, 4], 10, 7, "between 0 and 6"),
        ([10], 1, 0, "cannot accept"),
        ([3, 4], 10, 1, "cannot accept"),
        ([], 1, True, "integer"),
        ([], 1, "5", "integer"),
    ],
    ids=[
        "over-remaining",
        "over-ten",
        "negative",
        "tenth-bonus-over-remaining",
        "after-strike",
        "tenth-open-done",
        "boolean",
        "string",
    ],
)
def test_validate_throw_rejects(prior, frame_number, pins, msg):
    with pytest.raises(IllegalThrow, match=msg):
        throws.validate_throw(prior, frame_number, pins)


def test_validate_throw_does_not_touch_prior():
    prior = [6]
    with pytest.raises(IllegalThrow):
        throws.validate_throw(prior, 1, 5)
    assert prior == [6]
