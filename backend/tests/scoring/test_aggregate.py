import os, sys
import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "..")))
from lanescore.schemas import PENDING, Frame
from lanescore.scoring import aggregate

CLASSIC_GAME = [[10], [7, 3], [9, 0], [10], [0, 8], [8, 2], [0, 6], [10], [10], [10, 8, 1]]


def _frames(*throws):
    rows = list(throws) + [[]] * (10 - len(throws))
    return [Frame(frame_number=n, throws=t) for n, t in enumerate(rows, start=1)]


def _scores(frames):
    return [frame.cumulative_score for frame in frames]


def test_perfect_game():
    scored = aggregate.score_frames(_frames(*([[10]] * 9 + [[10, 10, 10]])))
    assert _scores(scored) == list(range(30, 301, 30))
    assert aggregate.total_score(scored) == 300


def test_all_gutter_balls():
    scored = aggregate.score_frames(_frames(*([[0, 0]] * 10)))
    assert _scores(scored) == [0] * 10
    assert all(frame.is_complete for frame in scored)
    assert aggregate.total_score(scored) == 0


def test_classic_game():
    scored = aggregate.score_frames(_frames(*CLASSIC_GAME))
    assert _scores(scored) == [20, 39, 48, 66, 74, 84, 90, 120, 148, 167]
    assert aggregate.total_score(scored) == 167


def test_spare_waits_for_next_ball():
    scored = aggregate.score_frames(_frames([7, 3]))
    assert _scores(scored) == [PENDING] * 10
    assert aggregate.total_score(scored) == 0

    scored = aggregate.score_frames(_frames([7, 3], [4]))
    assert scored[0].cumulative_score == 14
    assert _scores(scored)[1:] == [18] * 9
    assert aggregate.total_score(scored) == 18


def test_strike_waits_for_two_balls():
    scored = aggregate.score_frames(_frames([10], [10]))
    assert _scores(scored) == [PENDING] * 10

    scored = aggregate.score_frames(_frames([10], [10], [4]))
    assert scored[0].cumulative_score == 24
    assert _scores(scored)[1:] == [PENDING] * 9
    assert aggregate.total_score(scored) == 24

    scored = aggregate.score_frames(_frames([10], [10], [4, 2]))
    assert _scores(scored)[:3] == [24, 40, 46]


def test_ninth_frame_strike_looks_into_tenth():
    rows = [[0, 0]] * 8 + [[10], [10]]
    scored = aggregate.score_frames(_frames(*rows))
    assert scored[8].cumulative_score == PENDING
    assert scored[9].cumulative_score == PENDING

    rows = [[0, 0]] * 8 + [[10], [10, 10]]
    scored = aggregate.score_frames(_frames(*rows))
    assert scored[8].cumulative_score == 30
    assert scored[9].cumulative_score == 50


def test_tenth_frame_strike_chain():
    rows = [[3, 4]] * 9 + [[10, 10, 10]]
    scored = aggregate.score_frames(_frames(*rows))
    assert scored[8].cumulative_score == 63
    assert scored[9].cumulative_score == 93


def test_in_progress_frames_carry_running_total():
    scored = aggregate.score_frames(_frames([3, 4], [5]))
    assert _scores(scored) == [7, 12] + [12] * 8
    assert scored[1].is_complete is False


def test_scoring_is_idempotent_and_pure():
    frames = _frames(*CLASSIC_GAME[:6])
    first = aggregate.score_frames(frames)
    second = aggregate.score_frames(first)
    assert first == second
    assert aggregate.score_frames(frames) == first
    assert _scores(frames) == [0] * 10


def test_frames_are_sorted_before_scoring():
    frames = _frames(*CLASSIC_GAME)
    scored = aggregate.score_frames(list(reversed(frames)))
    assert [frame.frame_number for frame in scored] == list(range(1, 11))
    assert scored[-1].cumulative_score == 167


@pytest.mark.parametrize(
    "rows, expected",
    [
        ([[10], [10], [10]], [30, None, None]),
        ([[7, 3], [3]], [13, 3]),
        ([[4, 4], []], [8, 0]),
    ],
    ids=["turkey-prefix", "spare-then-ball", "open-then-empty"],
)
def test_frame_values(rows, expected):
    assert aggregate.frame_values(rows) == expected


def test_single_ball_frames_score_as_entered():
    # frame-by-frame entry stores one ball per frame and flags it complete
    rows = [
        Frame(frame_number=n, throws=(pins,), is_complete=True)
        for n, pins in enumerate([10, 5, 5, 0, 0, 0, 0, 0, 0], start=1)
    ]
    rows.append(Frame(frame_number=10, throws=(0, 0), is_complete=True))
    scored = aggregate.score_frames(rows)
    assert scored[0].cumulative_score == 20
    assert aggregate.total_score(scored) == 30
    assert all(frame.is_complete for frame in scored)


def test_build_game_derives_total_and_cursor():
    game = aggregate.build_game(_frames([10], [3]))
    assert game.total_score == 0
    assert game.cursor.current_frame == 2
    assert game.cursor.current_throw == 2
    assert game.is_complete is False

    game = aggregate.build_game(_frames(*CLASSIC_GAME), notes="league night")
    assert game.total_score == 167
    assert game.is_complete is True
    assert game.notes == "league night"
