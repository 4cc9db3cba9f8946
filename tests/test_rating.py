import pytest

from courtrotation.exceptions import InvalidPolicyException, InvalidResultException
from courtrotation.models import Player, RotationPolicy
from courtrotation.rating import (
    apply_game_result,
    calculate_balance_score,
    expected_score,
    rating_delta,
    should_apply_ratings,
)
from courtrotation.rating.elo import average_rating, round_half_away_from_zero


def _roster(*ratings):
    return [Player(f"P{i}", rating=r) for i, r in enumerate(ratings)]


def test_equal_ratings_move_half_k():
    assert rating_delta(1500, 1500, True) == 16
    assert rating_delta(1500, 1500, False) == -16


def test_beating_stronger_side_gains_more():
    assert rating_delta(1500, 1900, True) > rating_delta(1500, 1100, True)
    assert rating_delta(1500, 1900, True) == 29
    assert rating_delta(1500, 1100, True) == 3


def test_winner_and_loser_deltas_mirror():
    for team_avg, opponent_avg in [(1500, 1500), (1623.5, 1480), (1200, 1850)]:
        won = rating_delta(team_avg, opponent_avg, True)
        lost = rating_delta(opponent_avg, team_avg, False)
        assert won == -lost


def test_expected_score_is_symmetric():
    assert expected_score(1500, 1500) == pytest.approx(0.5)
    assert expected_score(1600, 1400) + expected_score(1400, 1600) == pytest.approx(
        1.0
    )


def test_rounding_goes_away_from_zero():
    assert round_half_away_from_zero(2.5) == 3
    assert round_half_away_from_zero(-2.5) == -3
    assert round_half_away_from_zero(0.4) == 0
    assert round_half_away_from_zero(-15.6) == -16


def test_average_rating_of_empty_roster_is_initial_rating():
    assert average_rating([]) == 1500
    assert average_rating(_roster(1400, 1600, 1800)) == pytest.approx(1600)


def test_apply_game_result_is_zero_sum():
    roster_a = _roster(1600, 1400)
    roster_b = _roster(1500, 1500)

    changes = apply_game_result(roster_a, roster_b, "A")

    assert [c.change for c in changes] == [16, 16, -16, -16]
    assert sum(c.change for c in changes) == 0
    assert [p.rating for p in roster_a] == [1616, 1416]
    assert [p.rating for p in roster_b] == [1484, 1484]


def test_upset_uses_pre_game_averages():
    favourites = _roster(1650, 1550)
    underdogs = _roster(1450, 1350)

    changes = apply_game_result(favourites, underdogs, "B")

    assert {c.change for c in changes if c.won} == {24}
    assert {c.change for c in changes if not c.won} == {-24}
    assert all(c.side == "B" for c in changes if c.won)


def test_counters_and_streaks():
    player = Player("Sam", rating=1500)
    opponent = Player("Alex", rating=1500)

    apply_game_result([player], [opponent], "A")
    apply_game_result([player], [opponent], "A")
    assert player.win_streak == 2
    assert player.best_win_streak == 2
    assert player.highest_rating == player.rating

    peak = player.rating
    apply_game_result([player], [opponent], "B")

    assert player.games_played == 3
    assert player.wins == 2
    assert player.losses == 1
    assert player.win_streak == 0
    assert player.best_win_streak == 2
    assert player.highest_rating == peak
    assert opponent.losses == 2
    assert opponent.win_streak == 1


def test_speed_policy_keeps_ratings_but_counts_games():
    roster_a = _roster(1700)
    roster_b = _roster(1300)

    changes = apply_game_result(roster_a, roster_b, "B", RotationPolicy.SPEED)

    assert all(c.change == 0 for c in changes)
    assert roster_a[0].rating == 1700
    assert roster_b[0].rating == 1300
    assert roster_a[0].games_played == 1
    assert roster_b[0].wins == 1


def test_invalid_winner_is_rejected():
    with pytest.raises(InvalidResultException):
        apply_game_result(_roster(1500), _roster(1500), "C")


def test_should_apply_ratings_by_policy():
    assert not should_apply_ratings(RotationPolicy.SPEED)
    assert not should_apply_ratings("speed")
    for policy in ("king_of_court", "round_robin", "swiss", "manual"):
        assert should_apply_ratings(policy)
    with pytest.raises(InvalidPolicyException):
        should_apply_ratings("ladder")


def test_balance_score():
    score = calculate_balance_score(_roster(1700, 1500), _roster(1400))

    assert score.avg_a == pytest.approx(1600)
    assert score.avg_b == pytest.approx(1400)
    assert score.difference == pytest.approx(200)
    assert score.fairness_percent == pytest.approx(80.0)

    lopsided = calculate_balance_score(_roster(2600), _roster(1000))
    assert lopsided.fairness_percent == 0.0
