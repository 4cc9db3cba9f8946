import json

import pytest

from courtrotation.models import RotationPolicy
from courtrotation.testing import (
    RandomSessionGenerator,
    RatingDistribution,
    ResultPattern,
    RSGConfig,
)
from courtrotation.testing.rsg import (
    PlayerFactory,
    create_club_night_session,
    create_small_session,
    summarize_violations,
)


def _summary(session):
    return [
        (t.name, t.wins, t.losses, t.point_differential) for t in session["standings"]
    ]


@pytest.mark.parametrize("policy", list(RotationPolicy))
def test_generated_sessions_have_no_violations(policy):
    generator = create_club_night_session(policy, seed=7)

    session = generator.generate_complete_session()

    assert session["rounds"]
    assert session["violations"] == []
    assert summarize_violations(session) == {}
    for round_data in session["rounds"]:
        assert round_data["validation"].is_valid
        assert all(game.is_completed for game in round_data["games"])


def test_same_seed_same_session():
    first = create_small_session(seed=11).generate_complete_session()
    second = create_small_session(seed=11).generate_complete_session()

    assert _summary(first) == _summary(second)
    assert [p.rating for p in first["players"]] == [
        p.rating for p in second["players"]
    ]


def test_small_round_robin_completes():
    generator = create_small_session(RotationPolicy.ROUND_ROBIN, seed=3)

    session = generator.generate_complete_session()

    assert len(session["rounds"]) == 6
    assert session["round_robin_complete"]
    pairs = [g.pair_key for g in session["games"]]
    assert len(pairs) == len(set(pairs))


def test_speed_session_keeps_ratings():
    config = RSGConfig(
        num_players=24,
        num_rounds=6,
        num_teams=4,
        team_size=6,
        court_count=1,
        policy=RotationPolicy.SPEED,
        rating_distribution=RatingDistribution.UNIFORM,
        seed=5,
    )
    expected = [p.rating for p in PlayerFactory(config).create_players()]

    session = RandomSessionGenerator(config).generate_complete_session()

    assert [p.rating for p in session["players"]] == expected
    assert sum(p.games_played for p in session["players"]) == 6 * 12


def test_rated_session_is_zero_sum():
    config = RSGConfig(
        num_players=16,
        num_rounds=5,
        num_teams=4,
        team_size=4,
        court_count=2,
        policy=RotationPolicy.SWISS,
        result_pattern=ResultPattern.RANDOM,
        seed=9,
    )
    before = sum(p.rating for p in PlayerFactory(config).create_players())

    session = RandomSessionGenerator(config).generate_complete_session()

    assert sum(p.rating for p in session["players"]) == before


def test_scores_never_tie():
    config = RSGConfig(num_players=12, num_rounds=8, num_teams=6, team_size=2, seed=1)

    session = RandomSessionGenerator(config).generate_complete_session()

    for game in session["games"]:
        assert game.score_a != game.score_b
        assert max(game.score_a, game.score_b) == config.winning_score


def test_export_json_format():
    generator = create_small_session(seed=2)
    session = generator.generate_complete_session()

    data = json.loads(generator.export_json_format(session))

    assert data["session_config"]["policy"] == "king_of_court"
    assert len(data["players"]) == 16
    assert len(data["teams"]) == 4
    assert len(data["rounds"]) == len(session["rounds"])
    first_round = data["rounds"][0]
    assert first_round["rotation"]["matchups"][0]["court_number"] == 1
    assert first_round["games"][0]["status"] == "completed"
    assert [s["name"] for s in data["standings"]] == [
        t.name for t in session["standings"]
    ]
