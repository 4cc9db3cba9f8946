import pytest

from courtrotation.exceptions import InvalidPolicyException, InvalidRoundException
from courtrotation.models import Game, RotationPolicy
from courtrotation.rotation import (
    STRATEGIES,
    next_round,
    policy_description,
    policy_display_name,
    remaining_pairings,
)
from courtrotation.standings import is_round_robin_complete


def _ids(teams):
    return [team.id for team in teams]


def _pairs(result):
    return [(m.team_a.id, m.team_b.id, m.court_number) for m in result.matchups]


@pytest.mark.parametrize("policy", list(RotationPolicy))
def test_round_one_lines_teams_up(make_teams, policy):
    teams = make_teams(5)

    result = next_round(teams, [], policy, court_count=2, current_round=1)

    assert _pairs(result) == [("t0", "t1", 1), ("t2", "t3", 2)]
    assert _ids(result.benched) == ["t4"]
    assert result.round_number == 1


def test_round_one_with_more_courts_than_pairs(make_teams):
    teams = make_teams(3)

    result = next_round(teams, [], "king_of_court", court_count=4, current_round=1)

    assert _pairs(result) == [("t0", "t1", 1)]
    assert _ids(result.benched) == ["t2"]


def test_king_of_court_winner_stays(make_teams, play):
    teams = make_teams(4)
    first = next_round(teams, [], "king_of_court", 1, 1)
    assert _pairs(first) == [("t0", "t1", 1)]
    assert _ids(first.benched) == ["t2", "t3"]

    games = [play(teams[0], teams[1], 1)]
    second = next_round(teams, games, "king_of_court", 1, 2)

    assert _pairs(second) == [("t0", "t2", 1)]
    assert _ids(second.benched) == ["t1", "t3"]


def test_king_of_court_losers_benched_before_overflow(make_teams, play_round):
    teams = make_teams(6)
    first = next_round(teams, [], "king_of_court", 2, 1)
    games = play_round(first, winners={"t1", "t2"})

    second = next_round(teams, games, "king_of_court", 2, 2)

    # Active pool is t1, t2 (winners) then t4, t5 (sat out)
    assert _pairs(second) == [("t1", "t2", 1), ("t4", "t5", 2)]
    assert _ids(second.benched) == ["t0", "t3"]

    third_games = games + play_round(second, winners={"t1", "t4"})
    third = next_round(teams, third_games, "king_of_court", 1, 3)
    assert _pairs(third) == [("t1", "t4", 1)]
    assert _ids(third.benched) == ["t2", "t5", "t0", "t3"]


def test_speed_winners_meet_waiting_teams(make_teams, play_round):
    teams = make_teams(6)
    first = next_round(teams, [], "speed", 2, 1)
    assert len(first.matchups) == 2
    assert _ids(first.benched) == ["t4", "t5"]

    games = play_round(first, winners={"t0", "t2"})
    second = next_round(teams, games, "speed", 2, 2)

    assert _pairs(second) == [("t0", "t4", 1), ("t2", "t5", 2)]
    assert _ids(second.benched) == ["t1", "t3"]


def test_speed_leftover_winner_goes_to_front(make_teams, play_round):
    teams = make_teams(5)
    first = next_round(teams, [], "speed", 2, 1)
    games = play_round(first, winners={"t0", "t2"})

    second = next_round(teams, games, "speed", 2, 2)

    assert _pairs(second) == [("t0", "t4", 1)]
    assert _ids(second.benched) == ["t2", "t1", "t3"]


def test_speed_winners_without_challengers_play_each_other(make_teams, play_round):
    teams = make_teams(6)
    first = next_round(teams, [], "speed", 3, 1)
    games = play_round(first)

    # One court fewer than last round
    second = next_round(teams, games, "speed", 2, 2)

    assert _pairs(second) == [("t0", "t2", 1)]
    assert _ids(second.benched) == ["t4", "t1", "t3", "t5"]


def test_speed_without_results_lines_up_again(make_teams):
    teams = make_teams(6)
    pending = Game(team_a_id="t4", team_b_id="t5", court_number=1, round_number=1)

    for history in ([], [pending]):
        result = next_round(teams, history, "speed", 2, 2)

        assert _pairs(result) == [("t0", "t1", 1), ("t2", "t3", 2)]
        assert _ids(result.benched) == ["t4", "t5"]


def test_round_robin_pairs_greedily(make_teams, play_round):
    teams = make_teams(4)
    first = next_round(teams, [], "round_robin", 2, 1)
    games = play_round(first)

    second = next_round(teams, games, "round_robin", 2, 2)
    assert _pairs(second) == [("t0", "t2", 1), ("t1", "t3", 2)]
    games += play_round(second)

    third = next_round(teams, games, "round_robin", 2, 3)
    assert _pairs(third) == [("t0", "t3", 1), ("t1", "t2", 2)]
    games += play_round(third)

    fourth = next_round(teams, games, "round_robin", 2, 4)
    assert fourth.is_empty
    assert _ids(fourth.benched) == _ids(teams)
    assert is_round_robin_complete(teams, games)


def test_round_robin_never_repeats_a_pair(make_teams, play_round):
    teams = make_teams(7)
    games = []
    seen = set()

    for round_number in range(1, 30):
        result = next_round(teams, games, "round_robin", 3, round_number)
        if result.is_empty:
            break
        for matchup in result.matchups:
            assert matchup.team_ids not in seen
            seen.add(matchup.team_ids)
        games += play_round(result)

    assert len(seen) == 21
    assert is_round_robin_complete(teams, games)
    assert remaining_pairings(teams, games) == []


def test_swiss_pairs_by_record(make_teams, play):
    teams = make_teams(4)
    games = [
        play(teams[0], teams[1], 1, 1, 25, 20),
        play(teams[2], teams[3], 1, 2, 15, 25),
    ]

    result = next_round(teams, games, "swiss", 2, 2)

    # t3 (1-0, +10) and t0 (1-0, +5) lead, t1 and t2 trail
    assert _pairs(result) == [("t3", "t0", 1), ("t1", "t2", 2)]
    assert result.benched == []


def test_swiss_avoids_rematches(make_teams, play):
    teams = make_teams(4)
    games = [
        play(teams[0], teams[1], 1, 1, 25, 10),
        play(teams[2], teams[3], 1, 2, 25, 20),
        play(teams[0], teams[2], 2, 1, 25, 23),
        play(teams[1], teams[3], 2, 2, 25, 21),
    ]

    result = next_round(teams, games, "swiss", 2, 3)

    played = {g.pair_key for g in games}
    assert all(m.team_ids not in played for m in result.matchups)
    assert _pairs(result) == [("t0", "t3", 1), ("t2", "t1", 2)]


def test_swiss_benches_teams_without_fresh_opponents(make_teams, play):
    teams = make_teams(2)
    games = [play(teams[0], teams[1], 1)]

    result = next_round(teams, games, "swiss", 1, 2)

    assert result.is_empty
    assert _ids(result.benched) == ["t0", "t1"]


def test_manual_always_lines_up(make_teams, play):
    teams = make_teams(4)
    games = [play(teams[2], teams[3], 1)]

    result = next_round(teams, games, "manual", 1, 5)

    assert _pairs(result) == [("t0", "t1", 1)]
    assert _ids(result.benched) == ["t2", "t3"]
    assert result.round_number == 5


def test_open_games_are_not_history(make_teams):
    teams = make_teams(4)
    pending = Game(team_a_id="t2", team_b_id="t3", court_number=1, round_number=1)

    result = next_round(teams, [pending.start()], "king_of_court", 1, 2)

    assert _pairs(result) == [("t0", "t1", 1)]
    assert _ids(result.benched) == ["t2", "t3"]


@pytest.mark.parametrize("policy", list(RotationPolicy))
def test_rounds_partition_teams(make_teams, play_round, policy):
    teams = make_teams(7)
    games = []

    for round_number in range(1, 9):
        court_count = 3 if round_number % 3 else 2
        result = next_round(teams, games, policy, court_count, round_number)

        matched = _ids(result.matched_teams)
        benched = _ids(result.benched)
        assert len(matched) == len(set(matched))
        assert not set(matched) & set(benched)
        assert sorted(matched + benched) == sorted(_ids(teams))
        assert [m.court_number for m in result.matchups] == list(
            range(1, len(result.matchups) + 1)
        )
        assert len(result.matchups) <= court_count

        games += play_round(result, winners={t.id for t in teams[::2]})


def test_next_round_does_not_mutate_inputs(make_teams, play_round):
    teams = make_teams(4)
    games = play_round(next_round(teams, [], "swiss", 2, 1))
    before = (list(teams), list(games))

    next_round(teams, games, "swiss", 2, 2)

    assert (teams, games) == before
    assert all(t.wins == 0 and t.losses == 0 for t in teams)


def test_invalid_inputs_fail_fast(make_teams):
    teams = make_teams(4)

    with pytest.raises(InvalidRoundException):
        next_round(teams[:1], [], "king_of_court", 1, 1)
    with pytest.raises(InvalidRoundException):
        next_round(teams, [], "king_of_court", 0, 1)
    with pytest.raises(InvalidRoundException):
        next_round(teams, [], "king_of_court", 1, 0)
    with pytest.raises(InvalidRoundException):
        next_round(teams + [teams[0]], [], "king_of_court", 1, 1)
    with pytest.raises(InvalidPolicyException):
        next_round(teams, [], "ladder", 1, 1)


def test_every_policy_has_a_strategy():
    assert set(STRATEGIES) == set(RotationPolicy)


def test_policy_labels():
    assert policy_display_name("king_of_court") == "King of the Court"
    assert policy_display_name(RotationPolicy.SWISS) == "Swiss (Winners vs Winners)"
    assert "no rating changes" in policy_description("speed")
    assert RotationPolicy.from_value(" Round_Robin ") is RotationPolicy.ROUND_ROBIN
