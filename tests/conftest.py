import pytest

from courtrotation.models import Game, Player, SessionTeam


@pytest.fixture
def make_teams():
    """Factory for teams with stable ids t0, t1, ... and optional rosters."""

    def _make(count, players_per_team=0, rating=1500):
        return [
            SessionTeam(
                name=f"Team {i + 1}",
                team_number=i + 1,
                id=f"t{i}",
                players=[
                    Player(f"P{i}-{j}", rating=rating, player_id=f"p{i}-{j}")
                    for j in range(players_per_team)
                ],
            )
            for i in range(count)
        ]

    return _make


@pytest.fixture
def play():
    """Factory for completed games: play(team_a, team_b, round, court, a, b)."""

    def _play(team_a, team_b, round_number, court_number=1, score_a=25, score_b=20):
        game = Game(
            team_a_id=team_a.id,
            team_b_id=team_b.id,
            court_number=court_number,
            round_number=round_number,
        )
        return game.with_result(score_a, score_b)

    return _play


@pytest.fixture
def play_round(play):
    """Complete every matchup of a RotationResult, side A winning by default."""

    def _play_round(result, winners=None, score=(25, 20)):
        games = []
        for matchup in result.matchups:
            a_wins = winners is None or matchup.team_a.id in winners
            score_a, score_b = score if a_wins else score[::-1]
            games.append(
                play(
                    matchup.team_a,
                    matchup.team_b,
                    result.round_number,
                    matchup.court_number,
                    score_a,
                    score_b,
                )
            )
        return games

    return _play_round