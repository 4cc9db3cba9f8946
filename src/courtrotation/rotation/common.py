"""Helpers shared by the rotation policies."""

# Court Rotation
# Copyright (C) 2025  Court Rotation developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

from dataclasses import dataclass, field
from typing import Iterable, List, Sequence, Set

from courtrotation.constants import TEAMS_PER_COURT
from courtrotation.exceptions import InvalidRoundException
from courtrotation.models.game import Game
from courtrotation.models.round import RotationResult, RoundMatchup
from courtrotation.models.team import SessionTeam
from courtrotation.type_hints import TeamIndex


@dataclass
class PreviousRound:
    """How each team fared in the round before the one being scheduled.

    Attributes:
        winners: Winning teams in game order
        losers: Losing teams in game order
        sat_out: Teams with no completed game that round, in team-list order
    """

    winners: List[SessionTeam] = field(default_factory=list)
    losers: List[SessionTeam] = field(default_factory=list)
    sat_out: List[SessionTeam] = field(default_factory=list)


def index_teams(teams: Sequence[SessionTeam]) -> TeamIndex:
    """Map team id to team, built once per call."""
    return {team.id: team for team in teams}


def validate_round_inputs(
    teams: Sequence[SessionTeam], court_count: int, current_round: int
) -> None:
    """Reject inputs no policy can schedule.

    Raises:
        InvalidRoundException: On fewer than two teams, duplicate team ids,
            a non-positive court count or a round number below 1
    """
    if len(teams) < TEAMS_PER_COURT:
        raise InvalidRoundException(
            f"Need at least {TEAMS_PER_COURT} teams to schedule a round, "
            f"got {len(teams)}"
        )
    if len(index_teams(teams)) != len(teams):
        raise InvalidRoundException("Team list contains duplicate team ids")
    if court_count < 1:
        raise InvalidRoundException(
            f"Court count must be positive, got {court_count}"
        )
    if current_round < 1:
        raise InvalidRoundException(
            f"Rounds are numbered from 1, got {current_round}"
        )


def pair_in_order(
    teams: Sequence[SessionTeam], court_count: int, first_court: int = 1
) -> List[RoundMatchup]:
    """Consecutive pairs (0 v 1, 2 v 3, ...) until the courts run out."""
    matchups = []
    for i in range(0, len(teams) - 1, 2):
        if len(matchups) >= court_count:
            break
        matchups.append(
            RoundMatchup(
                team_a=teams[i],
                team_b=teams[i + 1],
                court_number=first_court + len(matchups),
            )
        )
    return matchups


def line_up(
    teams: Sequence[SessionTeam], court_count: int, round_number: int
) -> RotationResult:
    """Pair teams in list order, two per court; the rest are benched."""
    matchups = pair_in_order(teams, court_count)
    return RotationResult(
        matchups=matchups,
        benched=list(teams[len(matchups) * 2 :]),
        round_number=round_number,
    )


def scheduled_ids(matchups: Iterable[RoundMatchup]) -> Set[str]:
    ids: Set[str] = set()
    for matchup in matchups:
        ids.update(matchup.team_ids)
    return ids


def bench_remaining(
    teams: Sequence[SessionTeam], matchups: Sequence[RoundMatchup]
) -> List[SessionTeam]:
    """Teams without a court, in team-list order."""
    taken = scheduled_ids(matchups)
    return [team for team in teams if team.id not in taken]


def previous_round(
    teams: Sequence[SessionTeam], games: Iterable[Game], round_number: int
) -> PreviousRound:
    """Split teams by their completed result in ``round_number``.

    Only completed games count. A team is classified by the first completed
    game it appears in; games naming a team outside ``teams`` are skipped, so
    every team lands in exactly one of the three lists.
    """
    index = index_teams(teams)
    outcome = PreviousRound()
    seen: Set[str] = set()

    for game in games:
        if not game.is_completed or game.round_number != round_number:
            continue
        winner_id, loser_id = game.winner_id, game.loser_id
        if winner_id not in index or loser_id not in index:
            continue
        if winner_id == loser_id or winner_id in seen or loser_id in seen:
            continue

        outcome.winners.append(index[winner_id])
        outcome.losers.append(index[loser_id])
        seen.update((winner_id, loser_id))

    outcome.sat_out = [team for team in teams if team.id not in seen]
    return outcome
