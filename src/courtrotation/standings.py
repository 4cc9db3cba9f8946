"""Standings derived from the game log.

Every function here recomputes from the full list of games on each call, so
results never drift from the log and repeated calls are idempotent.
"""

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

from dataclasses import dataclass, replace
from typing import Dict, Iterable, List, Sequence, Set

from courtrotation.constants import SIDE_A, SIDE_B
from courtrotation.models.game import Game
from courtrotation.models.team import SessionTeam
from courtrotation.utils import setup_logger

logger = setup_logger(__name__)


@dataclass
class TeamRecord:
    """Win/loss record of one team."""

    wins: int = 0
    losses: int = 0
    point_differential: int = 0

    @property
    def games(self) -> int:
        return self.wins + self.losses

    def sort_key(self):
        """Descending sort key: more wins first, then larger differential."""
        return (-self.wins, -self.point_differential)


def completed_games(games: Iterable[Game]) -> List[Game]:
    return [g for g in games if g.is_completed]


def played_pairs(games: Iterable[Game]) -> Set[frozenset]:
    """Unordered team-id pairs with at least one completed game between them."""
    return {g.pair_key for g in games if g.is_completed}


def team_records(
    teams: Sequence[SessionTeam], games: Iterable[Game]
) -> Dict[str, TeamRecord]:
    """Win/loss/point-differential per team id from completed games.

    Games that reference a team outside ``teams`` are ignored. A missing score
    counts as zero.
    """
    records = {team.id: TeamRecord() for team in teams}

    for game in completed_games(games):
        record_a = records.get(game.team_a_id)
        record_b = records.get(game.team_b_id)
        diff = (game.score_a or 0) - (game.score_b or 0)

        if record_a is not None:
            if game.winner == SIDE_A:
                record_a.wins += 1
            elif game.winner == SIDE_B:
                record_a.losses += 1
            record_a.point_differential += diff

        if record_b is not None:
            if game.winner == SIDE_B:
                record_b.wins += 1
            elif game.winner == SIDE_A:
                record_b.losses += 1
            record_b.point_differential -= diff

    return records


def rank_teams(
    teams: Sequence[SessionTeam], records: Dict[str, TeamRecord]
) -> List[SessionTeam]:
    """Order teams by wins, then point differential; input order breaks ties."""
    return sorted(teams, key=lambda t: records[t.id].sort_key())


def calculate_standings(
    teams: Sequence[SessionTeam], games: Iterable[Game]
) -> List[SessionTeam]:
    """Return copies of the teams with derived aggregates, best team first.

    The input teams are not modified.
    """
    records = team_records(teams, games)
    standings = [
        replace(
            team,
            wins=records[team.id].wins,
            losses=records[team.id].losses,
            point_differential=records[team.id].point_differential,
        )
        for team in teams
    ]
    return sorted(
        standings, key=lambda t: (-t.wins, -t.point_differential)
    )


def total_pairings(team_count: int) -> int:
    """Number of distinct pairings among ``team_count`` teams."""
    return team_count * (team_count - 1) // 2


def is_round_robin_complete(
    teams: Sequence[SessionTeam], games: Iterable[Game]
) -> bool:
    """True once every pair of teams has at least one completed game.

    Extra games between the same pair (e.g. added by hand) are tolerated.
    """
    team_ids = {team.id for team in teams}
    pairs = {
        pair for pair in played_pairs(games) if len(pair) == 2 and pair <= team_ids
    }
    needed = total_pairings(len(teams))
    logger.debug(f"Round robin progress: {len(pairs)}/{needed} pairings played")
    return len(pairs) >= needed
