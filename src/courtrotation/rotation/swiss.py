"""Swiss: teams with similar records play each other."""

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

from typing import Iterable, List, Sequence, Set

from courtrotation.models.game import Game
from courtrotation.models.round import RotationResult, RoundMatchup
from courtrotation.models.team import SessionTeam
from courtrotation.rotation.common import bench_remaining, line_up
from courtrotation.standings import played_pairs, rank_teams, team_records
from courtrotation.utils import setup_logger

logger = setup_logger(__name__)


def generate_swiss_round(
    teams: Sequence[SessionTeam],
    completed_games: Iterable[Game],
    court_count: int,
    current_round: int,
) -> RotationResult:
    """Schedule a Swiss round.

    Teams are ranked by wins then point differential (ties keep list order).
    Walking down the ranking, each unscheduled team takes the nearest team
    below it that is unscheduled and that it has not played yet. Teams left
    without a fresh opponent are benched.
    """
    if current_round == 1:
        return line_up(teams, court_count, current_round)

    games = list(completed_games)
    ranked = rank_teams(teams, team_records(teams, games))
    played = played_pairs(games)

    matchups: List[RoundMatchup] = []
    scheduled: Set[str] = set()

    for i, team_a in enumerate(ranked):
        if len(matchups) >= court_count:
            break
        if team_a.id in scheduled:
            continue

        for team_b in ranked[i + 1 :]:
            if team_b.id in scheduled:
                continue
            if frozenset({team_a.id, team_b.id}) in played:
                continue
            matchups.append(
                RoundMatchup(
                    team_a=team_a, team_b=team_b, court_number=len(matchups) + 1
                )
            )
            scheduled.update((team_a.id, team_b.id))
            break

    logger.debug(f"Round {current_round}: {len(matchups)} Swiss pairing(s)")
    return RotationResult(
        matchups=matchups,
        benched=bench_remaining(teams, matchups),
        round_number=current_round,
    )
