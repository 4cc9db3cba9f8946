"""Round robin: every team meets every other team once."""

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

from itertools import combinations
from typing import Iterable, List, Sequence, Set, Tuple

from courtrotation.models.game import Game
from courtrotation.models.round import RotationResult, RoundMatchup
from courtrotation.models.team import SessionTeam
from courtrotation.rotation.common import bench_remaining, line_up
from courtrotation.standings import played_pairs
from courtrotation.utils import setup_logger

logger = setup_logger(__name__)


def remaining_pairings(
    teams: Sequence[SessionTeam], completed_games: Iterable[Game]
) -> List[Tuple[SessionTeam, SessionTeam]]:
    """Unplayed pairs in generation order: i ascending, then j > i ascending."""
    played = played_pairs(completed_games)
    return [
        (team_a, team_b)
        for team_a, team_b in combinations(teams, 2)
        if frozenset({team_a.id, team_b.id}) not in played
    ]


def generate_round_robin_round(
    teams: Sequence[SessionTeam],
    completed_games: Iterable[Game],
    court_count: int,
    current_round: int,
) -> RotationResult:
    """Schedule a round robin round.

    Unplayed pairs are taken greedily in generation order, skipping any pair
    with a team already on court this round, until the courts are full. An
    empty result means no unplayed pair fits; use
    :func:`courtrotation.standings.is_round_robin_complete` to tell whether
    the round robin is finished.
    """
    if current_round == 1:
        return line_up(teams, court_count, current_round)

    remaining = remaining_pairings(teams, completed_games)
    matchups: List[RoundMatchup] = []
    scheduled: Set[str] = set()

    for team_a, team_b in remaining:
        if len(matchups) >= court_count:
            break
        if team_a.id in scheduled or team_b.id in scheduled:
            continue
        matchups.append(
            RoundMatchup(team_a=team_a, team_b=team_b, court_number=len(matchups) + 1)
        )
        scheduled.update((team_a.id, team_b.id))

    logger.debug(
        f"Round {current_round}: {len(remaining)} pairing(s) left, "
        f"{len(matchups)} scheduled"
    )
    return RotationResult(
        matchups=matchups,
        benched=bench_remaining(teams, matchups),
        round_number=current_round,
    )
