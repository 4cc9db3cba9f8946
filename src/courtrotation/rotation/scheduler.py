"""Round scheduler: dispatches to one pure strategy per rotation policy.

Strategies keep no state between calls. Everything they remember about
earlier rounds is rebuilt from the game list on every call, so previewing a
round and generating it give the same matchups.
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

from typing import Callable, Dict, Iterable, Sequence

from courtrotation.models.enums import RotationPolicy
from courtrotation.models.game import Game
from courtrotation.models.round import RotationResult
from courtrotation.models.team import SessionTeam
from courtrotation.rotation.common import validate_round_inputs
from courtrotation.rotation.king_of_court import generate_king_of_court_round
from courtrotation.rotation.manual import generate_manual_round
from courtrotation.rotation.round_robin import generate_round_robin_round
from courtrotation.rotation.speed import generate_speed_round
from courtrotation.rotation.swiss import generate_swiss_round
from courtrotation.utils import setup_logger

logger = setup_logger(__name__)

RoundStrategy = Callable[
    [Sequence[SessionTeam], Iterable[Game], int, int], RotationResult
]

STRATEGIES: Dict[RotationPolicy, RoundStrategy] = {
    RotationPolicy.KING_OF_COURT: generate_king_of_court_round,
    RotationPolicy.ROUND_ROBIN: generate_round_robin_round,
    RotationPolicy.SWISS: generate_swiss_round,
    RotationPolicy.SPEED: generate_speed_round,
    RotationPolicy.MANUAL: generate_manual_round,
}


def next_round(
    teams: Sequence[SessionTeam],
    completed_games: Iterable[Game],
    policy,
    court_count: int,
    current_round: int,
) -> RotationResult:
    """Generate the matchups and bench for ``current_round``.

    The caller must not request a round while games of the current round are
    still pending or in progress. That is not checked here: only completed
    games are read, so open games in the list have no effect.

    Args:
        teams: Session teams, in the order that breaks ties
        completed_games: Game history (non-completed games are ignored)
        policy: A RotationPolicy or its string value
        court_count: Courts available this round
        current_round: 1-based number of the round to generate

    Returns:
        RotationResult; an empty matchup list is a valid answer

    Raises:
        InvalidPolicyException: If the policy is unknown
        InvalidRoundException: If the inputs cannot describe a round
    """
    rotation_policy = RotationPolicy.from_value(policy)
    validate_round_inputs(teams, court_count, current_round)

    games = list(completed_games)
    result = STRATEGIES[rotation_policy](teams, games, court_count, current_round)

    logger.info(
        f"{rotation_policy.display_name} round {current_round}: "
        f"{len(result.matchups)} matchup(s), {len(result.benched)} benched"
    )
    return result


def policy_display_name(policy) -> str:
    return RotationPolicy.from_value(policy).display_name


def policy_description(policy) -> str:
    return RotationPolicy.from_value(policy).description
