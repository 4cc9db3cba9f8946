"""Result recording for session games.

Turns a final score into a completed game and applies the rating model to
both rosters.
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

from typing import List, Sequence, Tuple

from courtrotation.models.enums import RotationPolicy
from courtrotation.models.game import Game
from courtrotation.models.player import Player
from courtrotation.rating.elo import RatingChange, apply_game_result
from courtrotation.utils import setup_logger

logger = setup_logger(__name__)


class ResultRecorder:
    """Handles recording and validating game results.

    This class is responsible for:
    - Validating the score line (no negative or level scores)
    - Producing the completed, immutable game record
    - Updating player ratings and counters, unless the policy suppresses
      rating changes
    """

    def __init__(self, policy=RotationPolicy.KING_OF_COURT):
        self.policy = RotationPolicy.from_value(policy)

    def record_result(
        self,
        game: Game,
        score_a: int,
        score_b: int,
        roster_a: Sequence[Player],
        roster_b: Sequence[Player],
        policy=None,
    ) -> Tuple[Game, List[RatingChange]]:
        """Record the final score of a game.

        Args:
            game: The pending or in-progress game
            score_a: Points for side A
            score_b: Points for side B
            roster_a: Players who played on side A
            roster_b: Players who played on side B
            policy: Policy in force for this game; defaults to the recorder's

        Returns:
            Tuple of (completed game, rating changes per player)

        Raises:
            InvalidResultException: If the game is already completed or the
                score cannot produce a winner
        """
        completed = game.with_result(score_a, score_b)
        active_policy = self.policy
        if policy is not None:
            active_policy = RotationPolicy.from_value(policy)
        changes = apply_game_result(roster_a, roster_b, completed.winner, active_policy)

        logger.info(
            f"Round {completed.round_number}, court {completed.court_number}: "
            f"{score_a}-{score_b}, side {completed.winner} wins"
        )
        return completed, changes
