"""Team-average ELO rating model.

- Expected score: E = 1 / (1 + 10^((R_opp - R_team) / 400))
- Rating change:  delta = round(K * (S - E)), S = 1 for a win, 0 for a loss

Both sides are compared by their *average* rating, and the single delta is
added to every winning player and subtracted from every losing player.
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

import math
from dataclasses import dataclass
from typing import List, Sequence

from courtrotation.constants import (
    FAIRNESS_POINTS_PER_PERCENT,
    INITIAL_RATING,
    K_FACTOR,
    RATING_SCALE,
    SIDE_A,
    SIDE_B,
)
from courtrotation.exceptions import InvalidResultException
from courtrotation.models.enums import RotationPolicy
from courtrotation.models.player import Player
from courtrotation.utils import setup_logger

logger = setup_logger(__name__)


@dataclass
class RatingChange:
    """Rating movement of one player for one game."""

    player_id: str
    side: str
    won: bool
    rating_before: int
    rating_after: int

    @property
    def change(self) -> int:
        return self.rating_after - self.rating_before


@dataclass
class BalanceScore:
    """How evenly two rosters are matched."""

    avg_a: float
    avg_b: float
    difference: float
    fairness_percent: float


def round_half_away_from_zero(value: float) -> int:
    """Round to the nearest integer, .5 going away from zero.

    Keeps ``round(-x) == -round(x)`` so winner and loser deltas mirror.
    """
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def expected_score(rating: float, opponent_rating: float) -> float:
    """Probability that a side rated ``rating`` beats ``opponent_rating``."""
    return 1.0 / (1.0 + 10 ** ((opponent_rating - rating) / RATING_SCALE))


def rating_delta(team_avg: float, opponent_avg: float, won: bool) -> int:
    """Rating change for a side given both average ratings and the outcome.

    Args:
        team_avg: Average rating of the side being updated
        opponent_avg: Average rating of the opposing side
        won: Whether the side won

    Returns:
        Signed integer change, positive for a win
    """
    actual = 1.0 if won else 0.0
    return round_half_away_from_zero(
        K_FACTOR * (actual - expected_score(team_avg, opponent_avg))
    )


def should_apply_ratings(policy) -> bool:
    """Speed rotation is casual play; every other policy moves ratings."""
    return RotationPolicy.from_value(policy) != RotationPolicy.SPEED


def average_rating(players: Sequence[Player]) -> float:
    """Average rating of a roster, the starting rating for an empty one."""
    if not players:
        return float(INITIAL_RATING)
    return sum(p.rating for p in players) / len(players)


def calculate_balance_score(
    roster_a: Sequence[Player], roster_b: Sequence[Player]
) -> BalanceScore:
    """Compare two rosters; 100% fairness means equal average ratings."""
    avg_a = average_rating(roster_a)
    avg_b = average_rating(roster_b)
    difference = abs(avg_a - avg_b)
    fairness = max(0.0, 100.0 - difference / FAIRNESS_POINTS_PER_PERCENT)
    return BalanceScore(
        avg_a=avg_a, avg_b=avg_b, difference=difference, fairness_percent=fairness
    )


def apply_game_result(
    roster_a: Sequence[Player],
    roster_b: Sequence[Player],
    winner: str,
    policy=RotationPolicy.KING_OF_COURT,
) -> List[RatingChange]:
    """Apply a finished game to every player on both rosters.

    Averages are taken before any player is updated, so the order of the
    rosters does not affect the result. When the policy suppresses ratings
    the counters still move but ratings stay put.

    Args:
        roster_a: Players who played on side A
        roster_b: Players who played on side B
        winner: "A" or "B"
        policy: Rotation policy the game was played under

    Returns:
        One RatingChange per player, side A first

    Raises:
        InvalidResultException: If ``winner`` is not "A" or "B"
    """
    if winner not in (SIDE_A, SIDE_B):
        raise InvalidResultException(f"Winner must be 'A' or 'B', got {winner!r}")

    avg_a = average_rating(roster_a)
    avg_b = average_rating(roster_b)
    winning_avg, losing_avg = (avg_a, avg_b) if winner == SIDE_A else (avg_b, avg_a)

    delta = rating_delta(winning_avg, losing_avg, True)
    if not should_apply_ratings(policy):
        delta = 0

    logger.debug(
        f"Side {winner} wins ({winning_avg:.1f} vs {losing_avg:.1f}), delta {delta}"
    )

    changes = []
    for side, roster in ((SIDE_A, roster_a), (SIDE_B, roster_b)):
        won = side == winner
        for player in roster:
            before = player.rating
            _update_player(player, won, delta if won else -delta)
            changes.append(
                RatingChange(
                    player_id=player.id,
                    side=side,
                    won=won,
                    rating_before=before,
                    rating_after=player.rating,
                )
            )
    return changes


def _update_player(player: Player, won: bool, change: int) -> None:
    player.rating += change
    player.games_played += 1
    if won:
        player.wins += 1
        player.win_streak += 1
    else:
        player.losses += 1
        player.win_streak = 0
    player.best_win_streak = max(player.best_win_streak, player.win_streak)
    player.highest_rating = max(player.highest_rating, player.rating)
