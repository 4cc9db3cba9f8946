"""Game model: one matchup between two session teams on a court."""

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

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Optional

from courtrotation.constants import SIDE_A, SIDE_B
from courtrotation.exceptions import InvalidResultException
from courtrotation.models.enums import GameStatus
from courtrotation.utils import generate_id


@dataclass(frozen=True)
class Game:
    """A scheduled or finished game.

    Games are immutable: recording a result produces a new ``Game`` through
    :meth:`with_result`. ``team_a_id`` / ``team_b_id`` never change over the
    lifetime of a game.

    Attributes:
        team_a_id: Id of the team on side A
        team_b_id: Id of the team on side B
        court_number: 1-based court number
        round_number: 1-based round number
        status: Lifecycle state
        score_a: Points scored by side A once completed
        score_b: Points scored by side B once completed
        winner: "A" or "B" once completed
        id: Unique identifier
    """

    team_a_id: str
    team_b_id: str
    court_number: int
    round_number: int
    status: GameStatus = GameStatus.PENDING
    score_a: Optional[int] = None
    score_b: Optional[int] = None
    winner: Optional[str] = None
    id: str = field(default_factory=lambda: generate_id("Game"))

    @property
    def is_completed(self) -> bool:
        return self.status == GameStatus.COMPLETED

    @property
    def is_open(self) -> bool:
        """True while the game is pending or in progress."""
        return self.status != GameStatus.COMPLETED

    @property
    def pair_key(self) -> frozenset:
        """Order-independent key for the two teams."""
        return frozenset({self.team_a_id, self.team_b_id})

    @property
    def winner_id(self) -> Optional[str]:
        if self.winner == SIDE_A:
            return self.team_a_id
        if self.winner == SIDE_B:
            return self.team_b_id
        return None

    @property
    def loser_id(self) -> Optional[str]:
        if self.winner == SIDE_A:
            return self.team_b_id
        if self.winner == SIDE_B:
            return self.team_a_id
        return None

    def involves(self, team_id: str) -> bool:
        return team_id in (self.team_a_id, self.team_b_id)

    def start(self) -> "Game":
        """Return a copy of this game marked as in progress."""
        if self.is_completed:
            raise InvalidResultException(f"Game {self.id} is already completed")
        return replace(self, status=GameStatus.IN_PROGRESS)

    def with_result(self, score_a: int, score_b: int) -> "Game":
        """Return a completed copy of this game carrying the final score.

        Raises:
            InvalidResultException: If the game is already completed, a score
                is negative, or the scores are level
        """
        if self.is_completed:
            raise InvalidResultException(f"Game {self.id} is already completed")
        if score_a < 0 or score_b < 0:
            raise InvalidResultException(
                f"Scores must be non-negative, got {score_a}-{score_b}"
            )
        if score_a == score_b:
            raise InvalidResultException(
                f"Game {self.id} cannot end level at {score_a}-{score_b}"
            )

        return replace(
            self,
            status=GameStatus.COMPLETED,
            score_a=score_a,
            score_b=score_b,
            winner=SIDE_A if score_a > score_b else SIDE_B,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize game to dictionary."""
        return {
            "id": self.id,
            "team_a_id": self.team_a_id,
            "team_b_id": self.team_b_id,
            "court_number": self.court_number,
            "round_number": self.round_number,
            "status": self.status.value,
            "score_a": self.score_a,
            "score_b": self.score_b,
            "winner": self.winner,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Game":
        """Deserialize game from dictionary."""
        return cls(
            team_a_id=data["team_a_id"],
            team_b_id=data["team_b_id"],
            court_number=data["court_number"],
            round_number=data["round_number"],
            status=GameStatus(data.get("status", GameStatus.PENDING.value)),
            score_a=data.get("score_a"),
            score_b=data.get("score_b"),
            winner=data.get("winner"),
            id=data.get("id") or generate_id("Game"),
        )
