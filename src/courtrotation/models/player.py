"""Player model: a rated participant who can be drafted onto a roster."""

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

from typing import Any, Dict, Optional

from courtrotation.constants import INITIAL_RATING, PLAYER_POSITIONS, POSITION_ANY
from courtrotation.utils import generate_id, setup_logger

logger = setup_logger(__name__)


class Player:
    """Represents a checked-in player.

    Rating and the running counters are only changed by
    :func:`courtrotation.rating.elo.apply_game_result`; the balancer and the
    round scheduler read them but never write.

    Attributes:
        id: Unique identifier for the player
        name: Display name
        rating: Skill rating (ELO scale)
        games_played: Completed games counted for this player
        wins: Games won
        losses: Games lost
        win_streak: Current consecutive wins
        best_win_streak: Longest streak seen
        highest_rating: Peak rating reached
        position: Preferred court position, ``any`` when not set
        is_guest: True for temporary guest players
    """

    def __init__(
        self,
        name: str,
        rating: Optional[int] = None,
        position: Optional[str] = None,
        is_guest: bool = False,
        player_id: Optional[str] = None,
        **kwargs,
    ) -> None:
        self.id: str = player_id or generate_id(self.__class__.__name__)
        self.name: str = name
        self.rating: int = rating if rating is not None else INITIAL_RATING
        self.position: str = self._validate_position(position)
        self.is_guest: bool = is_guest

        self.games_played: int = kwargs.get("games_played", 0)
        self.wins: int = kwargs.get("wins", 0)
        self.losses: int = kwargs.get("losses", 0)
        self.win_streak: int = kwargs.get("win_streak", 0)
        self.best_win_streak: int = kwargs.get("best_win_streak", 0)
        self.highest_rating: int = kwargs.get("highest_rating") or self.rating

    def _validate_position(self, position: Optional[str]) -> str:
        if not position:
            return POSITION_ANY
        normalized = position.strip().lower()
        if normalized not in PLAYER_POSITIONS:
            logger.warning(
                f"Unknown position '{position}' for {self.name}, using '{POSITION_ANY}'"
            )
            return POSITION_ANY
        return normalized

    @property
    def win_rate(self) -> float:
        """Fraction of games won, 0.0 before the first game."""
        if self.games_played == 0:
            return 0.0
        return self.wins / self.games_played

    def to_dict(self) -> Dict[str, Any]:
        """Serialize player to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "rating": self.rating,
            "position": self.position,
            "is_guest": self.is_guest,
            "games_played": self.games_played,
            "wins": self.wins,
            "losses": self.losses,
            "win_streak": self.win_streak,
            "best_win_streak": self.best_win_streak,
            "highest_rating": self.highest_rating,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Player":
        """Deserialize player from dictionary."""
        return cls(
            name=data["name"],
            rating=data.get("rating"),
            position=data.get("position"),
            is_guest=data.get("is_guest", False),
            player_id=data.get("id"),
            games_played=data.get("games_played", 0),
            wins=data.get("wins", 0),
            losses=data.get("losses", 0),
            win_streak=data.get("win_streak", 0),
            best_win_streak=data.get("best_win_streak", 0),
            highest_rating=data.get("highest_rating"),
        )

    def __repr__(self) -> str:
        return f"Player(name={self.name!r}, rating={self.rating})"
