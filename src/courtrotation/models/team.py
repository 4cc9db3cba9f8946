"""Session team model."""

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
from typing import Any, Dict, List

from courtrotation.models.player import Player
from courtrotation.utils import generate_id


@dataclass
class SessionTeam:
    """A roster that exists for the length of one session.

    ``wins``, ``losses`` and ``point_differential`` are derived values. They
    stay at zero on the caller's teams and are only filled in on the copies
    returned by :func:`courtrotation.standings.calculate_standings`.

    Attributes:
        name: Display name, e.g. "Team 3"
        color: Color tag used for display
        team_number: 1-based creation order
        players: Players on the roster (order irrelevant)
        id: Stable identity used by games
    """

    name: str
    color: str = ""
    team_number: int = 0
    players: List[Player] = field(default_factory=list)
    id: str = field(default_factory=lambda: generate_id("SessionTeam"))
    wins: int = 0
    losses: int = 0
    point_differential: int = 0

    @property
    def average_rating(self) -> float:
        from courtrotation.rating.elo import average_rating

        return average_rating(self.players)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize team to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "color": self.color,
            "team_number": self.team_number,
            "player_ids": [p.id for p in self.players],
            "wins": self.wins,
            "losses": self.losses,
            "point_differential": self.point_differential,
        }

    @classmethod
    def from_dict(
        cls, data: Dict[str, Any], players_by_id: Dict[str, Player]
    ) -> "SessionTeam":
        """Deserialize team from dictionary, resolving players by id."""
        return cls(
            name=data["name"],
            color=data.get("color", ""),
            team_number=data.get("team_number", 0),
            players=[
                players_by_id[pid]
                for pid in data.get("player_ids", [])
                if pid in players_by_id
            ],
            id=data.get("id") or generate_id("SessionTeam"),
        )

    def __repr__(self) -> str:
        return f"SessionTeam(name={self.name!r}, id={self.id!r})"
