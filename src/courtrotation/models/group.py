"""Player affinity groups that the balancer tries to keep together."""

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

from courtrotation.constants import INITIAL_RATING
from courtrotation.models.player import Player
from courtrotation.utils import generate_id


@dataclass
class PlayerGroup:
    """Players who asked to be placed on the same roster.

    Placement is best effort: a group that does not fit into any roster's
    remaining capacity is split and drafted player by player.

    Attributes:
        name: Display name of the group
        members: Players in the group
        id: Unique identifier
    """

    name: str
    members: List[Player] = field(default_factory=list)
    id: str = field(default_factory=lambda: generate_id("PlayerGroup"))

    @property
    def size(self) -> int:
        return len(self.members)

    @property
    def average_rating(self) -> float:
        if not self.members:
            return float(INITIAL_RATING)
        return sum(p.rating for p in self.members) / len(self.members)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize group to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "members": [p.to_dict() for p in self.members],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PlayerGroup":
        """Deserialize group from dictionary."""
        return cls(
            name=data.get("name", "Group"),
            members=[Player.from_dict(p) for p in data.get("members", [])],
            id=data.get("id") or generate_id("PlayerGroup"),
        )
