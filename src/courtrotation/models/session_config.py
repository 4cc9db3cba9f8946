"""Configuration settings for a play session."""

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

from dataclasses import dataclass
from typing import Any, Dict

from courtrotation.constants import (
    DEFAULT_COURT_COUNT,
    DEFAULT_POLICY,
    DEFAULT_TEAM_SIZE,
    TEAMS_PER_COURT,
)
from courtrotation.exceptions import InvalidRoundException
from courtrotation.models.enums import RotationPolicy


@dataclass
class SessionConfig:
    """Configuration settings for a session.

    Attributes:
        name: Session name
        court_count: Number of courts available
        rotation_policy: Policy used to generate rounds
        team_count: Number of session teams to form
        team_size: Target players per team
        use_groups: Keep player groups together when forming teams
        use_positions: Spread court positions evenly when forming teams
    """

    name: str = "Untitled Session"
    court_count: int = DEFAULT_COURT_COUNT
    rotation_policy: RotationPolicy = RotationPolicy(DEFAULT_POLICY)
    team_count: int = DEFAULT_COURT_COUNT * TEAMS_PER_COURT
    team_size: int = DEFAULT_TEAM_SIZE
    use_groups: bool = False
    use_positions: bool = False

    def __post_init__(self):
        self.rotation_policy = RotationPolicy.from_value(self.rotation_policy)
        if self.court_count < 1:
            raise InvalidRoundException(
                f"Court count must be positive, got {self.court_count}"
            )
        if self.team_count < TEAMS_PER_COURT:
            raise InvalidRoundException(
                f"Need at least {TEAMS_PER_COURT} teams, got {self.team_count}"
            )
        if self.team_size < 1:
            raise InvalidRoundException(
                f"Team size must be positive, got {self.team_size}"
            )

    @property
    def applies_ratings(self) -> bool:
        from courtrotation.rating.elo import should_apply_ratings

        return should_apply_ratings(self.rotation_policy)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize configuration to dictionary."""
        return {
            "name": self.name,
            "court_count": self.court_count,
            "rotation_policy": self.rotation_policy.value,
            "team_count": self.team_count,
            "team_size": self.team_size,
            "use_groups": self.use_groups,
            "use_positions": self.use_positions,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SessionConfig":
        """Deserialize configuration from dictionary."""
        return cls(
            name=data.get("name", "Untitled Session"),
            court_count=data.get("court_count", DEFAULT_COURT_COUNT),
            rotation_policy=data.get("rotation_policy", DEFAULT_POLICY),
            team_count=data.get("team_count", DEFAULT_COURT_COUNT * TEAMS_PER_COURT),
            team_size=data.get("team_size", DEFAULT_TEAM_SIZE),
            use_groups=data.get("use_groups", False),
            use_positions=data.get("use_positions", False),
        )
