"""Enumerations used by the data model."""

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

from enum import Enum

from courtrotation.constants import (
    POLICY_DESCRIPTIONS,
    POLICY_KING_OF_COURT,
    POLICY_MANUAL,
    POLICY_NAMES,
    POLICY_ROUND_ROBIN,
    POLICY_SPEED,
    POLICY_SWISS,
    STATUS_COMPLETED,
    STATUS_IN_PROGRESS,
    STATUS_PENDING,
)
from courtrotation.exceptions import InvalidPolicyException


class GameStatus(Enum):
    """Lifecycle of a game on court."""

    PENDING = STATUS_PENDING
    IN_PROGRESS = STATUS_IN_PROGRESS
    COMPLETED = STATUS_COMPLETED


class RotationPolicy(Enum):
    """Algorithm governing how teams are re-paired between rounds."""

    KING_OF_COURT = POLICY_KING_OF_COURT
    ROUND_ROBIN = POLICY_ROUND_ROBIN
    SWISS = POLICY_SWISS
    SPEED = POLICY_SPEED
    MANUAL = POLICY_MANUAL

    @classmethod
    def from_value(cls, value) -> "RotationPolicy":
        """Resolve a policy from an enum member or its string value."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            valid = ", ".join(p.value for p in cls)
            raise InvalidPolicyException(
                f"Unknown rotation policy '{value}' (expected one of: {valid})"
            ) from None

    @property
    def display_name(self) -> str:
        return POLICY_NAMES[self.value]

    @property
    def description(self) -> str:
        return POLICY_DESCRIPTIONS[self.value]
