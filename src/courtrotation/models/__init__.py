"""Data model for Court Rotation sessions."""

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

from courtrotation.models.enums import GameStatus, RotationPolicy
from courtrotation.models.game import Game
from courtrotation.models.group import PlayerGroup
from courtrotation.models.player import Player
from courtrotation.models.round import RotationResult, RoundMatchup
from courtrotation.models.session_config import SessionConfig
from courtrotation.models.team import SessionTeam

__all__ = [
    "Game",
    "GameStatus",
    "Player",
    "PlayerGroup",
    "RotationPolicy",
    "RotationResult",
    "RoundMatchup",
    "SessionConfig",
    "SessionTeam",
]
