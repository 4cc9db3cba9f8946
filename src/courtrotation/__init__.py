"""Court Rotation - team balancing and round scheduling for court sports."""

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

from courtrotation.balancing import balance_teams, create_session_teams
from courtrotation.exceptions import CourtRotationException
from courtrotation.models import (
    Game,
    GameStatus,
    Player,
    PlayerGroup,
    RotationPolicy,
    RotationResult,
    RoundMatchup,
    SessionConfig,
    SessionTeam,
)
from courtrotation.rating import apply_game_result, rating_delta, should_apply_ratings
from courtrotation.rotation import next_round
from courtrotation.session import RoundManager
from courtrotation.standings import calculate_standings, is_round_robin_complete

__version__ = "0.1.0"

__all__ = [
    "CourtRotationException",
    "Game",
    "GameStatus",
    "Player",
    "PlayerGroup",
    "RotationPolicy",
    "RotationResult",
    "RoundManager",
    "RoundMatchup",
    "SessionConfig",
    "SessionTeam",
    "apply_game_result",
    "balance_teams",
    "calculate_standings",
    "create_session_teams",
    "is_round_robin_complete",
    "next_round",
    "rating_delta",
    "should_apply_ratings",
]
