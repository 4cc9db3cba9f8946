"""Round generation for Court Rotation.

Provides one strategy per rotation policy and the ``next_round`` dispatcher.
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

from courtrotation.rotation.king_of_court import generate_king_of_court_round
from courtrotation.rotation.manual import generate_manual_round
from courtrotation.rotation.round_robin import (
    generate_round_robin_round,
    remaining_pairings,
)
from courtrotation.rotation.scheduler import (
    STRATEGIES,
    next_round,
    policy_description,
    policy_display_name,
)
from courtrotation.rotation.speed import generate_speed_round
from courtrotation.rotation.swiss import generate_swiss_round

__all__ = [
    "STRATEGIES",
    "generate_king_of_court_round",
    "generate_manual_round",
    "generate_round_robin_round",
    "generate_speed_round",
    "generate_swiss_round",
    "next_round",
    "policy_description",
    "policy_display_name",
    "remaining_pairings",
]
