"""Type aliases shared across Court Rotation."""

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

from typing import TYPE_CHECKING, Dict, List, Tuple

if TYPE_CHECKING:
    from courtrotation.models.player import Player
    from courtrotation.models.team import SessionTeam

# Players on one side of a court
Roster = List["Player"]
# Both rosters of one court, (side A, side B)
RosterPair = Tuple[Roster, Roster]
# Balancer output, one pair per court in court order
CourtRosters = List[RosterPair]

TeamIndex = Dict[str, "SessionTeam"]
