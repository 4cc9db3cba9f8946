"""Manual: a starting suggestion the operator rearranges by hand."""

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

from typing import Iterable, Sequence

from courtrotation.models.game import Game
from courtrotation.models.round import RotationResult
from courtrotation.models.team import SessionTeam
from courtrotation.rotation.common import line_up


def generate_manual_round(
    teams: Sequence[SessionTeam],
    completed_games: Iterable[Game],
    court_count: int,
    current_round: int,
) -> RotationResult:
    """Suggest teams in list order; history is not consulted."""
    return line_up(teams, court_count, current_round)
