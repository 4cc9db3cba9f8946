"""King of the Court: winners stay on, losers rotate to the bench."""

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
from courtrotation.rotation.common import line_up, pair_in_order, previous_round
from courtrotation.utils import setup_logger

logger = setup_logger(__name__)


def generate_king_of_court_round(
    teams: Sequence[SessionTeam],
    completed_games: Iterable[Game],
    court_count: int,
    current_round: int,
) -> RotationResult:
    """Schedule a King of the Court round.

    Round 1 lines teams up in list order. After that the active pool is the
    previous round's winners followed by the teams that sat out, paired
    consecutively. The new bench is the previous round's losers followed by
    any of the active pool that did not get a court.
    """
    if current_round == 1:
        return line_up(teams, court_count, current_round)

    last = previous_round(teams, completed_games, current_round - 1)
    active = last.winners + last.sat_out

    matchups = pair_in_order(active, court_count)
    benched = last.losers + active[len(matchups) * 2 :]

    logger.debug(
        f"Round {current_round}: {len(last.winners)} winner(s) stay, "
        f"{len(last.sat_out)} come in, {len(benched)} benched"
    )
    return RotationResult(
        matchups=matchups, benched=benched, round_number=current_round
    )
