"""Speed mode: rapid rotation with a FIFO waiting queue and no rating changes.

Winners keep their court, the front of the waiting queue challenges them and
losers run off to the back of the queue.
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

from typing import Iterable, List, Sequence

from courtrotation.models.game import Game
from courtrotation.models.round import RotationResult, RoundMatchup
from courtrotation.models.team import SessionTeam
from courtrotation.rotation.common import line_up, previous_round
from courtrotation.utils import setup_logger

logger = setup_logger(__name__)


def generate_speed_round(
    teams: Sequence[SessionTeam],
    completed_games: Iterable[Game],
    court_count: int,
    current_round: int,
) -> RotationResult:
    """Schedule a Speed round.

    - Each winner of the previous round meets the next team in the waiting
      queue (teams that sat out, in list order).
    - Winners left without a challenger play each other in pairs; an odd one
      out goes to the *front* of the queue.
    - Losers run off: the new queue is the losers, followed by the waiting
      teams that were not called up.

    With no completed games in the previous round there is nobody to keep on
    court, so the round is lined up like round 1.
    """
    last = None
    if current_round > 1:
        last = previous_round(teams, completed_games, current_round - 1)
    # Only reachable when the caller skips the "round R-1 finished" precondition
    if last is None or not last.winners:
        return line_up(teams, court_count, current_round)

    incumbents = last.winners[:court_count]
    displaced = last.winners[court_count:]
    queue = last.sat_out

    challengers = queue[: len(incumbents)]
    waiting: List[SessionTeam] = last.losers + queue[len(incumbents) :]

    matchups: List[RoundMatchup] = [
        RoundMatchup(team_a=winner, team_b=challenger, court_number=i + 1)
        for i, (winner, challenger) in enumerate(zip(incumbents, challengers))
    ]

    unmatched = incumbents[len(challengers) :]
    paired = 0
    while paired + 1 < len(unmatched) and len(matchups) < court_count:
        matchups.append(
            RoundMatchup(
                team_a=unmatched[paired],
                team_b=unmatched[paired + 1],
                court_number=len(matchups) + 1,
            )
        )
        paired += 2

    # Winners still without a game re-enter soonest
    waiting = unmatched[paired:] + displaced + waiting

    logger.debug(
        f"Round {current_round}: {len(incumbents)} winner(s) hold court, "
        f"{len(challengers)} challenger(s), {len(waiting)} waiting"
    )
    return RotationResult(
        matchups=matchups, benched=waiting, round_number=current_round
    )
