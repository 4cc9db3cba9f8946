"""Team balancing: split checked-in players into evenly rated rosters.

Rosters are filled with a serpentine (snake) draft across every court at
once, so the rating totals of all rosters grow together. Player groups can be
placed as blocks first, and court positions can be spread evenly.
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

import math
from typing import Dict, List, Optional, Sequence, Set

from courtrotation.constants import (
    POSITION_ANY,
    POSITION_DISTRIBUTION_ORDER,
    SIDE_A,
    SIDE_B,
    TEAM_COLORS,
    TEAMS_PER_COURT,
)
from courtrotation.exceptions import BalancingException, InsufficientPlayersException
from courtrotation.models.group import PlayerGroup
from courtrotation.models.player import Player
from courtrotation.models.team import SessionTeam
from courtrotation.type_hints import CourtRosters, Roster
from courtrotation.utils import setup_logger

logger = setup_logger(__name__)


class SerpentineCursor:
    """Walks rosters in snake order: 1A 1B 2A 2B ... KA KB KA KB ... 1A 1B.

    The edge court is visited twice in a row each time the direction turns.
    """

    def __init__(self, court_count: int):
        self.court_count = court_count
        self.court = 0
        self.side = SIDE_A
        self.direction = 1

    def advance(self) -> None:
        if self.side == SIDE_A:
            self.side = SIDE_B
            return

        self.side = SIDE_A
        self.court += self.direction
        if self.court >= self.court_count or self.court < 0:
            self.direction *= -1
            self.court += self.direction


class _Courts:
    """Rosters being filled, indexed by court and side."""

    def __init__(self, court_count: int, team_size: int):
        self.team_size = team_size
        self.rosters: List[Dict[str, Roster]] = [
            {SIDE_A: [], SIDE_B: []} for _ in range(court_count)
        ]

    def at(self, cursor: SerpentineCursor) -> Roster:
        return self.rosters[cursor.court][cursor.side]

    def room_at(self, cursor: SerpentineCursor) -> int:
        return self.team_size - len(self.at(cursor))

    def flat(self) -> List[Roster]:
        """Rosters in order 1A, 1B, 2A, 2B, ..."""
        return [court[side] for court in self.rosters for side in (SIDE_A, SIDE_B)]

    def pairs(self) -> CourtRosters:
        return [(court[SIDE_A], court[SIDE_B]) for court in self.rosters]


def balance_teams(
    players: Sequence[Player],
    courts_needed: int,
    team_size: int,
    use_groups: bool = False,
    groups: Sequence[PlayerGroup] = (),
    use_positions: bool = False,
) -> CourtRosters:
    """Partition players into one (roster A, roster B) pair per court.

    Args:
        players: Checked-in players, in check-in order
        courts_needed: Number of courts to fill
        team_size: Maximum players per roster
        use_groups: Place each group's members on the same roster when it fits
        groups: Player groups to keep together
        use_positions: Spread positions evenly instead of a pure rating draft

    Returns:
        Roster pairs in ascending court order. Rosters may be short when
        there are fewer players than slots.

    Raises:
        BalancingException: If court count or team size is not positive
        InsufficientPlayersException: If there are fewer than two players
            per court
    """
    if courts_needed < 1 or team_size < 1:
        raise BalancingException(
            f"Courts and team size must be positive "
            f"(got {courts_needed} courts, team size {team_size})"
        )
    required = courts_needed * TEAMS_PER_COURT
    if len(players) < required:
        raise InsufficientPlayersException(len(players), required)

    capacity = courts_needed * team_size * TEAMS_PER_COURT
    active = list(players[:capacity])
    if len(players) > capacity:
        logger.warning(
            f"{len(players) - capacity} player(s) beyond {capacity} roster slots "
            "were left out"
        )

    courts = _Courts(courts_needed, team_size)
    placed: Set[str] = set()

    if use_groups and groups:
        placed = _place_groups(groups, active, courts, courts_needed)

    remaining = [p for p in active if p.id not in placed]

    if use_positions and any(p.position != POSITION_ANY for p in remaining):
        _distribute_by_position(remaining, courts.flat(), team_size)
    else:
        _serpentine_draft(remaining, courts, courts_needed)

    logger.debug(
        f"Balanced {len(active)} players onto {courts_needed} court(s), "
        f"{len(placed)} placed through groups"
    )
    return courts.pairs()


def _place_groups(
    groups: Sequence[PlayerGroup],
    active: List[Player],
    courts: _Courts,
    court_count: int,
) -> Set[str]:
    """Place groups as blocks, strongest group first. Returns placed ids."""
    active_ids = {p.id for p in active}
    placed: Set[str] = set()
    cursor = SerpentineCursor(court_count)
    max_attempts = court_count * TEAMS_PER_COURT

    for group in sorted(groups, key=lambda g: g.average_rating, reverse=True):
        members = [
            p for p in group.members if p.id in active_ids and p.id not in placed
        ]
        if not members:
            continue

        for _ in range(max_attempts):
            if courts.room_at(cursor) >= len(members):
                courts.at(cursor).extend(members)
                placed.update(p.id for p in members)
                break
            cursor.advance()
        else:
            logger.warning(
                f"Group '{group.name}' ({len(members)} players) does not fit "
                "on one roster, drafting members individually"
            )

        cursor.advance()

    return placed


def _serpentine_draft(
    players: List[Player], courts: _Courts, court_count: int
) -> None:
    cursor = SerpentineCursor(court_count)
    max_attempts = court_count * TEAMS_PER_COURT

    for player in sorted(players, key=lambda p: p.rating, reverse=True):
        attempts = 0
        while courts.room_at(cursor) <= 0 and attempts < max_attempts:
            cursor.advance()
            attempts += 1

        if courts.room_at(cursor) > 0:
            courts.at(cursor).append(player)

        cursor.advance()


def _distribute_by_position(
    players: List[Player], rosters: List[Roster], team_size: int
) -> None:
    for position in POSITION_DISTRIBUTION_ORDER:
        group = sorted(
            (p for p in players if p.position == position),
            key=lambda p: p.rating,
            reverse=True,
        )
        _bounce_into_rosters(group, rosters, team_size)


def _bounce_into_rosters(
    players: List[Player], rosters: List[Roster], team_size: int
) -> None:
    """Snake one position's players across the flat roster list."""
    index = 0
    direction = 1

    def step():
        nonlocal index, direction
        index += direction
        if index >= len(rosters) or index < 0:
            direction *= -1
            index += direction

    for player in players:
        attempts = 0
        while len(rosters[index]) >= team_size and attempts < len(rosters):
            step()
            attempts += 1

        if len(rosters[index]) < team_size:
            rosters[index].append(player)

        step()


def create_session_teams(
    players: Sequence[Player],
    team_count: int,
    team_size: int,
    use_groups: bool = False,
    groups: Sequence[PlayerGroup] = (),
    use_positions: bool = False,
    colors: Optional[Sequence[str]] = None,
) -> List[SessionTeam]:
    """Form named, colored session teams from a player pool.

    Balances ``ceil(team_count / 2)`` courts and keeps the first
    ``team_count`` rosters in order 1A, 1B, 2A, 2B, ...

    Raises:
        BalancingException: If fewer than two teams are requested
        InsufficientPlayersException: If there are fewer than two players
            per requested team
    """
    if team_count < TEAMS_PER_COURT:
        raise BalancingException(
            f"Need at least {TEAMS_PER_COURT} teams, got {team_count}"
        )
    if len(players) < team_count * 2:
        raise InsufficientPlayersException(len(players), team_count * 2)

    palette = list(colors or TEAM_COLORS)
    courts_needed = math.ceil(team_count / TEAMS_PER_COURT)
    pairs = balance_teams(
        players,
        courts_needed,
        team_size,
        use_groups=use_groups,
        groups=groups,
        use_positions=use_positions,
    )
    flat = [roster for pair in pairs for roster in pair]
    rosters = flat[:team_count]
    dropped = [p for roster in flat[team_count:] for p in roster]
    if dropped:
        logger.warning(
            f"{len(dropped)} player(s) drafted into an unused roster were left "
            f"out: {', '.join(p.name for p in dropped)}"
        )

    teams = [
        SessionTeam(
            name=f"Team {i + 1}",
            color=palette[i % len(palette)],
            team_number=i + 1,
            players=list(roster),
        )
        for i, roster in enumerate(rosters)
    ]
    logger.info(f"Created {len(teams)} session teams from {len(players)} players")
    return teams
