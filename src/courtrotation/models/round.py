"""Round scheduler output types."""

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

from dataclasses import dataclass, field
from typing import Any, Dict, List

from courtrotation.models.team import SessionTeam


@dataclass(frozen=True)
class RoundMatchup:
    """Two teams assigned to one court for one round."""

    team_a: SessionTeam
    team_b: SessionTeam
    court_number: int

    def __hash__(self) -> int:
        # SessionTeam is mutable, so hash by identity fields only
        return hash((self.team_a.id, self.team_b.id, self.court_number))

    @property
    def team_ids(self) -> frozenset:
        return frozenset({self.team_a.id, self.team_b.id})

    def to_dict(self) -> Dict[str, Any]:
        return {
            "team_a_id": self.team_a.id,
            "team_b_id": self.team_b.id,
            "court_number": self.court_number,
        }


@dataclass
class RotationResult:
    """Matchups for the next round plus the ordered bench.

    The bench is an ordered sequence: its order says who comes back on court
    first under the King of Court and Speed policies.

    Attributes:
        matchups: Court assignments, court numbers 1..K in order
        benched: Teams without a court this round
        round_number: The round these matchups are for
    """

    matchups: List[RoundMatchup] = field(default_factory=list)
    benched: List[SessionTeam] = field(default_factory=list)
    round_number: int = 1

    @property
    def matched_teams(self) -> List[SessionTeam]:
        teams = []
        for matchup in self.matchups:
            teams.extend([matchup.team_a, matchup.team_b])
        return teams

    @property
    def is_empty(self) -> bool:
        return not self.matchups

    def to_dict(self) -> Dict[str, Any]:
        return {
            "round_number": self.round_number,
            "matchups": [m.to_dict() for m in self.matchups],
            "benched_team_ids": [t.id for t in self.benched],
        }
