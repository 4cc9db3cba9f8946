"""Round checker - internal validation of generated rounds.

Checks a :class:`RotationResult` against the rules every rotation policy
must keep: no team on two courts, courts numbered from 1 without gaps,
every team either on a court or on the bench, and no repeated pairing under
round robin.
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

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Sequence

from courtrotation.constants import TEAMS_PER_COURT
from courtrotation.models.enums import RotationPolicy
from courtrotation.models.game import Game
from courtrotation.models.round import RotationResult
from courtrotation.models.team import SessionTeam
from courtrotation.standings import played_pairs, total_pairings
from courtrotation.utils import setup_logger

logger = setup_logger(__name__)


class CheckStatus(Enum):
    """Status of a single round check."""

    PASSED = "PASSED"
    FAILED = "FAILED"
    NOT_APPLICABLE = "NOT_APPLICABLE"


class Severity(Enum):
    """How serious a failed check is."""

    ABSOLUTE = "ABSOLUTE"  # the round must not be played
    QUALITY = "QUALITY"  # allowed, but worth flagging


@dataclass
class CheckResult:
    """Result of a single round check."""

    check: str
    status: CheckStatus
    severity: Optional[Severity] = None
    description: str = ""
    details: Dict[str, object] = field(default_factory=dict)

    @property
    def passed(self) -> bool:
        return self.status != CheckStatus.FAILED


@dataclass
class ValidationReport:
    """Complete validation report for one round."""

    round_number: int
    results: List[CheckResult]
    violations: List[CheckResult]
    warnings: List[CheckResult]
    summary: str

    @property
    def is_valid(self) -> bool:
        return not self.violations

    @property
    def passed_count(self) -> int:
        return sum(1 for r in self.results if r.status == CheckStatus.PASSED)


class RoundValidator:
    """Validates generated rounds."""

    def check_no_double_booking(self, result: RotationResult) -> CheckResult:
        """No team appears in more than one matchup."""
        seen = set()
        repeated = []
        for matchup in result.matchups:
            for team in (matchup.team_a, matchup.team_b):
                if team.id in seen:
                    repeated.append(team.name)
                seen.add(team.id)
            if matchup.team_a.id == matchup.team_b.id:
                repeated.append(matchup.team_a.name)

        if repeated:
            return CheckResult(
                check="double_booking",
                status=CheckStatus.FAILED,
                severity=Severity.ABSOLUTE,
                description=f"Teams scheduled twice: {', '.join(repeated)}",
                details={"teams": repeated},
            )
        return CheckResult(
            check="double_booking",
            status=CheckStatus.PASSED,
            description="Every team is on at most one court",
        )

    def check_court_numbers(
        self, result: RotationResult, court_count: int
    ) -> CheckResult:
        """Court numbers are exactly 1..K in order, with K <= court_count."""
        numbers = [m.court_number for m in result.matchups]
        expected = list(range(1, len(numbers) + 1))

        if numbers != expected or len(numbers) > court_count:
            return CheckResult(
                check="court_numbers",
                status=CheckStatus.FAILED,
                severity=Severity.ABSOLUTE,
                description=f"Court numbers {numbers} are not 1..{len(numbers)}",
                details={"court_numbers": numbers, "court_count": court_count},
            )
        return CheckResult(
            check="court_numbers",
            status=CheckStatus.PASSED,
            description=f"{len(numbers)} of {court_count} court(s) used",
        )

    def check_coverage(
        self, teams: Sequence[SessionTeam], result: RotationResult
    ) -> CheckResult:
        """Matched and benched teams are disjoint and together cover every team."""
        team_ids = {t.id for t in teams}
        matched_ids = [t.id for t in result.matched_teams]
        benched_ids = [t.id for t in result.benched]

        both = sorted(set(matched_ids) & set(benched_ids))
        missing = sorted(team_ids - set(matched_ids) - set(benched_ids))
        unknown = sorted((set(matched_ids) | set(benched_ids)) - team_ids)
        duplicate_bench = len(benched_ids) != len(set(benched_ids))

        if both or missing or unknown or duplicate_bench:
            return CheckResult(
                check="coverage",
                status=CheckStatus.FAILED,
                severity=Severity.ABSOLUTE,
                description="Matched and benched teams do not partition the session",
                details={
                    "matched_and_benched": both,
                    "missing": missing,
                    "unknown": unknown,
                    "duplicate_bench": duplicate_bench,
                },
            )
        return CheckResult(
            check="coverage",
            status=CheckStatus.PASSED,
            description="Every team is either on a court or benched",
        )

    def check_no_repeats(
        self,
        result: RotationResult,
        previous_games: Sequence[Game],
        policy: RotationPolicy,
    ) -> CheckResult:
        """Round robin never repeats a completed pairing; Swiss avoids it."""
        if policy not in (RotationPolicy.ROUND_ROBIN, RotationPolicy.SWISS):
            return CheckResult(
                check="repeat_pairings",
                status=CheckStatus.NOT_APPLICABLE,
                description=f"{policy.display_name} allows rematches",
            )

        played = played_pairs(previous_games)
        repeats = [
            f"{m.team_a.name} vs {m.team_b.name}"
            for m in result.matchups
            if m.team_ids in played
        ]
        if repeats:
            severity = (
                Severity.ABSOLUTE
                if policy == RotationPolicy.ROUND_ROBIN
                else Severity.QUALITY
            )
            return CheckResult(
                check="repeat_pairings",
                status=CheckStatus.FAILED,
                severity=severity,
                description=f"Repeat pairings: {', '.join(repeats)}",
                details={"pairings": repeats},
            )
        return CheckResult(
            check="repeat_pairings",
            status=CheckStatus.PASSED,
            description="No repeat pairings found",
        )

    def check_court_usage(
        self,
        teams: Sequence[SessionTeam],
        result: RotationResult,
        court_count: int,
    ) -> CheckResult:
        """Flag rounds that leave courts empty while teams wait."""
        possible = min(court_count, len(teams) // TEAMS_PER_COURT)
        used = len(result.matchups)
        if used < possible:
            return CheckResult(
                check="court_usage",
                status=CheckStatus.FAILED,
                severity=Severity.QUALITY,
                description=f"Only {used} of {possible} possible court(s) used",
                details={"used": used, "possible": possible},
            )
        return CheckResult(
            check="court_usage",
            status=CheckStatus.PASSED,
            description="All usable courts are in play",
        )

    def check_session_feasibility(
        self, team_count: int, court_count: int, num_rounds: int
    ) -> Optional[CheckResult]:
        """Check whether a round robin of this size can fill every round.

        With N teams there are at most N*(N-1)/2 distinct pairings, so once
        those are used up further rounds come back empty.

        Returns:
            CheckResult if the configuration runs out of pairings, None otherwise
        """
        if team_count < 2 or num_rounds < 1:
            return None

        available = total_pairings(team_count)
        per_round = min(court_count, team_count // TEAMS_PER_COURT)
        needed = num_rounds * per_round
        if needed <= available:
            return None

        return CheckResult(
            check="feasibility",
            status=CheckStatus.FAILED,
            severity=Severity.QUALITY,
            description=(
                f"{num_rounds} full rounds need {needed} pairings but "
                f"{team_count} teams only have {available}"
            ),
            details={"needed": needed, "available": available},
        )

    def validate_round(
        self,
        teams: Sequence[SessionTeam],
        result: RotationResult,
        court_count: int,
        previous_games: Sequence[Game] = (),
        policy=RotationPolicy.KING_OF_COURT,
    ) -> ValidationReport:
        """Validate one generated round against every check."""
        policy = RotationPolicy.from_value(policy)
        logger.debug(f"Validating round {result.round_number} ({policy.value})")

        results = [
            self.check_no_double_booking(result),
            self.check_court_numbers(result, court_count),
            self.check_coverage(teams, result),
            self.check_no_repeats(result, previous_games, policy),
            self.check_court_usage(teams, result, court_count),
        ]
        violations = [
            r
            for r in results
            if r.status == CheckStatus.FAILED and r.severity == Severity.ABSOLUTE
        ]
        warnings = [
            r
            for r in results
            if r.status == CheckStatus.FAILED and r.severity == Severity.QUALITY
        ]

        if violations:
            summary = (
                f"Round {result.round_number} invalid: "
                f"{len(violations)} check(s) failed, {len(warnings)} warning(s)"
            )
            logger.warning(summary)
        else:
            summary = f"Round {result.round_number} valid, {len(warnings)} warning(s)"
            logger.debug(summary)

        return ValidationReport(
            round_number=result.round_number,
            results=results,
            violations=violations,
            warnings=warnings,
            summary=summary,
        )
