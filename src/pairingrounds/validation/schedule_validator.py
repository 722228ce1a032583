"""Schedule validation.

Checks a generated schedule against the structural guarantees every schedule
must keep (each participant paired exactly once per round, byes only when a
round is odd, rounds numbered 1..N) and reports repeat opponents as quality
warnings.
"""

# Pairing Rounds
# Copyright (C) 2025  Pairing Rounds developers
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

from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, List, Optional

from pairingrounds.models import PlayHistory, RoundData, Schedule
from pairingrounds.type_hints import Participant
from pairingrounds.utils import setup_logger

logger = setup_logger(__name__)

CRITERION_COVERAGE = "coverage"
CRITERION_BYE = "bye"
CRITERION_NUMBERING = "numbering"
CRITERION_ROUND_COUNT = "round_count"
CRITERION_REPEATS = "repeats"


class CriterionStatus(Enum):
    """Status of a single validation check."""

    COMPLIANT = "COMPLIANT"
    VIOLATION = "VIOLATION"
    WARNING = "WARNING"


@dataclass
class CriterionResult:
    """Result of validating one criterion, for one round or the whole schedule."""

    criterion: str
    status: CriterionStatus
    description: str = ""
    round_number: Optional[int] = None
    details: Dict[str, object] = field(default_factory=dict)


@dataclass
class ValidationReport:
    """Complete validation report for a schedule."""

    criteria_results: List[CriterionResult] = field(default_factory=list)

    @property
    def violations(self) -> List[CriterionResult]:
        return [
            r for r in self.criteria_results if r.status == CriterionStatus.VIOLATION
        ]

    @property
    def warnings(self) -> List[CriterionResult]:
        return [r for r in self.criteria_results if r.status == CriterionStatus.WARNING]

    @property
    def is_valid(self) -> bool:
        """True when no criterion was violated. Warnings do not count."""
        return not self.violations

    @property
    def compliance_percentage(self) -> float:
        """Calculate compliance percentage."""
        if not self.criteria_results:
            return 100.0
        compliant = len(self.criteria_results) - len(self.violations)
        return (compliant / len(self.criteria_results)) * 100.0

    @property
    def summary(self) -> str:
        return (
            f"{len(self.criteria_results)} checks, {len(self.violations)} violation(s), "
            f"{len(self.warnings)} warning(s)"
        )


class ScheduleValidator:
    """Validates rounds and schedules against a fixed participant list."""

    def __init__(self, participants: Iterable[Participant]):
        self.participants = list(participants)

    def validate_round(self, round_data: RoundData) -> List[CriterionResult]:
        """Check coverage and bye placement for a single round.

        Self-pairings and double byes cannot reach this point: Match refuses
        to construct them.
        """
        return [
            self._check_coverage(round_data),
            self._check_bye(round_data),
        ]

    def validate_schedule(
        self, schedule: Schedule, expected_rounds: Optional[int] = None
    ) -> ValidationReport:
        """Validate every round plus schedule-wide numbering and repeats.

        Args:
            schedule: Schedule to check
            expected_rounds: Requested round count, checked when given

        Returns:
            Report holding one result per check
        """
        report = ValidationReport()
        if expected_rounds is not None:
            report.criteria_results.append(
                self._check_round_count(schedule, expected_rounds)
            )
        report.criteria_results.append(self._check_numbering(schedule))

        history = PlayHistory.for_participants(self.participants)
        for round_data in schedule:
            report.criteria_results.extend(self.validate_round(round_data))
            report.criteria_results.append(self._check_repeats(round_data, history))
            history.record_matches(round_data.matches)

        logger.debug("Schedule validation: %s", report.summary)
        return report

    def _check_coverage(self, round_data: RoundData) -> CriterionResult:
        counts = Counter(round_data.participants)
        expected = set(self.participants)
        missing = [p for p in self.participants if counts[p] == 0]
        duplicated = [p for p, n in counts.items() if n > 1]
        unknown = [p for p in counts if p not in expected]

        if missing or duplicated or unknown:
            return CriterionResult(
                criterion=CRITERION_COVERAGE,
                status=CriterionStatus.VIOLATION,
                description="Every participant must appear in exactly one match",
                round_number=round_data.round_number,
                details={
                    "missing": missing,
                    "duplicated": duplicated,
                    "unknown": unknown,
                },
            )
        return CriterionResult(
            criterion=CRITERION_COVERAGE,
            status=CriterionStatus.COMPLIANT,
            round_number=round_data.round_number,
        )

    def _check_bye(self, round_data: RoundData) -> CriterionResult:
        bye_matches = sum(1 for m in round_data.matches if m.bye)
        expected = len(self.participants) % 2
        if bye_matches != expected:
            return CriterionResult(
                criterion=CRITERION_BYE,
                status=CriterionStatus.VIOLATION,
                description=(
                    f"Expected {expected} bye match(es) for "
                    f"{len(self.participants)} participants, found {bye_matches}"
                ),
                round_number=round_data.round_number,
                details={"bye_matches": bye_matches},
            )
        return CriterionResult(
            criterion=CRITERION_BYE,
            status=CriterionStatus.COMPLIANT,
            round_number=round_data.round_number,
        )

    def _check_numbering(self, schedule: Schedule) -> CriterionResult:
        numbers = [r.round_number for r in schedule]
        expected = list(range(1, len(schedule) + 1))
        if numbers != expected:
            return CriterionResult(
                criterion=CRITERION_NUMBERING,
                status=CriterionStatus.VIOLATION,
                description="Rounds must be numbered 1..N without gaps",
                details={"round_numbers": numbers},
            )
        return CriterionResult(
            criterion=CRITERION_NUMBERING, status=CriterionStatus.COMPLIANT
        )

    def _check_round_count(
        self, schedule: Schedule, expected_rounds: int
    ) -> CriterionResult:
        if len(schedule) != expected_rounds:
            return CriterionResult(
                criterion=CRITERION_ROUND_COUNT,
                status=CriterionStatus.VIOLATION,
                description=f"Expected {expected_rounds} rounds, found {len(schedule)}",
            )
        return CriterionResult(
            criterion=CRITERION_ROUND_COUNT, status=CriterionStatus.COMPLIANT
        )

    def _check_repeats(
        self, round_data: RoundData, history: PlayHistory
    ) -> CriterionResult:
        repeats = [
            (m.player1, m.player2)
            for m in round_data.matches
            if history.have_played(m.player1, m.player2)
        ]
        if repeats:
            # Allowed when no repeat-free pairing existed, so only a warning
            return CriterionResult(
                criterion=CRITERION_REPEATS,
                status=CriterionStatus.WARNING,
                description=f"{len(repeats)} repeat pairing(s)",
                round_number=round_data.round_number,
                details={"repeats": repeats},
            )
        return CriterionResult(
            criterion=CRITERION_REPEATS,
            status=CriterionStatus.COMPLIANT,
            round_number=round_data.round_number,
        )


def create_schedule_validator(
    participants: Iterable[Participant],
) -> ScheduleValidator:
    """Factory function to create a schedule validator.

    Returns:
        New ScheduleValidator instance
    """
    return ScheduleValidator(participants)
