"""Models for assertion outcomes and scenario results."""

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Literal

type ScenarioStatus = Literal["success", "failure", "skipped", "error"]


@dataclass(frozen=True, kw_only=True)
class Outcome:
    """A single named assertion and whether it held."""

    name: str
    passed: bool


@dataclass(frozen=True, kw_only=True)
class ScenarioResult:
    """Result of running one scenario.

    Contains the assertions it recorded, in the order they were made.
    """

    name: str
    status: ScenarioStatus
    outcomes: Sequence[Outcome] = ()
    duration: float = 0.0
    message: str | None = None


@dataclass(frozen=True, kw_only=True)
class ResultSet:
    """Passed/failed counts over every outcome of a run."""

    outcomes: Sequence[Outcome] = field(default_factory=tuple)

    @classmethod
    def from_scenarios(cls, results: Sequence[ScenarioResult]) -> "ResultSet":
        """Combine scenario results, keeping assertion order."""
        return cls(
            outcomes=tuple(outcome for result in results for outcome in result.outcomes)
        )

    @property
    def passed_count(self) -> int:
        return sum(1 for outcome in self.outcomes if outcome.passed)

    @property
    def failed_count(self) -> int:
        return sum(1 for outcome in self.outcomes if not outcome.passed)

    @property
    def total(self) -> int:
        return len(self.outcomes)
