"""Assertion recording and progress reporting."""

import logging
from collections.abc import Mapping, Sequence

from api_smoke_test.models.result import Outcome, ResultSet

logger = logging.getLogger(__name__)

SEVERITY_ICONS: Mapping[str, str] = {
    "pass": "✅",
    "fail": "❌",
    "info": "ℹ️",
    "warn": "⚠️",
}

SEVERITY_LEVELS: Mapping[str, int] = {
    "pass": logging.INFO,
    "fail": logging.ERROR,
    "info": logging.INFO,
    "warn": logging.WARNING,
}


def log(message: str, severity: str = "info") -> None:
    """Log a progress message prefixed by the icon of its severity.

    Unknown severities are logged at INFO without an icon.
    """
    level = SEVERITY_LEVELS.get(severity, logging.INFO)
    if icon := SEVERITY_ICONS.get(severity):
        logger.log(level, "%s %s", icon, message)
    else:
        logger.log(level, "%s", message)


class AssertionRecorder:
    """Collects the named assertions made by one scenario, in call order."""

    def __init__(self) -> None:
        self._outcomes: list[Outcome] = []

    def check(self, condition: bool, test_name: str) -> None:
        """Record whether `condition` held under `test_name` and log it."""
        passed = bool(condition)
        self._outcomes.append(Outcome(name=test_name, passed=passed))
        if passed:
            log(f"PASS: {test_name}", "pass")
        else:
            log(f"FAIL: {test_name}", "fail")

    @property
    def outcomes(self) -> Sequence[Outcome]:
        return tuple(self._outcomes)

    @property
    def failed(self) -> bool:
        return any(not outcome.passed for outcome in self._outcomes)


def summarize(result_set: ResultSet) -> int:
    """Log total/passed/failed counts and return the process exit code."""
    logger.info("=" * 50)
    logger.info("TEST SUMMARY")
    logger.info("=" * 50)
    logger.info("Total: %d", result_set.total)
    logger.info("Passed: %d", result_set.passed_count)
    logger.info("Failed: %d", result_set.failed_count)
    logger.info("=" * 50)

    return 1 if result_set.failed_count > 0 else 0
