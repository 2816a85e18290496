"""Orchestrator running smoke test scenarios in sequence."""

import asyncio
import logging
from collections.abc import Sequence
from dataclasses import dataclass

from api_smoke_test.client import ApiClient
from api_smoke_test.harness import AssertionRecorder, log
from api_smoke_test.models.result import ScenarioResult, ScenarioStatus
from api_smoke_test.scenarios import DEFAULT_SCENARIOS, RunContext, Scenario

logger = logging.getLogger(__name__)


def missing_precondition(scenario: Scenario, context: RunContext) -> str | None:
    """Return why `scenario` cannot run in `context`, or None when it can."""
    match context:
        case RunContext(token=None) if scenario.needs_token:
            return "no auth token available"
        case RunContext(image_id=None) if scenario.needs_image_id:
            return "no image ID available"
        case _:
            return None


@dataclass(frozen=True, kw_only=True)
class SmokeTestOrchestrator:
    """Runs scenarios one at a time against a single API client.

    Each scenario is isolated: an exception raised by one is recorded as a
    failure of that scenario and the sequence carries on with the next.
    """

    __test__ = False

    client: ApiClient
    scenarios: Sequence[Scenario] = DEFAULT_SCENARIOS

    async def run_all(self, context: RunContext) -> Sequence[ScenarioResult]:
        """Run every scenario in order, threading the context through.

        Args:
            context: Initial context holding the test user credentials

        Returns:
            One result per scenario, in execution order

        """
        results: list[ScenarioResult] = []

        for scenario in self.scenarios:
            if (reason := missing_precondition(scenario, context)) is not None:
                log(f"Skipping {scenario.title} - {reason}", "warn")
                results.append(
                    ScenarioResult(name=scenario.name, status="skipped", message=reason)
                )
                continue

            result, context = await self._run_scenario(scenario, context)
            results.append(result)

            if scenario.establishes_token and context.token is None:
                log("Cannot continue - login failed", "fail")

        return results

    async def _run_scenario(
        self, scenario: Scenario, context: RunContext
    ) -> tuple[ScenarioResult, RunContext]:
        """Run one scenario, converting any exception into an error result."""
        log(f"--- Testing {scenario.title} ---", "info")
        recorder = AssertionRecorder()
        loop = asyncio.get_running_loop()
        started = loop.time()
        message: str | None = None

        try:
            context = await scenario.run(self.client, context, recorder)
        except Exception as e:
            logger.error("Scenario %s raised: %s", scenario.name, e, exc_info=e)
            log(f"Test error: {e}", "fail")
            recorder.check(False, f"{scenario.title} completed without error")
            message = str(e)
            status: ScenarioStatus = "error"
        else:
            status = "failure" if recorder.failed else "success"

        result = ScenarioResult(
            name=scenario.name,
            status=status,
            outcomes=recorder.outcomes,
            duration=loop.time() - started,
            message=message,
        )
        return result, context
