"""CLI entry point for the product image API smoke test."""

import argparse
import asyncio
import json
import logging
import sys
from collections.abc import Sequence
from typing import Any

from pydantic import SecretStr

from api_smoke_test.client import ApiClient
from api_smoke_test.config import SmokeTestSettings
from api_smoke_test.harness import summarize
from api_smoke_test.models.result import ResultSet, ScenarioResult
from api_smoke_test.orchestrator import SmokeTestOrchestrator
from api_smoke_test.scenarios import DEFAULT_SCENARIOS, RunContext, Scenario

STATUS_SYMBOLS = {
    "success": "✓",
    "failure": "✗",
    "error": "!",
    "skipped": "-",
}


def log_results_summary(
    log: logging.Logger, scenario_results: Sequence[ScenarioResult]
) -> None:
    """Log one line per scenario with its status and duration."""
    log.info("=" * 50)
    log.info("Scenario Results:")
    log.info("=" * 50)

    for result in scenario_results:
        symbol = STATUS_SYMBOLS.get(result.status, "?")
        log.info(
            "%s %s: %s (%.2fs)", symbol, result.name, result.status, result.duration
        )
        if result.message:
            log.info("  Message: %s", result.message)


def format_output(scenario_results: Sequence[ScenarioResult]) -> dict[str, Any]:
    """Format scenario results for JSON output."""
    result_set = ResultSet.from_scenarios(scenario_results)

    return {
        "total": result_set.total,
        "passed": result_set.passed_count,
        "failed": result_set.failed_count,
        "scenarios": [
            {
                "name": result.name,
                "status": result.status,
                "duration": result.duration,
                "message": result.message,
                "assertions": [
                    {"name": outcome.name, "passed": outcome.passed}
                    for outcome in result.outcomes
                ],
            }
            for result in scenario_results
        ],
    }


async def run(
    api_url: str,
    email: str,
    password: SecretStr,
    scenarios: Sequence[Scenario] = DEFAULT_SCENARIOS,
) -> int:
    """Run the smoke test scenarios and return the exit code."""
    log = logging.getLogger("api_smoke_test")

    log.info("=" * 50)
    log.info("Product Image API Test Suite")
    log.info("=" * 50)
    log.info("API Base: %s", api_url)
    log.info("Test User: %s", email)
    log.info("=" * 50)

    async with ApiClient.from_base_url(api_url) as client:
        orchestrator = SmokeTestOrchestrator(client=client, scenarios=scenarios)
        scenario_results = await orchestrator.run_all(
            RunContext(email=email, password=password)
        )

    log_results_summary(log, scenario_results)
    print(json.dumps(format_output(scenario_results), indent=2))

    return summarize(ResultSet.from_scenarios(scenario_results))


def main() -> None:
    """CLI entry point."""
    settings = SmokeTestSettings()

    parser = argparse.ArgumentParser(
        description="Run smoke tests against the product image API"
    )
    parser.add_argument(
        "--api-url",
        default=settings.api_url,
        help="Base URL of the API (default: API_URL or %(default)s)",
    )
    parser.add_argument(
        "--email",
        default=settings.test_user_email,
        help="Email of the test user (default: TEST_USER_EMAIL)",
    )
    parser.add_argument(
        "--password",
        default=None,
        help="Password of the test user (default: TEST_USER_PASSWORD)",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    password = (
        SecretStr(args.password)
        if args.password is not None
        else settings.test_user_password
    )

    exit_code = asyncio.run(
        run(api_url=args.api_url, email=args.email, password=password)
    )
    sys.exit(exit_code)


if __name__ == "__main__":  # pragma: no cover
    main()
