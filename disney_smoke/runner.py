"""Sequential runner for the endpoint checks.

Runs the checks in a fixed order, reports each one on the console, and
stops at the first failure.
"""

import sys
from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass, field

from result import Result

from disney_smoke.failures import CheckFailure
from disney_smoke.services.character_api import CharacterApiClient
from disney_smoke.services.checks import (
    check_data_shape,
    check_names_present,
    check_page_size,
    check_specific_character,
    check_status_code,
)
from disney_smoke.utils.logging import get_logger

logger = get_logger(__name__)

BANNER = "--- Running Disney API Tests ---"
SUCCESS_SUMMARY = "All tests completed successfully"
FAILURE_SUMMARY = "Tests failed!"


def print_error(line: str) -> None:
    print(line, file=sys.stderr)


@dataclass(frozen=True)
class Check:
    """A numbered check in the run order."""

    number: int
    name: str
    run: Callable[[CharacterApiClient], Awaitable[Result[list[str], CheckFailure]]]


DEFAULT_CHECKS: tuple[Check, ...] = (
    Check(1, "status code", check_status_code),
    Check(2, "data shape", check_data_shape),
    Check(3, "name presence", check_names_present),
    Check(4, "specific character", check_specific_character),
    Check(5, "page size", check_page_size),
)


@dataclass
class RunReport:
    """Outcome of one full run."""

    passed: list[int] = field(default_factory=list)
    failed_check: Check | None = None
    failure: CheckFailure | None = None

    @property
    def success(self) -> bool:
        return self.failure is None


class SmokeTestRunner:
    """Runs checks one after another against the characters endpoint."""

    def __init__(
        self,
        client: CharacterApiClient | None = None,
        checks: Sequence[Check] = DEFAULT_CHECKS,
        output: Callable[[str], None] = print,
        error_output: Callable[[str], None] = print_error,
    ) -> None:
        """Initialize the runner.

        Args:
            client: API client shared by the checks. Created from settings if None.
            checks: Checks in the order they run
            output: Sink for progress and summary lines
            error_output: Sink for failure lines, stderr by default
        """
        self.client = client or CharacterApiClient()
        self.checks = list(checks)
        self.output = output
        self.error_output = error_output

    async def run(self) -> RunReport:
        """Run every check in order, stopping at the first failure.

        Returns:
            RunReport with the passed check numbers and the failure, if any
        """
        self.output(BANNER)
        report = RunReport()

        for check in self.checks:
            logger.debug(f"Running check {check.number} ({check.name})")
            outcome = await check.run(self.client)

            if outcome.is_err():
                failure = outcome.unwrap_err()
                logger.warning(
                    f"Check {check.number} ({check.name}) failed: "
                    f"kind={failure.kind.value} {failure.message}"
                )
                self.error_output(f"Test {check.number}: FAILED {failure.message}")
                self.error_output(f"\n{FAILURE_SUMMARY} {failure.message}")
                report.failed_check = check
                report.failure = failure
                return report

            for line in outcome.unwrap():
                self.output(f"Test {check.number}: {line}")
            report.passed.append(check.number)

        self.output(f"\n{SUCCESS_SUMMARY}")
        return report
