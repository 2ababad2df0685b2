"""Command-line entry point.

Usage:
    python -m disney_smoke
"""

import asyncio
import sys

from disney_smoke.config import get_settings
from disney_smoke.runner import SmokeTestRunner
from disney_smoke.services.character_api import CharacterApiClient
from disney_smoke.utils.logging import configure_logging


async def main() -> int:
    """Run the checks once and return the process exit status."""
    runner = SmokeTestRunner(CharacterApiClient(get_settings()))
    report = await runner.run()
    return 0 if report.success else 1


def run() -> None:
    configure_logging(debug=get_settings().debug)
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    run()
