import asyncio
import sys

from iss_flyover.display import format_passes
from iss_flyover.errors import LookupStepError
from iss_flyover.logger import logger
from iss_flyover.models.common import OverpassList
from iss_flyover.orchestrator import next_iss_times_for_my_location


def main() -> int:
    """Print the next ISS passes for this machine's location; return an exit code."""
    exit_code = 0

    def report(error: LookupStepError | None, passes: OverpassList | None) -> None:
        nonlocal exit_code
        if error is not None:
            logger.error(f"It didn't work! stage={error.stage.value if error.stage else None} error={error}")
            exit_code = 1
            return
        for line in format_passes(passes or []):
            print(line)  # noqa: T201

    asyncio.run(next_iss_times_for_my_location(report))
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
