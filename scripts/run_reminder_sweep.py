#!/usr/bin/env python3
"""
Run one interview reminder sweep from the command line.

Meant for a system cron or a one-off manual run:

    python scripts/run_reminder_sweep.py
    python scripts/run_reminder_sweep.py --json

Exits with status 1 when candidates could not be fetched.
"""

import argparse
import asyncio
import json
import logging
import sys

from app.core.container import get_container
from app.database.async_db import dispose_async_engine
from app.domains.interviews.application.dto.sweep_dtos import SweepResult
from app.domains.interviews.domain.exceptions import CandidateFetchError

logger = logging.getLogger("run_reminder_sweep")


def _result_to_dict(result: SweepResult) -> dict:
    return {
        "success": result.success,
        "remindersSent": result.reminders_sent,
        "totalProcessed": result.total_processed,
        "attempted": result.attempted,
        "errors": [error.to_dict() for error in result.errors],
        "timestamp": result.timestamp.isoformat(),
    }


async def run(as_json: bool) -> int:
    """Run the sweep and report it. Returns the process exit code."""
    container = get_container()
    try:
        result = await container.interviews.run_reminder_sweep()
    except CandidateFetchError as e:
        logger.error(f"Reminder sweep failed: {e.message}")
        if as_json:
            print(json.dumps({"success": False, "error": e.message}))
        return 1
    finally:
        await dispose_async_engine()

    if as_json:
        print(json.dumps(_result_to_dict(result), ensure_ascii=False))
    else:
        logger.info(
            f"Sweep done: {result.reminders_sent} sent, {result.failed_count} failed, "
            f"{result.total_processed} candidates"
        )
        for error in result.errors:
            logger.warning(f"  interview {error.event_id} [{error.bucket}] {error.stage}: {error.reason}")

    return 0


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Run one interview reminder sweep")
    parser.add_argument("--json", action="store_true", help="Print the sweep result as JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    sys.exit(asyncio.run(run(args.json)))


if __name__ == "__main__":
    main()
