#!/usr/bin/env python3
"""
LinkedIn Easy Apply Bot - Search Results Runner
Applies to single-step Easy Apply jobs from one search results page
"""

import argparse
import asyncio
import random
import sys

from linkedin_autoapply import config
from linkedin_autoapply.browser.session import launch_session
from linkedin_autoapply.errors import AutoApplyError
from linkedin_autoapply.runner import RunConfig, RunController
from linkedin_autoapply.utils.timing import Pacer


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="LinkedIn Easy Apply Bot - apply to single-step jobs from a search page",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Credentials:
  LINKEDIN_ID and LINKEDIN_KEY are read from the environment or a .env file.

Speed Modes:
  --speed dev       ~3x faster waits - supervised testing only
  (default)         Production speed - safest, most human-like

Examples:
  python -m linkedin_autoapply.main "https://www.linkedin.com/jobs/search/?keywords=python"
  python -m linkedin_autoapply.main -m 10 --headed "https://www.linkedin.com/jobs/search/?keywords=python"
  python -m linkedin_autoapply.main --cdp-endpoint http://localhost:9222 "<search_url>"
        """,
    )
    parser.add_argument("job_url", help="LinkedIn job search URL")
    parser.add_argument(
        "-m",
        "--max-applications",
        type=int,
        default=config.DEFAULT_MAX_APPLICATIONS,
        help="Maximum number of applications to submit per run (default: %(default)s)",
    )
    parser.add_argument(
        "--speed",
        choices=["dev"],
        help="Speed mode: dev (~3x faster waits)",
    )
    parser.add_argument(
        "--headed",
        action="store_true",
        help="Show the browser window instead of running headless",
    )
    parser.add_argument(
        "--cdp-endpoint",
        help="Attach to a running Chromium over CDP instead of launching one",
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Seed the random source (reproducible pacing and job selection)",
    )
    log_group = parser.add_mutually_exclusive_group()
    log_group.add_argument(
        "--log-file",
        default=config.LOG_FILE,
        help="JSONL file that receives one line per processed job (default: %(default)s)",
    )
    log_group.add_argument(
        "--no-log-file",
        action="store_true",
        help="Do not write the JSONL outcome log",
    )

    args = parser.parse_args(argv)
    if args.max_applications < 0:
        parser.error("--max-applications cannot be negative")
    return args


async def run(args):
    run_config = RunConfig(
        job_url=args.job_url,
        max_applications=args.max_applications,
        log_file=None if args.no_log_file else args.log_file,
    )

    timing_mode = "dev_test" if args.speed == "dev" else "default"
    if args.speed == "dev":
        print("⚡ DEV_TEST_SPEED enabled (~3x faster waits)\n")
    pacer = Pacer(
        rng=random.Random(args.seed),
        timing=config.get_active_timing(timing_mode),
    )

    credentials = config.load_credentials()

    print("Starting job application bot...")
    print(f"Job search URL: {run_config.job_url}")
    print(f"Maximum applications: {run_config.max_applications}")

    session = await launch_session(
        user_agent=pacer.choice(config.USER_AGENTS),
        headless=not args.headed,
        cdp_endpoint=args.cdp_endpoint,
    )
    controller = RunController(session, run_config, pacer, credentials=credentials)
    return await controller.run()


def main(argv=None):
    args = parse_args(argv)
    try:
        asyncio.run(run(args))
    except AutoApplyError as e:
        print(f"\n✗ Error: {e}\n")
        return 1
    except KeyboardInterrupt:
        print("\n\nInterrupted.")
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
