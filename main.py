#!/usr/bin/env python3
import argparse
import logging
import sys
from dotenv import load_dotenv

from campus.services.demo import PROGRAMS, run_demo
from config.settings import get_app_config

logger = logging.getLogger(__name__)


def parse_args(argv=None, default_program: str = "all") -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Campus object model demo")
    parser.add_argument(
        "--program",
        choices=PROGRAMS,
        default=default_program,
        help="Which demo to run (default: %(default)s)",
    )
    return parser.parse_args(argv)


def resolve_log_level(config: dict) -> str:
    """Returns the configured level name, or WARNING if logging does not know it"""
    if config["debug"]:
        return "DEBUG"
    level = config["log_level"]
    if not isinstance(logging.getLevelName(level), int):
        return "WARNING"
    return level


def main(argv=None) -> int:
    # Load environment variables
    load_dotenv()
    config = get_app_config()

    # Configure logging
    level = resolve_log_level(config)
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    if not config["debug"] and level != config["log_level"]:
        logger.warning(f"Unknown LOG_LEVEL {config['log_level']!r}, using WARNING")

    args = parse_args(argv, default_program=config["program"])

    try:
        run_demo(args.program)
    except KeyboardInterrupt:
        logger.info("Demo stopped by user")
    except Exception as e:
        logger.error(f"An error occurred: {e}", exc_info=True)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
