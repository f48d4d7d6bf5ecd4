"""Command-line entry point: evaluate configured check chains once."""

import argparse
import json
import logging
import sys
from typing import Dict, Iterable, List, Optional

from .builder import build_checks
from .checks.check import Check
from .config.loader import ConfigError, ConfigLoader
from .config.models import ChecksFileConfig
from .config.settings import Settings
from .utils.logger import setup_logger
from .utils.result import Result
from .utils.status import State


# Exit code when the checks could not be evaluated at all
EXIT_CONFIG_ERROR = 3

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


class CheckRunner:
    """
    Loads a checks file, builds every chain and evaluates them once.

    Evaluation is sequential on the calling thread. The runner does not
    schedule, store or send anything: results are handed back to the caller.
    """

    def __init__(self, config: ChecksFileConfig, logger: logging.Logger):
        """
        Initialize runner.

        Args:
            config: Validated checks file
            logger: Logger instance
        """
        self.config = config
        self.logger = logger
        self.checks: Dict[str, Check] = build_checks(config.checks)
        self.logger.info(f"Built {len(self.checks)} check(s)")

    def select(self, names: Optional[Iterable[str]] = None) -> Dict[str, Check]:
        """
        Pick checks by name.

        Args:
            names: Check names, or None for every check

        Returns:
            Dict[str, Check]: Selected checks in configuration order

        Raises:
            ValueError: If a name is not configured
        """
        if not names:
            return dict(self.checks)

        unknown = [name for name in names if name not in self.checks]
        if unknown:
            raise ValueError(f"Unknown check(s): {', '.join(unknown)}")

        wanted = set(names)
        return {name: check for name, check in self.checks.items() if name in wanted}

    def run_once(self, names: Optional[Iterable[str]] = None) -> List[Result]:
        """
        Evaluate the selected checks once each.

        Args:
            names: Check names, or None for every check

        Returns:
            List[Result]: One result per check
        """
        results = []
        for name, check in self.select(names).items():
            result = check()
            self.logger.info(
                f"Check {name}: {result.state.value}",
                extra={"check": name, "state": result.state.value, "metric": result.metric}
            )
            results.append(result)
        return results


def worst_state(results: Iterable[Result]) -> State:
    """Most severe state among results (ok when there are none)."""
    return max((result.state for result in results), default=State.OK)


def main(argv: Optional[List[str]] = None) -> int:
    """
    CLI entry point.

    Evaluates every selected check once, prints one JSON object per result
    on stdout and returns the exit code of the worst state.
    """
    parser = argparse.ArgumentParser(
        description='Evaluate composable health checks once and print the results',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Run every check in the default checks file
  python -m checkchain.main

  # Run selected checks from a custom file
  python -m checkchain.main --config /path/to/checks.yaml --check mysql --check queue

Exit codes: 0 ok, 1 warning, 2 critical, 3 configuration error
        """
    )

    parser.add_argument(
        '--config',
        default=Settings.config_path(),
        help='Path to checks file (default: config/checks.yaml or CHECKCHAIN_CONFIG env var)'
    )

    parser.add_argument(
        '--check',
        action='append',
        dest='checks',
        metavar='NAME',
        help='Check to run (repeatable, default: all)'
    )

    parser.add_argument(
        '--log-level',
        type=str.upper,
        choices=LOG_LEVELS,
        help='Logging level (default: from checks file or CHECKCHAIN_LOG_LEVEL env var)'
    )

    args = parser.parse_args(argv)

    # argparse does not check choices against values taken from the environment
    log_level = args.log_level or Settings.log_level() or None
    if log_level is not None and log_level not in LOG_LEVELS:
        logger = setup_logger("checkchain")
        logger.error(
            f"Invalid CHECKCHAIN_LOG_LEVEL: {log_level} (expected one of {', '.join(LOG_LEVELS)})"
        )
        return EXIT_CONFIG_ERROR

    logger = setup_logger("checkchain", log_level or "INFO")

    try:
        config = ConfigLoader.load_from_file(args.config)
    except (FileNotFoundError, ConfigError) as e:
        logger.error(str(e))
        return EXIT_CONFIG_ERROR
    except Exception as e:
        logger.error(f"Failed to load configuration: {e}", exc_info=True)
        return EXIT_CONFIG_ERROR

    if log_level is None:
        logger.setLevel(config.logging.level)

    try:
        runner = CheckRunner(config, logger)
        results = runner.run_once(args.checks)
    except (ValueError, TypeError) as e:
        logger.error(f"Invalid check configuration: {e}")
        return EXIT_CONFIG_ERROR

    for result in results:
        print(json.dumps(result.to_dict()), flush=True)

    return worst_state(results).to_exit_code()


if __name__ == '__main__':
    sys.exit(main())
