"""Composition root for the cest test harness.

This module is the ONLY location that imports both the core registry
and runner and the concrete reporter adapter. All wiring happens here,
creating a clear entry point for a test executable.

Module Structure:
- Configuration loading via config module
- Test module import (enrollment happens as a side effect)
- Reporter instantiation
- Runner initialization and execution
"""

import importlib
import logging
import os
import sys

from cest.adapters.reporter.stdout import StdoutReporter
from cest.config import Settings, load_settings
from cest.core.models import RunSummary
from cest.core.ports import ReporterPort
from cest.core.registry import Registry
from cest.core.runner import Runner
from cest.declare import get_registry

MAX_EXIT_CODE = 255


def configure_logging(log_level: str, log_format: str) -> None:
    """Configure harness logging.

    Logs go to stderr; stdout carries only the test report.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_format: Log format (json, text).
    """
    level = getattr(logging, log_level, logging.WARNING)

    if log_format == "json":
        format_str = '{"time": "%(asctime)s", "level": "%(levelname)s", "message": "%(message)s"}'
    else:
        format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=level,
        format=format_str,
        handlers=[
            logging.StreamHandler(sys.stderr),
        ],
    )


def import_test_modules(module_names: list[str]) -> None:
    """Import test modules so their declarations enroll.

    Modules are imported in the listed order; that order becomes the
    enrollment order across modules. The working directory is put on
    sys.path first, so modules next to where the run starts are found
    even when launched through the console script.

    Raises:
        ImportError: If a module cannot be imported.
    """
    logger = logging.getLogger(__name__)
    cwd = os.getcwd()
    if cwd not in sys.path and "" not in sys.path:
        sys.path.insert(0, cwd)
        logger.debug(f"Added {cwd} to sys.path")
    importlib.invalidate_caches()

    for module_name in module_names:
        logger.debug(f"Importing test module {module_name}")
        importlib.import_module(module_name)


def run(
    settings: Settings | None = None,
    registry: Registry | None = None,
    reporter: ReporterPort | None = None,
) -> RunSummary:
    """Wire the runner and execute every enrolled test once.

    Args:
        settings: Harness settings. Loaded from environment if omitted.
        registry: Registry to run. Defaults to the process-wide registry.
        reporter: Reporter to print through. Defaults to StdoutReporter.

    Returns:
        The run summary.
    """
    if settings is None:
        settings = load_settings()

    import_test_modules(settings.module_names)

    runner = Runner(
        registry=registry if registry is not None else get_registry(),
        reporter=reporter if reporter is not None else StdoutReporter(color=settings.color),
        catch_exceptions=settings.catch_exceptions,
    )
    return runner.run_all()


def process_exit_code(summary: RunSummary) -> int:
    """Map a run summary to a process status that only reads 0 on a clean run."""
    return min(summary.exit_code, MAX_EXIT_CODE)


def main() -> None:
    """Test executable entry point.

    Runs every enrolled test and exits with the number of tests that
    did not report SUCCESS.

    Exit codes:
        0: Every test succeeded (or none were enrolled)
        N: N tests failed or are pending, capped at 255 so a large
           count never wraps to 0 in the 8-bit process status
        1: Fatal bootstrap error (also possible as a test count)
        130: Interrupted by user (SIGINT/KeyboardInterrupt)
    """
    logger = logging.getLogger(__name__)
    try:
        settings = load_settings()
        configure_logging(settings.log_level, settings.log_format)
        summary = run(settings)
    except KeyboardInterrupt:
        logger.warning("Run interrupted by user (SIGINT)")
        sys.exit(130)
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        sys.exit(1)

    sys.exit(process_exit_code(summary))


if __name__ == "__main__":
    main()
