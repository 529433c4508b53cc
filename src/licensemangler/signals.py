"""Signal handling for a clean exit on Ctrl+C or ``kill``."""

from __future__ import annotations

import logging
import signal
import sys
from collections.abc import Callable, Iterable
from types import FrameType
from typing import Any, Final

from licensemangler.constants import EXIT_MESSAGE
from licensemangler.reporting import ConsoleReporter, Reporter

logger: Final = logging.getLogger(__name__)

DEFAULT_SIGNALS: Final = (signal.SIGINT, signal.SIGTERM)


def make_exit_handler(reporter: Reporter) -> Callable[[int, FrameType | None], None]:
    """Build a signal handler that prints the exit message and stops.

    The handler raises ``SystemExit(0)``, so ``with`` blocks that are open
    in the main thread (the settings file, for instance) still close.
    """

    def _exit_handler(sig: int, frame: FrameType | None) -> None:
        logger.debug("Received signal %d", sig)
        reporter.highlight(f"\n{EXIT_MESSAGE}")
        sys.exit(0)

    return _exit_handler


def install_exit_handlers(
    reporter: Reporter | None = None,
    signals: Iterable[signal.Signals] = DEFAULT_SIGNALS,
) -> dict[signal.Signals, Any]:
    """Register the exit handler for SIGINT and SIGTERM.

    Must be called from the main thread.

    Returns:
        The handlers that were installed before, keyed by signal
    """
    handler = make_exit_handler(reporter or ConsoleReporter())
    previous: dict[signal.Signals, Any] = {}
    for sig in signals:
        previous[sig] = signal.signal(sig, handler)
    return previous


def restore_handlers(previous: dict[signal.Signals, Any]) -> None:
    """Put back handlers returned by :func:`install_exit_handlers`."""
    for sig, handler in previous.items():
        signal.signal(sig, handler)
