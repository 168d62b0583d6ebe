"""Process lifecycle: termination signals and exit logging.

One handler serves every termination signal. A signal is logged and
ends the process with status 1; a plain interpreter exit is only
logged.
"""

import asyncio
import atexit
import logging
import signal
import sys
from types import FrameType

logger = logging.getLogger("splitme.server")

# SIGPIPE is left alone: a client hanging up must not stop the server.
_SIGNAL_NAMES = (
    "SIGHUP",
    "SIGINT",
    "SIGQUIT",
    "SIGILL",
    "SIGTRAP",
    "SIGABRT",
    "SIGBUS",
    "SIGFPE",
    "SIGUSR1",
    "SIGSEGV",
    "SIGUSR2",
    "SIGTERM",
)

# Only the signals this platform defines
TERMINATION_SIGNALS: frozenset[signal.Signals] = frozenset(
    getattr(signal.Signals, name) for name in _SIGNAL_NAMES if hasattr(signal.Signals, name)
)


def terminator(signum: int | None = None, frame: FrameType | None = None) -> None:
    """Log and exit with status 1 on a signal; log only on normal exit."""
    if signum is not None:
        logger.warning("Received %s - terminating splitme server ...", signal.Signals(signum).name)
        sys.exit(1)
    logger.info("splitme server stopped.")


def install_signal_handlers() -> None:
    """Route every termination signal to ``terminator``.

    Must run on the main thread.
    """
    atexit.register(terminator)
    for sig in sorted(TERMINATION_SIGNALS):
        signal.signal(sig, terminator)


# Signals an event-loop server takes over for its own graceful drain
LOOP_SIGNALS: tuple[signal.Signals, ...] = (signal.SIGINT, signal.SIGTERM)


def attach_to_running_loop() -> None:
    """Point SIGINT and SIGTERM back at ``terminator`` on the running loop.

    pounce registers loop-level handlers for these two signals when its
    worker starts, replacing the ones set by ``install_signal_handlers``.
    Call this from inside the server (ASGI lifespan startup) to undo that.
    """
    loop = asyncio.get_running_loop()
    for sig in LOOP_SIGNALS:
        try:
            loop.add_signal_handler(sig, terminator, sig)
        except (NotImplementedError, RuntimeError, ValueError) as exc:
            logger.warning("Cannot handle %s on the event loop: %s", sig.name, exc)
