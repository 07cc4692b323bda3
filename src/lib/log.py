"""
Centralized logging using Loguru with context-aware verbosity.

LOG() respects the verbosity of the ProgramState connected to the current
context, so resolver code can log without having a state passed in. With
no state connected (library use, tests) nothing is emitted.

Usage:
    from codeimport.lib.log import LOG, state_connectToLogger

    state_connectToLogger(state)

    LOG("Rendering notes/index.html", level=1)
    LOG("2 directives in leaf", level=2)
    LOG("Resolved 'src/main.go' -> 'notes/src/main.go'", level=3)
"""

from loguru import logger
from typing import Any, Optional
from contextvars import ContextVar
import sys

# Verbosity carrier for the current render pass
_program_state: ContextVar[Optional[Any]] = ContextVar('program_state', default=None)

logger_format = (
    "<green>{time:HH:mm:ss}</green> │ "
    "<level>{level: <7}</level> │ "
    "<cyan>{function: <22}</cyan> ║ "
    "<level>{message}</level>"
)

logger.remove()
logger.add(sys.stderr, format=logger_format, level="DEBUG")


def state_connectToLogger(state: Any) -> None:
    """
    Bind a ProgramState (anything with a ``verbosity`` attribute) to the
    logging context of the caller.

    Args:
        state: ProgramState instance with verbosity attribute
    """
    _program_state.set(state)


def verbosity_get() -> int:
    """Verbosity of the connected state, 0 when none is connected"""
    state = _program_state.get()
    return getattr(state, 'verbosity', 0) if state is not None else 0


def LOG(message: str, level: int = 1, **kwargs: Any) -> None:
    """
    Log message if current state's verbosity allows.

    Args:
        message: Log message to display
        level: Minimum verbosity level required (1=normal, 2=verbose, 3=debug)
        **kwargs: Additional loguru metadata
    """
    if verbosity_get() >= level:
        logger.opt(depth=1).debug(message, **kwargs)


def LOG_warning(message: str, **kwargs: Any) -> None:
    """
    Log a recoverable problem (missing file, read failure).

    Emitted at warning level when the connected state has verbosity >= 1;
    silent at verbosity 0 or with no state connected.
    """
    if verbosity_get() >= 1:
        logger.opt(depth=1).warning(message, **kwargs)
