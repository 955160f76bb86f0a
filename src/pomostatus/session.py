"""Session lifecycle: start, stop, status and init."""
from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Callable, Optional

from .phase import compute_phase, format_phase
from .scheduler import Config
from .store import SessionState, Store

logger = logging.getLogger(__name__)

Clock = Callable[[], int]


def now() -> int:
    """Current time in whole seconds since the epoch."""
    return int(time.time())


def start(store: Store, clock: Clock = now) -> SessionState:
    """Begin a new pomodoro, replacing any session already running."""
    config = store.load_config()
    state = SessionState(started_at=clock(), config=config)
    store.save_state(state)
    logger.info(f"Started pomodoro at {state.started_at}")
    return state


def stop(store: Store) -> bool:
    """Clear the running pomodoro.

    Returns:
        False if there was no state file, in which case nothing is written.
    """
    if not store.has_state():
        logger.debug("No state file, nothing to stop")
        return False
    store.save_state(SessionState())
    logger.info("Stopped pomodoro")
    return True


def status(store: Store, clock: Clock = now) -> str:
    config = store.load_config()
    state = store.load_state(config)
    phase = compute_phase(state.started_at, clock(), state.config)
    logger.debug(f"started_at={state.started_at} phase={phase}")
    return format_phase(phase, compact=config.compact)


def init(store: Store, force: bool = False) -> Optional[Path]:
    """Write a default config file.

    Only happens with ``force``, so an existing config is never replaced by
    accident.
    """
    if not force:
        return None
    return store.write_config(Config.default())
