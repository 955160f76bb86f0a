"""Derive the current pomodoro phase from a start time and the clock.

The phase is never stored. It is recomputed from ``(started_at, now, config)``
on every query, so there is nothing to drift out of sync.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from .scheduler import Config

IDLE_TEXT = "no pomodoro running"
IDLE_COMPACT = ">----"
DONE_TEXT = "READY"
DONE_COMPACT = ">DONE"


@dataclass(frozen=True)
class Idle:
    """No pomodoro is running."""


@dataclass(frozen=True)
class Work:
    remaining: int


@dataclass(frozen=True)
class Rest:
    remaining: int


@dataclass(frozen=True)
class Done:
    """Work and rest are both over. Stays here until stopped or restarted."""


Phase = Union[Idle, Work, Rest, Done]


def compute_phase(started_at: Optional[int], now: int, config: Config) -> Phase:
    """Return the phase for a session started at ``started_at``.

    Elapsed time equal to the work duration still counts as work. A clock
    that went backwards is treated as zero elapsed time.
    """
    if started_at is None:
        return Idle()
    elapsed = max(0, now - started_at)
    if elapsed <= config.work_duration:
        return Work(remaining=config.work_duration - elapsed)
    if elapsed < config.total():
        return Rest(remaining=config.total() - elapsed)
    return Done()


def format_remaining(seconds: int) -> str:
    if seconds >= 60:
        return f"{seconds // 60:>2}m"
    return f"{seconds:>2}s"


def format_phase(phase: Phase, compact: bool = False) -> str:
    """Render a phase as a status line.

    Args:
        phase: Phase returned by :func:`compute_phase`.
        compact: Use the short placeholders meant for status bars
            (``>----`` and ``>DONE``) instead of the full text.
    """
    if isinstance(phase, Work):
        return f"W:{format_remaining(phase.remaining)}"
    if isinstance(phase, Rest):
        return f"R:{format_remaining(phase.remaining)}"
    if isinstance(phase, Done):
        return DONE_COMPACT if compact else DONE_TEXT
    return IDLE_COMPACT if compact else IDLE_TEXT


def phase_progress(phase: Phase, config: Config) -> float:
    """Fraction of the current phase already elapsed, between 0 and 1."""
    if isinstance(phase, Work):
        return 1 - phase.remaining / config.work_duration
    if isinstance(phase, Rest):
        if not config.rest_duration:
            return 1.0
        return 1 - phase.remaining / config.rest_duration
    if isinstance(phase, Done):
        return 1.0
    return 0.0
