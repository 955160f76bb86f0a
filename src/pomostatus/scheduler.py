"""Pomodoro schedule helpers."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping


@dataclass(frozen=True)
class Interval:
    """Represents one work or rest interval."""

    kind: str
    label: str
    duration_seconds: int


DEFAULTS = {
    "count": 8,
    "duration": 25,
    "rest": 5,
    "compact": False,
}


@dataclass(frozen=True)
class Config:
    """User-tunable schedule. Durations are stored in seconds."""

    work_duration: int = DEFAULTS["duration"] * 60
    rest_duration: int = DEFAULTS["rest"] * 60
    repeat_count: int = DEFAULTS["count"]
    compact: bool = DEFAULTS["compact"]

    def __post_init__(self) -> None:
        if self.work_duration <= 0:
            raise ValueError("work duration must be positive")
        if self.rest_duration < 0:
            raise ValueError("rest duration must not be negative")
        if self.repeat_count < 1:
            raise ValueError("repeat count must be at least 1")

    @classmethod
    def default(cls) -> "Config":
        return cls()

    def total(self) -> int:
        return self.work_duration + self.rest_duration

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Config":
        """Build a config from a persisted record.

        Args:
            record: Mapping with ``count``, ``duration`` and ``rest`` (minutes)
                and an optional ``compact`` flag. Missing keys use defaults.

        Raises:
            ValueError: If a value has the wrong type or is out of range.
        """
        values = {**DEFAULTS, **record}
        for key in ("count", "duration", "rest"):
            # bool is an int subclass, reject it explicitly
            if not isinstance(values[key], int) or isinstance(values[key], bool):
                raise ValueError(f"{key} must be an integer")
        if not isinstance(values["compact"], bool):
            raise ValueError("compact must be true or false")
        return cls(
            work_duration=values["duration"] * 60,
            rest_duration=values["rest"] * 60,
            repeat_count=values["count"],
            compact=values["compact"],
        )

    def to_record(self) -> Dict[str, Any]:
        """Map to the persisted record, which holds whole minutes.

        Raises:
            ValueError: If a duration is not a whole number of minutes.
        """
        if self.work_duration % 60 or self.rest_duration % 60:
            raise ValueError("durations must be whole minutes to be saved")
        return {
            "count": self.repeat_count,
            "duration": self.work_duration // 60,
            "rest": self.rest_duration // 60,
            "compact": self.compact,
        }


def build_plan(config: Config) -> List[Interval]:
    """List the intervals of a full session set.

    Each of the ``repeat_count`` pomodoros contributes a work interval
    followed by its rest interval. Zero-length rests are left out.
    """
    intervals: List[Interval] = []
    for index in range(1, config.repeat_count + 1):
        intervals.append(
            Interval(
                kind="work",
                label=f"Work {index}",
                duration_seconds=config.work_duration,
            )
        )
        if config.rest_duration:
            intervals.append(
                Interval(
                    kind="rest",
                    label=f"Rest {index}",
                    duration_seconds=config.rest_duration,
                )
            )
    return intervals
