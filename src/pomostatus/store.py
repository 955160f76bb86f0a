"""File-backed config and session state.

Both files are small, human-editable TOML documents::

    ~/.config/pomostatus/config.toml      count, duration, rest, compact
    ~/.local/share/pomostatus/state.toml  started_at

A missing file means defaults (config) or idle (state). A file that cannot be
parsed is treated the same way and reported through the log. Other read
errors and every write error are raised as :class:`StoreError`.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

try:
    import tomllib
except ImportError:  # Python < 3.11
    import tomli as tomllib  # type: ignore

import tomli_w

from .scheduler import Config

logger = logging.getLogger(__name__)

APP_NAME = "pomostatus"
CONFIG_FILE = "config.toml"
STATE_FILE = "state.toml"


class StoreError(Exception):
    """Raised when a persisted file cannot be read or written."""


@dataclass
class SessionState:
    """The single durable marker of a running pomodoro."""

    started_at: Optional[int] = None
    config: Config = field(default_factory=Config.default)

    def to_record(self) -> Dict[str, Any]:
        if self.started_at is None:
            return {}
        return {"started_at": self.started_at}


def default_config_dir() -> Path:
    return Path.home() / ".config" / APP_NAME


def default_data_dir() -> Path:
    return Path.home() / ".local" / "share" / APP_NAME


class Store:
    """Reads and writes the config and state files."""

    def __init__(self, config_dir: Optional[Path] = None, data_dir: Optional[Path] = None):
        self.config_dir = Path(config_dir) if config_dir else default_config_dir()
        self.data_dir = Path(data_dir) if data_dir else default_data_dir()

    @property
    def config_path(self) -> Path:
        return self.config_dir / CONFIG_FILE

    @property
    def state_path(self) -> Path:
        return self.data_dir / STATE_FILE

    def _read(self, path: Path) -> Optional[Dict[str, Any]]:
        """Parse a TOML file.

        Returns:
            The parsed document, or None if the file is absent or malformed.
        """
        try:
            with open(path, "rb") as f:
                return tomllib.load(f)
        except FileNotFoundError:
            logger.debug(f"{path} not found")
            return None
        except (tomllib.TOMLDecodeError, UnicodeDecodeError) as e:
            logger.warning(f"Ignoring malformed {path}: {e}")
            return None
        except OSError as e:
            raise StoreError(f"cannot read {path}: {e}") from e

    def _write(self, path: Path, record: Dict[str, Any]) -> None:
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, "wb") as f:
                tomli_w.dump(record, f)
        except OSError as e:
            raise StoreError(f"cannot write {path}: {e}") from e

    def load_config(self) -> Config:
        record = self._read(self.config_path)
        if record is None:
            return Config.default()
        try:
            return Config.from_record(record)
        except ValueError as e:
            logger.warning(f"Invalid config in {self.config_path}, using defaults: {e}")
            return Config.default()

    def write_config(self, config: Config) -> Path:
        self._write(self.config_path, config.to_record())
        logger.info(f"Wrote config to {self.config_path}")
        return self.config_path

    def has_state(self) -> bool:
        return self.state_path.exists()

    def load_state(self, config: Config) -> SessionState:
        record = self._read(self.state_path)
        if record is None:
            return SessionState(config=config)
        started_at = record.get("started_at")
        if started_at is not None and (not isinstance(started_at, int) or isinstance(started_at, bool)):
            logger.warning(f"Invalid started_at in {self.state_path}, treating as idle")
            started_at = None
        return SessionState(started_at=started_at, config=config)

    def save_state(self, state: SessionState) -> None:
        self._write(self.state_path, state.to_record())
        logger.debug(f"Saved state {state.to_record()} to {self.state_path}")
