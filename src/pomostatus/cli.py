"""Command line interface for the pomodoro status timer."""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Iterable, Optional

from . import session
from .phase import IDLE_TEXT
from .store import Store, StoreError

logger = logging.getLogger(__name__)


def parse_args(argv: Iterable[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="pomostatus", description="pomodoro timer")
    commands = parser.add_subparsers(dest="command", metavar="COMMAND", required=True)

    init = commands.add_parser("init", help="initialize configuration")
    init.add_argument("-f", "--force", action="store_true", help="create a new config file with defaults, unconditionally")
    commands.add_parser("start", help="start a new pomodoro")
    commands.add_parser("stop", help="stop current pomodoro")
    commands.add_parser("status", help="current pomodoro status")
    return parser.parse_args(list(argv))


def configure_logging() -> None:
    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s", stream=sys.stderr, level=logging.WARNING)
    logging.getLogger("pomostatus").setLevel(logging.WARNING)


def run(args: argparse.Namespace, store: Store, clock: session.Clock) -> None:
    if args.command == "init":
        path = session.init(store, force=args.force)
        if path is None:
            print(f"config left untouched at {store.config_path} (use --force to overwrite)")
        else:
            print(f"wrote new config to {path}")
    elif args.command == "start":
        session.start(store, clock)
        print(session.status(store, clock))
    elif args.command == "stop":
        if not session.stop(store):
            print(IDLE_TEXT)
    elif args.command == "status":
        print(session.status(store, clock))


def main(
    argv: Optional[Iterable[str]] = None,
    *,
    store: Optional[Store] = None,
    clock: Optional[session.Clock] = None,
) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    configure_logging()
    try:
        run(args, store or Store(), clock or session.now)
    except StoreError as e:
        logger.debug("Command failed", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
