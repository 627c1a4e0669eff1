"""Entry point for the configuration store demo."""

from __future__ import annotations

import argparse
import sys

from config_store.errors import ConfigLoadError
from config_store.runtime import get_store
from config_store.store import ConfigurationStore
from services.database_service import DatabaseService
from utils.env_utils import load_env_files
from utils.log_utils import tprint
from utils.threading_utils import run_concurrently


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Read settings from the configuration store.")
    parser.add_argument(
        "--readers",
        type=int,
        default=0,
        help="Spawn this many concurrent readers for the first access.",
    )
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Reload the settings once after the first read.",
    )
    parser.add_argument("--all", action="store_true", help="Print every setting.")
    return parser


def _race_first_access(store: ConfigurationStore, readers: int) -> None:
    values = run_concurrently(lambda: store.get_setting("LogLevel"), readers)
    tprint(
        f"[MAIN] {readers} readers saw {sorted(set(values))}; "
        f"load ran {store.load_count} time(s)"
    )


def main(argv: list[str] | None = None, store: ConfigurationStore | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.readers < 0:
        parser.error("--readers must be >= 0")

    load_env_files()
    store = store or get_store()

    try:
        if args.readers:
            _race_first_access(store, args.readers)

        DatabaseService(store).connect()
        print(store.get_setting("LogLevel"))

        if args.reload:
            store.reload()
            tprint(f"[MAIN] Reloaded settings; load count is {store.load_count}")

        if args.all:
            for key, value in sorted(store.get_all_settings().items()):
                print(f"{key}={value}")
    except ConfigLoadError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
