# src/app.py
from __future__ import annotations


import argparse
import logging
import sys
from typing import Dict, Optional

# local imports
import counter
from export import HistoryExporter
from undoable import Limits, Store, UndoConfig, load_config


# ---------------------------
# Action tokens
# ---------------------------

TOKENS: Dict[str, str] = {
    # token → method on the CLI driver
    "inc": "increment",
    "+": "increment",
    "dec": "decrement",
    "-": "decrement",
    "undo": "undo",
    "u": "undo",
    "redo": "redo",
    "r": "redo",
    "init": "init",
    "reset": "init",
}


def _apply_overrides(config: UndoConfig, past: Optional[int], future: Optional[int]) -> UndoConfig:
    """CLI limits win over the config file."""
    if past is None and future is None:
        return config
    limits = Limits(
        past=config.limits.past if past is None else past,
        future=config.limits.future if future is None else future,
    )
    return UndoConfig(
        limits=limits,
        comparator=config.comparator,
        undo_type=config.undo_type,
        redo_type=config.redo_type,
    )


def _run(store: Store, token: str) -> None:
    op = TOKENS[token]
    if op == "increment":
        store.dispatch(counter.increment())
    elif op == "decrement":
        store.dispatch(counter.decrement())
    else:
        getattr(store, op)()


# ---------------------------
# App bootstrap
# ---------------------------

def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Replay counter actions through an undoable reducer")
    parser.add_argument("actions", nargs="*", help=f"Actions to dispatch: {', '.join(sorted(TOKENS))}")
    parser.add_argument("--config", "-c", help="Path to config.yaml", default=None)
    parser.add_argument("--past-limit", type=int, default=None, help="Max snapshots kept in past")
    parser.add_argument("--future-limit", type=int, default=None, help="Max snapshots kept in future")
    parser.add_argument("--compact", action="store_true", help="Single-line JSON output")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log reducer decisions to stderr")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    unknown = [t for t in args.actions if t not in TOKENS]
    if unknown:
        print(f"[app] unknown action(s): {', '.join(unknown)}", file=sys.stderr)
        return 2

    # Config (file, then CLI overrides)
    config = _apply_overrides(load_config(args.config), args.past_limit, args.future_limit)

    store = Store(config.build(counter.reduce, counter.init()))
    for token in args.actions:
        _run(store, token)

    exporter = HistoryExporter()
    print(exporter.dumps(exporter.build(store.state), pretty=not args.compact))
    return 0


if __name__ == "__main__":
    sys.exit(main())
