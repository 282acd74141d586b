"""Command line interface for bubblesort."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from functools import partial
from typing import Any

from .config import load_config, load_settings
from .demo import run_demo
from .properties import PROPERTIES, check_properties
from .sorter import InvalidSequenceError, bubble_sort

logger = logging.getLogger(__name__)


def _resolve_config(args: argparse.Namespace) -> dict[str, Any]:
    settings = load_settings()
    overrides: dict[str, Any] = {}
    if settings.log_level:
        overrides["log_level"] = settings.log_level
    if args.log_level:
        overrides["log_level"] = args.log_level
    if args.early_exit:
        overrides["early_exit"] = True
    config_path = args.config or settings.config_path
    try:
        return load_config(config_path, overrides=overrides)
    except FileNotFoundError as exc:
        raise SystemExit(f"Configuration file not found: {exc.filename}") from exc
    except (ValueError, OSError) as exc:
        raise SystemExit(f"Could not load configuration: {exc}") from exc


def _log_level(cfg: dict[str, Any]) -> int:
    level = logging.getLevelName(str(cfg.get("log_level", "INFO")).upper())
    if not isinstance(level, int):
        raise SystemExit(f"Unknown log level: {cfg.get('log_level')}")
    return level


def _early_exit(cfg: dict[str, Any]) -> bool:
    early_exit = cfg.get("early_exit", False)
    if not isinstance(early_exit, bool):
        raise SystemExit(f"Invalid early_exit: expected true or false, got {early_exit!r}")
    return early_exit


def _run(values: Any, cfg: dict[str, Any]) -> None:
    labels = cfg.get("labels") or {}
    if not isinstance(labels, dict):
        raise SystemExit(f"Invalid labels: expected a mapping, got {labels!r}")
    try:
        run_demo(
            values,
            early_exit=_early_exit(cfg),
            before_label=labels.get("before", ""),
            after_label=labels.get("after", ""),
        )
    except InvalidSequenceError as exc:
        raise SystemExit(f"Invalid input: {exc}") from exc


def cmd_demo(args: argparse.Namespace, cfg: dict[str, Any]) -> None:
    values = cfg.get("values")
    if not isinstance(values, list):
        raise SystemExit(f"Invalid input: 'values' must be a list of integers, got {values!r}")
    _run(values, cfg)


def cmd_sort(args: argparse.Namespace, cfg: dict[str, Any]) -> None:
    _run(args.values, cfg)


def cmd_verify(args: argparse.Namespace, cfg: dict[str, Any]) -> None:
    sort_fn = partial(bubble_sort, early_exit=_early_exit(cfg))
    metrics = check_properties(sort_fn)
    print(json.dumps(metrics, indent=2))
    failed = [name for name in PROPERTIES if metrics[name] < 1.0]
    if failed:
        raise SystemExit(f"Property check failed: {', '.join(failed)}")
    logger.info("All %s properties hold", len(PROPERTIES))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="bubblesort", description="Bubble sort an integer array")
    parser.add_argument("--config", help="YAML configuration file")
    parser.add_argument("--early-exit", action="store_true", help="Stop after a pass with no swaps")
    parser.add_argument("--log-level", help="Logging level (default INFO)")
    sub = parser.add_subparsers(dest="command")

    p_demo = sub.add_parser("demo", help="Sort the configured array (default)")
    p_demo.set_defaults(func=cmd_demo)

    p_sort = sub.add_parser("sort", help="Sort integers given on the command line")
    p_sort.add_argument("values", nargs="+", type=int)
    p_sort.set_defaults(func=cmd_sort)

    p_verify = sub.add_parser("verify", help="Check sorting properties over built-in datasets")
    p_verify.set_defaults(func=cmd_verify)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    cfg = _resolve_config(args)
    logging.basicConfig(level=_log_level(cfg))
    func = getattr(args, "func", cmd_demo)
    func(args, cfg)


if __name__ == "__main__":  # pragma: no cover
    main(sys.argv[1:])
