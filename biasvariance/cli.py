"""Headless runner: run the demonstration steps and save their tables and charts."""
from __future__ import annotations

import argparse
import logging
import os
import sys

from biasvariance.config import load_config
from biasvariance.logging_config import setup_logging
from biasvariance.steps import STEPS, run_all

logger = logging.getLogger(__name__)


def write_outputs(results, out_dir: str) -> list[str]:
    """Write each step's table as CSV and its figure as standalone HTML."""
    os.makedirs(out_dir, exist_ok=True)
    written = []
    for i, result in enumerate(results, start=1):
        stem = os.path.join(out_dir, f"{i:02d}_{result.name}")
        result.table.to_csv(f"{stem}.csv", index=False)
        written.append(f"{stem}.csv")
        if result.figure is not None:
            result.figure.write_html(f"{stem}.html", include_plotlyjs="cdn")
            written.append(f"{stem}.html")
    return written


def cmd_run(args: argparse.Namespace) -> int:
    try:
        config = load_config(args.config)
    except ValueError as exc:
        logger.error("Invalid configuration: %s", exc)
        return 2
    logger.info("Settings: %s", config.to_dict())

    results = run_all(config, names=args.steps)
    for result in results:
        summary = ", ".join(
            f"{k}={v:.4f}" if isinstance(v, float) else f"{k}={v}"
            for k, v in result.stats.items()
            if not k.startswith("residual_")
        )
        logger.info("[%s] %s", result.name, summary)

    if args.out:
        for path in write_outputs(results, args.out):
            logger.info("Saved: %s", path)
    return 0


def cmd_steps(args: argparse.Namespace) -> int:
    for name, fn in STEPS.items():
        print(f"{name:15s} {fn.__doc__.strip().splitlines()[0]}")
    return 0


def main(argv: list[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    p = argparse.ArgumentParser(prog="biasvariance-demo",
                                description="Run the bias and variance demonstrations")
    p.add_argument("--log-level", default="INFO",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    p.add_argument("--log-file", default=None, help="Also write the log to this file")
    sub = p.add_subparsers(dest="cmd", required=True)

    sp = sub.add_parser("run", help="Run the demonstration steps")
    sp.add_argument("--config", default=None, help="Path to YAML config")
    sp.add_argument("--out", default=None, help="Folder for CSV tables and HTML charts")
    sp.add_argument("--steps", nargs="+", choices=list(STEPS), default=None,
                    help="Subset of steps to run (default: all)")
    sp.set_defaults(func=cmd_run)

    sp = sub.add_parser("steps", help="List the demonstration steps")
    sp.set_defaults(func=cmd_steps)

    args = p.parse_args(argv)
    setup_logging(getattr(logging, args.log_level), log_file=args.log_file)
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
