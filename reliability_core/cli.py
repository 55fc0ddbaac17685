"""Command line entry point: ``reliability-calc``."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from .components import load_component_rates
from .config import Settings, configure_logging, load_settings
from .data import make_data, save_data
from .engine import get_prob
from .models import Topology
from .validation import ReliabilityError

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="reliability-calc",
        description="System reliability of independent components with exponential lifetimes.",
    )
    parser.add_argument("--config", type=Path, default=None, help="YAML configuration file (default: ./config.yaml)")
    parser.add_argument("--log-level", default=None, help="override the configured logging level")
    sub = parser.add_subparsers(dest="command", required=True)

    prob = sub.add_parser("prob", help="compute system reliability per time point")
    prob.add_argument("-t", "--time", dest="times", type=float, nargs="+", default=None,
                      help="time point(s); defaults to the configured default_time")
    prob.add_argument("-l", "--lambda", dest="lambdas", type=float, nargs="+", default=None,
                      help="component failure rate(s)")
    prob.add_argument("--rates-file", type=Path, default=None,
                      help="component sheet (.csv/.xlsx) holding failure rates")
    prob.add_argument("--type", dest="topology", choices=[t.value for t in Topology], default=None,
                      help="series or parallel (default from configuration)")
    prob.add_argument("-o", "--output", type=Path, default=None, help="write the table as CSV instead of printing")

    make = sub.add_parser("make-data", help="write the bundled helper table")
    make.add_argument("-o", "--output", type=Path, default=None, help="target file (.csv, .xlsx, .yaml)")

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        settings = load_settings(args.config)
        configure_logging(args.log_level.upper() if args.log_level else settings.log_level)
        if args.command == "prob":
            return _run_prob(args, settings)
        return _run_make_data(args, settings)
    except ReliabilityError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_ERROR


def _run_prob(args: argparse.Namespace, settings: Settings) -> int:
    lambdas = _collect_rates(args, settings)
    times = args.times if args.times else [settings.default_time]
    topology = args.topology or settings.topology

    table = get_prob(times, lambdas, topology)
    if args.output:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        table.to_csv(args.output, index=False)
        logger.info("Wrote %d row(s) to %s", len(table), args.output)
    else:
        print(table.to_string(index=False))
    return EXIT_OK


def _run_make_data(args: argparse.Namespace, settings: Settings) -> int:
    path = save_data(make_data(), args.output or settings.data_path)
    print(path)
    return EXIT_OK


def _collect_rates(args: argparse.Namespace, settings: Settings) -> List[float]:
    rates: List[float] = list(args.lambdas or [])
    sheet = settings.components
    rates_file = args.rates_file or (None if rates else sheet.path)
    if rates_file is not None:
        loaded = load_component_rates(
            rates_file,
            id_column=sheet.col_name_comp_id,
            rate_column=sheet.col_name_lambda,
            delimiter=sheet.delimiter,
        )
        rates.extend(loaded.values())
    if not rates:
        raise ReliabilityError("No failure rates given; use --lambda or --rates-file.")
    return rates


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
