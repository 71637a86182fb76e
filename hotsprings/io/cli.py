"""Command-line interface."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from hotsprings.core.exceptions import ConfigError, ParseError
from hotsprings.core.search import STRATEGY_REGISTRY, arrangements, num_arrangements

from . import config, parser

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Count arrangements of damaged springs")
    ap.add_argument("records", nargs="+", help='Condition records, e.g. "???.### 1,1,3"')
    ap.add_argument("--config", help="Path to solver options YAML")
    ap.add_argument("--repeat", type=int, help="Unfold each record this many times")
    ap.add_argument("--strategy", choices=sorted(STRATEGY_REGISTRY), help="Counting strategy")
    ap.add_argument("--list", action="store_true", help="Print every arrangement")
    ap.add_argument("-v", "--verbose", action="count", default=0, help="More log output")
    args = ap.parse_args(argv)

    try:
        options = config.load_options(Path(args.config)) if args.config else config.SolverOptions()
        if args.repeat is not None:
            options.repeat = args.repeat
        if args.strategy is not None:
            options.strategy = args.strategy
        options.validate()
        if args.list and args.strategy is not None:
            raise ConfigError("--strategy has no effect with --list")
        records = [parser.parse_record(line) for line in args.records]
    except (ConfigError, ParseError) as exc:
        ap.error(str(exc))

    level = logging.getLevelName(options.log_level.upper())
    if args.verbose:
        level = logging.DEBUG if args.verbose > 1 else min(level, logging.INFO)
    logging.basicConfig(level=level, format="%(asctime)s - %(levelname)s - %(message)s")

    total = 0
    for record in records:
        unfolded = record.repeat(options.repeat)
        if args.list:
            found = arrangements(unfolded)
            print(f"{record}: {len(found)}")
            for line in found:
                print(f"  {line}")
            continue
        count = num_arrangements(unfolded, options.strategy)
        logger.info("%s: %d arrangements", unfolded, count)
        print(f"{record}: {count}")
        total += count

    if not args.list:
        print(f"Total: {total}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
