"""
Command line entry point - print side-by-side comparisons of sample objects.

Usage:
    objcompare                      # compare the default "datetime" sample
    objcompare contact --no-headers
    objcompare --list
    objcompare date --stringify     # print each object on its own
"""

import argparse
import sys
from typing import Callable, List, Optional

from objcompare.comparison.exceptions import ObjectCompareError
from objcompare.comparison.merge_aligner import align, write_rows
from objcompare.comparison.stringify import stringify
from objcompare.config.settings import ConfigurationError, Settings
from objcompare.domain.samples import SAMPLES, build_sample, get_sample, sample_names
from objcompare.utils.logger import configure_logging, get_logger, truncate_for_log

logger = get_logger(__name__)

DEFAULT_SAMPLE = "datetime"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="objcompare",
        description="Show the top-level properties of two objects side by side.",
    )
    parser.add_argument(
        "sample",
        nargs="?",
        default=DEFAULT_SAMPLE,
        help=f"Sample pair to compare (default: {DEFAULT_SAMPLE})",
    )
    parser.add_argument("--list", action="store_true", help="List available samples and exit")
    parser.add_argument("--config", help="YAML settings file")
    parser.add_argument("--gap", type=int, help="Spaces between the two tables")
    parser.add_argument("--no-headers", action="store_true", help="Omit header rows")
    parser.add_argument(
        "--stringify",
        action="store_true",
        help="Print each object as 'name: value' lines instead of side by side",
    )
    return parser


def print_samples(write: Callable[[str], None]) -> None:
    """Write one line per available sample."""
    width = max(len(name) for name in SAMPLES)
    for name in sample_names():
        write(f"{name.ljust(width)}  {SAMPLES[name].description}")


def _write_stringified(sample: str, write: Callable[[str], None]) -> int:
    definition = get_sample(sample)
    left_obj, right_obj = definition.factory()
    logger.info(
        f"Stringifying sample {sample}",
        operation="run_comparison",
        context={
            "left": truncate_for_log(definition.left_label),
            "right": truncate_for_log(definition.right_label),
        },
    )

    lines = 0
    for label, obj in ((definition.left_label, left_obj), (definition.right_label, right_obj)):
        write(label)
        for line in stringify(obj).splitlines():
            write(line)
            lines += 1
        lines += 1
    return lines


def run_comparison(
    sample: str, settings: Settings, write: Callable[[str], None], stringify_only: bool = False
) -> int:
    """
    Build a sample pair and write its comparison.

    Returns:
        Number of lines written
    """
    if stringify_only:
        return _write_stringified(sample, write)

    left, right = build_sample(sample)
    logger.info(
        f"Comparing sample {sample}",
        operation="run_comparison",
        context={
            "left": truncate_for_log(left.label),
            "right": truncate_for_log(right.label),
            **settings.to_dict(),
        },
    )

    rows = align(left.to_table(), right.to_table(), include_headers=settings.show_headers)
    return write_rows(rows, write, gap=settings.table_gap)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    if args.list:
        print_samples(print)
        return 0

    try:
        settings = Settings(config_file=args.config)
        if args.gap is not None:
            if args.gap < 0:
                raise ConfigurationError(f"--gap must be >= 0, got {args.gap}")
            settings.table_gap = args.gap
        if args.no_headers:
            settings.show_headers = False
        configure_logging(settings.log_level_value)
        logger.set_level(settings.log_level_value)

        run_comparison(args.sample, settings, print, stringify_only=args.stringify)
        return 0

    except ConfigurationError as e:
        logger.error("Configuration error", operation="main", error=str(e))
        return 1
    except ObjectCompareError as e:
        logger.error("Comparison failed", operation="main", error=str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
