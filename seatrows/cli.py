"""
Command-line interface for seatrows
"""

import argparse
import json
import logging
import os
import sys
import time
from typing import List, Optional

import yaml

from seatrows.config import Config, load_config
from seatrows.distributor import Distributor, SeatingResult
from seatrows.errors import SeatingError
from seatrows.utils.format_utils import format_seat_counts, format_spacing_summary
from seatrows.utils.metrics_utils import spacing_summary

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments"""
    parser = argparse.ArgumentParser(
        description="seatrows - distribute seats over concentric rows between two radii"
    )

    parser.add_argument("inner_radius", help="Radius of the first row", type=float)

    parser.add_argument("outer_radius", help="Radius the last row is measured towards", type=float)

    parser.add_argument("total_seats", help="Number of seats to place", type=int)

    parser.add_argument("--config", "-c", help="Path to configuration file (YAML)", default=None)

    parser.add_argument("--output", "-o", help="File to write the result to", default=None)

    parser.add_argument(
        "--format",
        "-f",
        help="Output format",
        choices=["text", "json", "yaml"],
        default="text",
    )

    parser.add_argument(
        "--rounding", help="Seat estimate rounding", choices=["half_up", "half_even"], default=None
    )

    parser.add_argument(
        "--metric-update",
        help="How a row's capacity metric follows its seat count while balancing",
        choices=["carry", "scale"],
        default=None,
    )

    parser.add_argument(
        "--log-level",
        "-l",
        help="Logging level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=None,
    )

    return parser.parse_args(argv)


def resolve_log_level(name: str) -> int:
    """Map a level name such as ``"INFO"`` to its logging constant"""
    level = getattr(logging, str(name).upper(), None)
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level '{name}'")
    return level


def setup_logging(config: Config) -> None:
    """Set up console logging, plus a file log when ``log_dir`` is configured"""
    root_logger = logging.getLogger()
    root_logger.setLevel(resolve_log_level(config.log_level))

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if config.log_dir:
        os.makedirs(config.log_dir, exist_ok=True)
        log_file = os.path.join(config.log_dir, f"seatrows_{time.strftime('%Y%m%d_%H%M%S')}.log")
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)
        logger.info(f"Logging to {log_file}")


def render(result: SeatingResult, output_format: str) -> str:
    """Render a seating result as text, JSON or YAML"""
    if output_format == "json":
        return json.dumps(result.to_dict(), indent=2)
    if output_format == "yaml":
        return yaml.safe_dump(result.to_dict(), default_flow_style=False, sort_keys=False)

    summary = spacing_summary(result.inner_radius, result.outer_radius, result.seat_counts)
    lines = [
        f"Rows: {result.row_count}",
        f"Seats per row: {result.seat_counts}",
        f"Total: {format_seat_counts(result.seat_counts)}",
    ]
    if result.seat_counts:
        lines.append(f"Arc per seat: {format_spacing_summary(summary)}")
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point

    Returns:
        Exit code
    """
    args = parse_args(argv)

    if args.config and not os.path.exists(args.config):
        print(f"Error: Config file '{args.config}' not found", file=sys.stderr)
        return 1

    # Load base config from file or defaults, then apply command-line overrides
    config = load_config(args.config)
    if args.rounding:
        config.estimator.rounding = args.rounding
    if args.metric_update:
        config.balancer.metric_update = args.metric_update
    if args.log_level:
        config.log_level = args.log_level

    try:
        setup_logging(config)
        distributor = Distributor(config=config)
        result = distributor.arrange(args.inner_radius, args.outer_radius, args.total_seats)
    except (SeatingError, ValueError) as e:
        logger.debug("Distribution failed", exc_info=True)
        print(f"Error: {str(e)}", file=sys.stderr)
        return 1

    rendered = render(result, args.format)
    if args.output:
        with open(args.output, "w") as f:
            f.write(rendered + "\n")
        logger.info(f"Result written to {args.output}")
    else:
        print(rendered)

    return 0


if __name__ == "__main__":
    sys.exit(main())
