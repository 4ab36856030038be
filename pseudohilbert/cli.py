"""
pseudohilbert command line.

Usage:
  pseudohilbert build 5                       # writes o05_hilbert in the output dir
  pseudohilbert build 3 -o curve.txt --text   # text encoding to a chosen path
  pseudohilbert batch                          # orders 1..15, binary
  pseudohilbert batch --max-order 8 -o out/ --report out/report.json
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from pseudohilbert.batch import BatchRunner
from pseudohilbert.config import Settings, settings as default_settings
from pseudohilbert.engine.builder import build
from pseudohilbert.errors import CurveError, InvalidOrderError
from pseudohilbert.models.reports import OrderReport
from pseudohilbert.serialization.serializer import Encoding, write_curve

logger = logging.getLogger(__name__)

EXIT_FAILED = 1
EXIT_USAGE = 2


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )


def _settings_from_args(base: Settings, args: argparse.Namespace) -> Settings:
    update: dict[str, Any] = {}
    if getattr(args, "text", False):
        update["encoding"] = Encoding.TEXT.value
    if getattr(args, "min_order", None) is not None:
        update["min_order"] = args.min_order
    if getattr(args, "max_order", None) is not None:
        update["max_order"] = args.max_order
    if getattr(args, "output_dir", None) is not None:
        update["output_dir"] = Path(args.output_dir)
    return base.model_copy(update=update)


def _cmd_build(args: argparse.Namespace, cfg: Settings) -> int:
    curve = build(args.order, memory_limit_bytes=cfg.memory_limit_bytes)
    if args.output:
        path = Path(args.output)
    else:
        path = BatchRunner(settings=cfg).output_path(args.order)
        path.parent.mkdir(parents=True, exist_ok=True)
    write_curve(curve.points, path, cfg.encoding, cfg.chunk_points)
    print(f"order {args.order} pseudo-hilbert curve written to {path}")
    return 0


def _print_report(order_report: OrderReport) -> None:
    if order_report.status == "ok":
        print(f"order {order_report.order} pseudo-hilbert curve written")
    else:
        print(f"order {order_report.order} failed: {order_report.error}", file=sys.stderr)


def _cmd_batch(args: argparse.Namespace, cfg: Settings) -> int:
    if cfg.min_order < 1:
        raise InvalidOrderError(cfg.min_order)
    if cfg.max_order < cfg.min_order:
        print(
            f"error: max order {cfg.max_order} is below min order {cfg.min_order}",
            file=sys.stderr,
        )
        return EXIT_USAGE

    report = BatchRunner(settings=cfg).run(on_report=_print_report)
    if args.report:
        Path(args.report).write_text(report.model_dump_json(indent=2), encoding="utf-8")
    return EXIT_FAILED if report.aborted else 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pseudohilbert",
        description="Generate pseudo-Hilbert curve point files",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p_build = sub.add_parser("build", help="Build a single order")
    p_build.add_argument("order", type=int, help="Recursion order (>= 1)")
    p_build.add_argument("-o", "--output", help="Output file (default: template in output dir)")
    p_build.add_argument("--output-dir", help="Directory for the default output name")
    p_build.add_argument("--text", action="store_true", help="Write the text encoding")
    p_build.set_defaults(handler=_cmd_build)

    p_batch = sub.add_parser("batch", help="Build and write a range of orders")
    p_batch.add_argument("--min-order", type=int, help="First order (default 1)")
    p_batch.add_argument("--max-order", type=int, help="Last order, inclusive (default 15)")
    p_batch.add_argument("-o", "--output-dir", help="Output folder")
    p_batch.add_argument("--text", action="store_true", help="Write the text encoding")
    p_batch.add_argument("--report", help="Write a JSON batch report here")
    p_batch.set_defaults(handler=_cmd_batch)

    return parser


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)
    cfg = _settings_from_args(default_settings, args)
    _configure_logging(cfg.log_level)

    try:
        return args.handler(args, cfg)
    except InvalidOrderError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_USAGE
    except CurveError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_FAILED


if __name__ == "__main__":
    sys.exit(main())
