"""Batch driver: builds and writes every order in a range, stopping at the first failure."""

from __future__ import annotations

import logging
import time
from collections.abc import Generator
from pathlib import Path
from typing import Callable

from pseudohilbert.config import Settings, settings as default_settings
from pseudohilbert.engine.builder import build
from pseudohilbert.engine.curve import Curve
from pseudohilbert.errors import CurveError
from pseudohilbert.models.reports import BatchReport, OrderReport
from pseudohilbert.serialization.serializer import Encoding, write_curve

logger = logging.getLogger(__name__)


class BatchRunner:
    """Builds orders ``min_order..max_order`` one at a time and writes each to its own file."""

    def __init__(
        self,
        settings: Settings | None = None,
        builder: Callable[[int], Curve] | None = None,
    ) -> None:
        self.settings = settings or default_settings
        self.builder = builder or self._default_builder

    def _default_builder(self, order: int) -> Curve:
        return build(order, memory_limit_bytes=self.settings.memory_limit_bytes)

    @property
    def orders(self) -> range:
        return range(self.settings.min_order, self.settings.max_order + 1)

    def output_path(self, order: int) -> Path:
        name = self.settings.file_name_template.format(order=order)
        if Encoding(self.settings.encoding) is Encoding.TEXT:
            name += ".txt"
        return Path(self.settings.output_dir) / name

    def run(self, on_report: Callable[[OrderReport], None] | None = None) -> BatchReport:
        """Run the whole batch and collect the per-order reports.

        ``on_report`` is called with each report as soon as its order finishes.
        """
        start = time.perf_counter()
        report = BatchReport()
        for order_report in self.run_streaming():
            report.orders.append(order_report)
            if order_report.status == "error":
                report.aborted = True
            if on_report is not None:
                on_report(order_report)

        total = (time.perf_counter() - start) * 1000
        logger.info(
            "Batch complete: %d/%d orders in %.0fms",
            len(report.completed),
            len(self.orders),
            total,
        )
        return report

    def _failed(self, order: int, t0: float, e: BaseException) -> OrderReport:
        logger.warning("Order %d FAILED, aborting batch: %s", order, e)
        return OrderReport(
            order=order,
            status="error",
            elapsed_ms=round((time.perf_counter() - t0) * 1000, 1),
            error=str(e) or type(e).__name__,
        )

    def run_streaming(self) -> Generator[OrderReport, None, None]:
        """Yield a report after each order is written.

        A failed build or write yields an error report and ends the stream; no file
        is left for the failing order and later orders are not attempted.
        """
        out_dir = Path(self.settings.output_dir)
        out_dir.mkdir(parents=True, exist_ok=True)

        for order in self.orders:
            t0 = time.perf_counter()
            try:
                curve = self.builder(order)
            except CurveError as e:
                yield self._failed(order, t0, e)
                return

            path = self.output_path(order)
            try:
                written = write_curve(
                    curve.points, path, self.settings.encoding, self.settings.chunk_points
                )
            except (OSError, MemoryError) as e:
                yield self._failed(order, t0, e)
                return
            points = len(curve)
            del curve

            elapsed_ms = round((time.perf_counter() - t0) * 1000, 1)
            logger.info("order %d pseudo-hilbert curve written", order)
            logger.debug("  %d points, %d bytes to %s in %.1fms", points, written, path, elapsed_ms)
            yield OrderReport(
                order=order,
                points=points,
                path=str(path),
                bytes_written=written,
                elapsed_ms=elapsed_ms,
            )


def create_runner(settings: Settings | None = None) -> BatchRunner:
    """Factory function for creating a batch runner."""
    return BatchRunner(settings=settings)
