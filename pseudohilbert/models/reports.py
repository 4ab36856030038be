"""Batch run report models."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class OrderReport(BaseModel):
    order: int
    status: Literal["ok", "error"] = "ok"
    points: int = 0
    path: str = ""
    bytes_written: int = 0
    elapsed_ms: float = 0.0
    error: str = ""


class BatchReport(BaseModel):
    orders: list[OrderReport] = Field(default_factory=list)
    aborted: bool = False

    @property
    def completed(self) -> list[int]:
        return [r.order for r in self.orders if r.status == "ok"]

    @property
    def failed(self) -> OrderReport | None:
        for r in self.orders:
            if r.status == "error":
                return r
        return None
