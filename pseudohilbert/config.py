"""Application configuration from environment variables."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    log_level: str = "info"

    # Batch range, inclusive
    min_order: int = 1
    max_order: int = 15

    # Output
    output_dir: Path = Path(".")
    encoding: Literal["binary", "text"] = "binary"
    file_name_template: str = "o{order:02d}_hilbert"
    chunk_points: int = 65536  # points per binary write

    # Refuse to build when the estimated peak exceeds this many bytes (None = no limit)
    memory_limit_bytes: int | None = None

    model_config = {
        "env_prefix": "PSEUDOHILBERT_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }


settings = Settings()
