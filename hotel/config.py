"""Runtime settings pulled from environment variables (and an optional ``.env`` file)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import find_dotenv, load_dotenv

from .store import DEFAULT_STORE_PATH

TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    store_path: Path = DEFAULT_STORE_PATH
    catalog_url: Optional[str] = None
    catalog_timeout: float = 10.0
    standalone: bool = False

    @classmethod
    def from_env(cls, *, load: bool = True) -> "Settings":
        """Construct settings from ``HOTEL_*`` environment variables."""
        if load:
            load_dotenv(find_dotenv(usecwd=True))

        timeout_raw = os.getenv("HOTEL_CATALOG_TIMEOUT")
        try:
            timeout = float(timeout_raw) if timeout_raw else cls.catalog_timeout
        except ValueError as exc:
            raise ValueError(f"HOTEL_CATALOG_TIMEOUT must be a number, got {timeout_raw!r}.") from exc
        if timeout <= 0:
            raise ValueError("HOTEL_CATALOG_TIMEOUT must be positive.")

        return cls(
            store_path=Path(os.getenv("HOTEL_STORE_PATH") or DEFAULT_STORE_PATH),
            catalog_url=os.getenv("HOTEL_CATALOG_URL") or None,
            catalog_timeout=timeout,
            standalone=(os.getenv("HOTEL_STANDALONE") or "").strip().lower() in TRUTHY,
        )


__all__ = ["Settings"]
