"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from warehouse.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)

DEFAULT_DATA_DIR = Path("data")
DEFAULT_LOG_LEVEL = "WARNING"

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


@dataclass(frozen=True)
class Settings:
    """Runtime configuration, filled from CLI options / environment."""

    data_dir: Path = DEFAULT_DATA_DIR
    log_level: str = DEFAULT_LOG_LEVEL


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(level=settings.log_level.upper(), format=LOG_FORMAT)


def product_repository(settings: Settings) -> JsonProductRepository:
    return JsonProductRepository(settings.data_dir / "products.json")
