from __future__ import annotations

from typing import Literal

from laundry_console.config import get_config

from .backends.csv_backend import CsvCatalogAccess
from .interface import CatalogAccess


def get_catalog_access(kind: Literal["csv"] = "csv") -> CatalogAccess:
    if kind == "csv":
        # Reads from configured CSV folder
        config = get_config()
        return CsvCatalogAccess(data_dir=config.data_dir)
    raise ValueError(f"Unknown catalog access kind: {kind}")
