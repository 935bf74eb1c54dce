from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Type, TypeVar

import pandas as pd
from pydantic import BaseModel

from laundry_console.config import get_config
from laundry_console.logging import get_logger

from ..interface import CatalogAccess
from ..models import (
    GoodsFilters, PromotionFilters, ServiceResponse, GoodsResponse, PromotionResponse,
    StoreResponse, CustomerResponse, StaffResponse, StringList,
)

M = TypeVar("M", bound=BaseModel)

REQUIRED_FILES = ["services.csv", "goods.csv", "promotions.csv"]
OPTIONAL_FILES = ["stores.csv", "customers.csv", "staff.csv"]
BOOL_COLUMNS = ["status"]


@dataclass
class _Tables:
    services: pd.DataFrame
    goods: pd.DataFrame
    promotions: pd.DataFrame
    stores: pd.DataFrame
    customers: pd.DataFrame
    staff: pd.DataFrame


class CsvCatalogAccess(CatalogAccess):
    """
    CSV-backed catalog implementation.
    - Loads CSVs from `data_dir` once at construction.
    - Every call filters the loaded frames and returns fresh response models,
      so callers may hold on to the results as a session snapshot.
    """

    def __init__(self, data_dir: str | Path = None) -> None:
        self.logger = get_logger(__name__)
        if data_dir is None:
            config = get_config()
            data_dir = config.data_dir

        self.data_dir = Path(data_dir)

        # If the path is relative, make it relative to the repository root
        if not self.data_dir.is_absolute():
            current = Path.cwd()
            repo_root = None

            # Look up the directory tree for pyproject.toml
            for parent in [current] + list(current.parents):
                if (parent / "pyproject.toml").exists():
                    repo_root = parent
                    break

            if repo_root:
                self.data_dir = repo_root / self.data_dir
            else:
                self.data_dir = current / self.data_dir

        self._tables = self._load_tables(self.data_dir)
        self.logger.info(
            f"Loaded catalog from {self.data_dir}: "
            f"{len(self._tables.services)} services, {len(self._tables.goods)} goods, "
            f"{len(self._tables.promotions)} promotions"
        )

    # ---------- loading helpers ----------

    @staticmethod
    def _load_tables(data_dir: Path) -> _Tables:
        if not data_dir.exists():
            raise FileNotFoundError(
                f"Data directory not found: {data_dir}\n"
                f"Please either:\n"
                f"  1. Generate a sample catalog: python -m laundry_console.backend.seed_data\n"
                f"  2. Set DATA_DIR environment variable to point to your data directory\n"
                f"  3. Create a .env file with DATA_DIR=/path/to/your/data"
            )

        missing_files = [f for f in REQUIRED_FILES if not (data_dir / f).exists()]
        if missing_files:
            raise FileNotFoundError(
                f"Required CSV files missing in {data_dir}:\n"
                f"  Missing: {', '.join(missing_files)}\n"
                f"  Expected files: {', '.join(REQUIRED_FILES)}\n\n"
                f"Please either:\n"
                f"  1. Generate a sample catalog: python -m laundry_console.backend.seed_data\n"
                f"  2. Ensure your data directory contains all required CSV files"
            )

        frames: Dict[str, pd.DataFrame] = {}
        try:
            for name in REQUIRED_FILES + OPTIONAL_FILES:
                path = data_dir / name
                key = name.removesuffix(".csv")
                frames[key] = CsvCatalogAccess._read_csv(path) if path.exists() else pd.DataFrame()
        except Exception as e:
            raise RuntimeError(
                f"Error reading CSV files from {data_dir}: {e}\n"
                f"Please check that the CSV files are valid and readable."
            ) from e

        return _Tables(**frames)

    @staticmethod
    def _read_csv(path: Path) -> pd.DataFrame:
        # Read everything as text so prices parse into exact decimals
        df = pd.read_csv(path, dtype=str)
        for col in BOOL_COLUMNS:
            if col in df.columns:
                df[col] = df[col].fillna("true").str.strip().str.lower().isin(["true", "1", "yes"])
        return df

    @staticmethod
    def _to_models(df: pd.DataFrame, model: Type[M]) -> List[M]:
        if df.empty:
            return []
        records = df.astype(object).where(pd.notna(df), None).to_dict(orient="records")
        # Blank cells fall back to the model defaults
        return [model.model_validate({k: v for k, v in r.items() if v is not None}) for r in records]

    # ---------- interface implementation ----------

    def list_services(self) -> List[ServiceResponse]:
        return self._to_models(self._tables.services, ServiceResponse)

    def list_goods(self, filters: Optional[GoodsFilters] = None) -> List[GoodsResponse]:
        df = self._tables.goods
        if filters is None or df.empty:
            return self._to_models(df, GoodsResponse)

        if filters.category:
            if isinstance(filters.category, str):
                df = df[df["category"] == filters.category]
            else:
                df = df[df["category"].isin(filters.category)]
        if filters.store_id:
            df = df[df["store_id"] == filters.store_id]
        if filters.active_only and "status" in df.columns:
            df = df[df["status"]]

        return self._to_models(df, GoodsResponse)

    def list_promotions(self, filters: Optional[PromotionFilters] = None) -> List[PromotionResponse]:
        df = self._tables.promotions
        if filters is None or df.empty:
            return self._to_models(df, PromotionResponse)

        if filters.kind:
            df = df[df["kind"] == filters.kind]
        if filters.active_only and "status" in df.columns:
            df = df[df["status"]]

        promotions = self._to_models(df, PromotionResponse)
        if filters.on_date:
            promotions = [p for p in promotions if p.is_available(filters.on_date)]
        return promotions

    def list_stores(self) -> List[StoreResponse]:
        return self._to_models(self._tables.stores, StoreResponse)

    def list_customers(self) -> List[CustomerResponse]:
        return self._to_models(self._tables.customers, CustomerResponse)

    def list_staff(self, store_id: Optional[str] = None) -> List[StaffResponse]:
        df = self._tables.staff
        if store_id and not df.empty:
            df = df[df["store_id"] == store_id]
        return self._to_models(df, StaffResponse)

    def list_goods_categories(self) -> StringList:
        if self._tables.goods.empty:
            return StringList(values=[])
        categories = self._tables.goods["category"].dropna().unique().tolist()
        return StringList(values=sorted(categories))
