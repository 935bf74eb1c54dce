from __future__ import annotations

from datetime import date
from decimal import Decimal
from types import MappingProxyType
from typing import Callable, Generic, Iterable, Iterator, List, Mapping, Optional, TypeVar

from laundry_console.data.models import GoodsResponse, PromotionResponse, ServiceResponse

T = TypeVar("T")


class _Catalog(Generic[T]):
    """Read-only lookup table of catalog entries keyed by ID.

    Iteration yields entries in the order they were supplied.
    """

    entity: str = "entry"

    def __init__(self, entries: Iterable[T], key: Callable[[T], str]) -> None:
        index = {}
        for entry in entries:
            entry_id = key(entry)
            if entry_id in index:
                raise ValueError(f"Duplicate {self.entity} id in catalog: {entry_id}")
            index[entry_id] = entry
        self._index: Mapping[str, T] = MappingProxyType(index)

    def get(self, entry_id: Optional[str]) -> Optional[T]:
        if entry_id is None:
            return None
        return self._index.get(entry_id)

    def __getitem__(self, entry_id: str) -> T:
        return self._index[entry_id]

    def __contains__(self, entry_id: object) -> bool:
        return entry_id in self._index

    def __iter__(self) -> Iterator[T]:
        return iter(self._index.values())

    def __len__(self) -> int:
        return len(self._index)


class ServiceCatalog(_Catalog[ServiceResponse]):
    entity = "service"

    def __init__(self, services: Iterable[ServiceResponse]) -> None:
        super().__init__(services, key=lambda s: s.service_id)

    def price_of(self, service_id: str) -> Decimal:
        return self[service_id].price


class GoodsCatalog(_Catalog[GoodsResponse]):
    entity = "goods"

    def __init__(self, goods: Iterable[GoodsResponse]) -> None:
        super().__init__(goods, key=lambda g: g.goods_id)


class PromotionCatalog(_Catalog[PromotionResponse]):
    entity = "promotion"

    def __init__(self, promotions: Iterable[PromotionResponse]) -> None:
        super().__init__(promotions, key=lambda p: p.promotion_id)

    def available(self, on: Optional[date] = None) -> List[PromotionResponse]:
        """Promotions that are enabled and running on `on` (default: today)."""
        on = on or date.today()
        return [p for p in self if p.is_available(on)]
