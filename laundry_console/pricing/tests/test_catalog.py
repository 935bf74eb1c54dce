from datetime import date
from decimal import Decimal

import pytest

from laundry_console.data.models import PromotionResponse, ServiceResponse
from laundry_console.pricing import PromotionCatalog, ServiceCatalog


@pytest.fixture
def service_catalog():
    return ServiceCatalog([
        ServiceResponse(service_id="wash", name="Wash & Fold", price=Decimal("30000")),
        ServiceResponse(service_id="dry", name="Dry Cleaning", price=Decimal("50000")),
    ])


def test_lookup_by_id(service_catalog):
    assert service_catalog.price_of("dry") == Decimal("50000")
    assert service_catalog["wash"].name == "Wash & Fold"
    assert "wash" in service_catalog
    assert "iron" not in service_catalog
    assert service_catalog.get("iron") is None
    assert service_catalog.get(None) is None


def test_iteration_keeps_source_order(service_catalog):
    assert [s.service_id for s in service_catalog] == ["wash", "dry"]
    assert len(service_catalog) == 2


def test_duplicate_ids_rejected():
    wash = ServiceResponse(service_id="wash", name="Wash", price=Decimal("1"))
    with pytest.raises(ValueError, match="Duplicate service id"):
        ServiceCatalog([wash, wash])


def test_unknown_price_raises_key_error(service_catalog):
    with pytest.raises(KeyError):
        service_catalog.price_of("iron")


def test_available_promotions():
    catalog = PromotionCatalog([
        PromotionResponse(promotion_id="always", name="Always", kind="Cash", value=Decimal("1000")),
        PromotionResponse(
            promotion_id="june", name="June", kind="Percentage", value=Decimal("5"),
            start_date=date(2026, 6, 1), end_date=date(2026, 6, 30),
        ),
        PromotionResponse(promotion_id="off", name="Disabled", kind="Cash", value=Decimal("1000"), status=False),
    ])
    assert [p.promotion_id for p in catalog.available(on=date(2026, 6, 15))] == ["always", "june"]
    assert [p.promotion_id for p in catalog.available(on=date(2026, 7, 1))] == ["always"]
    # Disabled promotions can still be looked up, as the order form allows
    assert catalog.get("off").name == "Disabled"
