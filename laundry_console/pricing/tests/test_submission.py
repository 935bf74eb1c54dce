from datetime import datetime
from decimal import Decimal

import pytest

from laundry_console.config import set_config_for_test
from laundry_console.data.models import PromotionResponse, ServiceResponse
from laundry_console.pricing import (
    OrderHeader,
    OrderPricingEngine,
    OrderValidationError,
    ValidationErrorKind,
    build_create_request,
)


@pytest.fixture(autouse=True)
def quiet_config():
    set_config_for_test(log_level="WARNING")
    yield
    set_config_for_test()


@pytest.fixture
def snapshot():
    engine = OrderPricingEngine(
        services=[
            ServiceResponse(service_id="dry", name="Dry Cleaning", price=Decimal("50000")),
            ServiceResponse(service_id="wash", name="Wash & Fold", price=Decimal("30000")),
        ],
        promotions=[PromotionResponse(promotion_id="pct10", name="10%", kind="Percentage", value=Decimal("10"))],
    )
    engine.select_service("dry")
    engine.set_pending_quantity(2)
    engine.set_pending_note("delicate")
    engine.commit_pending_line_item()
    engine.select_service("wash")
    engine.commit_pending_line_item()
    engine.select_promotion("pct10")
    return engine.finalize()


@pytest.fixture
def header():
    return OrderHeader(
        store_id="ST001",
        customer_id="CU0001",
        staff_id="SF001",
        received_date=datetime(2026, 3, 2, 9, 30),
        returned_date=datetime(2026, 3, 4),
        delivery_address="12 Le Loi Street",
    )


def test_payload_uses_api_field_names(snapshot, header):
    payload = build_create_request(snapshot, header).to_payload()

    assert payload["id_store"] == "ST001"
    assert payload["id_customer"] == "CU0001"
    assert payload["id_staff"] == "SF001"
    assert payload["receivedDate"] == "2026-03-02T09:30:00"
    assert payload["returnedDate"] == "2026-03-04T00:00:00"
    assert payload["deliveryAddress"] == "12 Le Loi Street"
    assert "pickupAddress" not in payload
    assert payload["totalAmount"] == 130000
    assert payload["discountAmount"] == 13000
    assert payload["amountPaid"] == 117000
    assert payload["status"] == "Pending"
    assert payload["promotionId"] == "pct10"
    assert payload["orderDetails"] == [
        {"id_service": "dry", "quantity": 2, "price": 50000.0, "subTotal": 100000.0, "note": "delicate"},
        {"id_service": "wash", "quantity": 1, "price": 30000.0, "subTotal": 30000.0},
    ]


def test_request_keeps_exact_amounts(snapshot, header):
    request = build_create_request(snapshot, header)
    assert request.total_amount == Decimal("130000")
    assert request.order_details[0].sub_total == Decimal("100000")


def test_default_status_comes_from_config(snapshot):
    set_config_for_test(log_level="WARNING", default_order_status="Processing")
    header = OrderHeader(store_id="ST001", customer_id="CU0001", staff_id="SF001")
    assert build_create_request(snapshot, header).status == "Processing"


@pytest.mark.parametrize(
    "missing, kind",
    [
        ("store_id", ValidationErrorKind.STORE_REQUIRED),
        ("customer_id", ValidationErrorKind.CUSTOMER_REQUIRED),
        ("staff_id", ValidationErrorKind.STAFF_REQUIRED),
    ],
)
def test_header_requires_store_customer_and_staff(snapshot, missing, kind):
    fields = {"store_id": "ST001", "customer_id": "CU0001", "staff_id": "SF001", missing: "  "}
    with pytest.raises(OrderValidationError) as exc:
        build_create_request(snapshot, OrderHeader(**fields))
    assert exc.value.kind == kind


def test_return_date_cannot_precede_received_date(snapshot):
    header = OrderHeader(
        store_id="ST001", customer_id="CU0001", staff_id="SF001",
        received_date=datetime(2026, 3, 2), returned_date=datetime(2026, 3, 1),
    )
    with pytest.raises(OrderValidationError) as exc:
        build_create_request(snapshot, header)
    assert exc.value.kind == ValidationErrorKind.INVALID_RETURN_DATE


def test_unknown_status_rejected():
    with pytest.raises(Exception):
        OrderHeader(store_id="ST001", customer_id="CU0001", staff_id="SF001", status="Lost")
