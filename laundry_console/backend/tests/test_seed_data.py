from datetime import date

import pytest

from laundry_console.backend.seed_data import main
from laundry_console.config import set_config_for_test
from laundry_console.data.backends.csv_backend import CsvCatalogAccess
from laundry_console.data.models import PromotionFilters
from laundry_console.pricing import OrderPricingEngine


@pytest.fixture(autouse=True)
def quiet_config():
    set_config_for_test(log_level="WARNING")
    yield
    set_config_for_test()


def test_generated_catalog_loads(tmp_path):
    assert main(["--output-dir", str(tmp_path), "--seed", "7", "--today", "2026-05-01"]) == 0

    ca = CsvCatalogAccess(tmp_path)
    services = ca.list_services()
    promotions = ca.list_promotions()
    assert len(services) == 8
    assert len(ca.list_stores()) == 5
    assert len(ca.list_customers()) == 50
    assert len(ca.list_staff()) == 15
    assert {p.kind for p in promotions} == {"Percentage", "Cash"}

    available = ca.list_promotions(PromotionFilters(on_date=date(2026, 5, 1)))
    assert "Tet Holiday 25%" not in [p.name for p in available]

    engine = OrderPricingEngine(services, ca.list_goods(), promotions)
    engine.select_service(services[0].service_id)
    engine.commit_pending_line_item()
    assert engine.total_amount == services[0].price


def test_same_seed_same_catalog(tmp_path):
    a, b = tmp_path / "a", tmp_path / "b"
    main(["--output-dir", str(a), "--seed", "3", "--today", "2026-05-01"])
    main(["--output-dir", str(b), "--seed", "3", "--today", "2026-05-01"])
    for name in ["goods.csv", "promotions.csv", "customers.csv", "staff.csv"]:
        assert (a / name).read_text() == (b / name).read_text()


def test_no_overwrite(tmp_path):
    main(["--output-dir", str(tmp_path)])
    assert main(["--output-dir", str(tmp_path), "--no-overwrite"]) == 2
