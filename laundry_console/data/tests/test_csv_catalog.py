from datetime import date
from decimal import Decimal
from textwrap import dedent

import pydantic
import pytest

from laundry_console.config import set_config_for_test
from laundry_console.data.backends.csv_backend import CsvCatalogAccess
from laundry_console.data.models import GoodsFilters, PromotionFilters
from laundry_console.data.util import get_catalog_access


@pytest.fixture(autouse=True)
def quiet_config():
    set_config_for_test(log_level="WARNING")
    yield
    set_config_for_test()


def write(path, text):
    path.write_text(dedent(text).lstrip(), encoding="utf-8")


@pytest.fixture
def data_dir(tmp_path):
    write(tmp_path / "services.csv", """
        service_id,name,price,description
        SV001,Wash & Fold,30000,per kg
        SV002,Dry Cleaning,50000.50,
    """)
    write(tmp_path / "goods.csv", """
        goods_id,name,category,quantity,price,unit,status,store_id
        GD001,Liquid Detergent,Detergent,12,65000,bottle,True,ST001
        GD002,Hanger,Packaging,300,3000,piece,False,ST002
        GD003,Garment Bag,Packaging,80,5000,piece,True,
    """)
    write(tmp_path / "promotions.csv", """
        promotion_id,name,description,kind,value,start_date,end_date,status
        PR001,Weekday 10%,,Percentage,10,2026-01-01,2026-12-31,True
        PR002,Welcome 20K,,Cash,20000,,,True
        PR003,Old Promo,,Percentage,25,2025-01-01,2025-02-01,True
        PR004,Paused,,Cash,5000,,,False
    """)
    write(tmp_path / "stores.csv", """
        store_id,name,phone_number,address,status
        ST001,Central Laundry,0900000001,1 Central Street,True
        ST002,Riverside Laundry,,,True
    """)
    write(tmp_path / "staff.csv", """
        staff_id,store_id,name,phone_number,role,status
        SF001,ST001,Nguyen An,0911111111,ADMIN,True
        SF002,ST002,Tran Binh,0922222222,STAFF,True
    """)
    return tmp_path


def test_services_load_with_exact_prices(data_dir):
    services = CsvCatalogAccess(data_dir).list_services()
    assert [s.service_id for s in services] == ["SV001", "SV002"]
    assert services[1].price == Decimal("50000.50")
    assert services[1].description == ""


def test_goods_filters(data_dir):
    ca = CsvCatalogAccess(data_dir)
    assert len(ca.list_goods()) == 3
    assert [g.goods_id for g in ca.list_goods(GoodsFilters(category="Packaging"))] == ["GD002", "GD003"]
    assert [g.goods_id for g in ca.list_goods(GoodsFilters(active_only=True))] == ["GD001", "GD003"]
    assert [g.goods_id for g in ca.list_goods(GoodsFilters(store_id="ST001"))] == ["GD001"]
    assert ca.list_goods()[2].store_id is None
    assert ca.list_goods_categories().values == ["Detergent", "Packaging"]


def test_promotion_filters(data_dir):
    ca = CsvCatalogAccess(data_dir)
    assert len(ca.list_promotions()) == 4
    assert [p.promotion_id for p in ca.list_promotions(PromotionFilters(kind="Cash"))] == ["PR002", "PR004"]
    assert [p.promotion_id for p in ca.list_promotions(PromotionFilters(active_only=True))] == ["PR001", "PR002", "PR003"]
    on_day = ca.list_promotions(PromotionFilters(on_date=date(2026, 5, 1)))
    assert [p.promotion_id for p in on_day] == ["PR001", "PR002"]


def test_optional_tables(data_dir):
    ca = CsvCatalogAccess(data_dir)
    assert [s.name for s in ca.list_stores()] == ["Central Laundry", "Riverside Laundry"]
    assert ca.list_stores()[1].phone_number is None
    assert ca.list_customers() == []
    assert [s.staff_id for s in ca.list_staff(store_id="ST002")] == ["SF002"]
    assert ca.list_staff()[0].role == "ADMIN"


def test_missing_directory(tmp_path):
    with pytest.raises(FileNotFoundError, match="Data directory not found"):
        CsvCatalogAccess(tmp_path / "nowhere")


def test_missing_required_file(data_dir):
    (data_dir / "promotions.csv").unlink()
    with pytest.raises(FileNotFoundError, match="promotions.csv"):
        CsvCatalogAccess(data_dir)


def test_unreadable_file_is_runtime_error(data_dir):
    (data_dir / "services.csv").write_bytes(b"")
    with pytest.raises(RuntimeError, match="Error reading CSV files"):
        CsvCatalogAccess(data_dir)


def test_invalid_promotion_value_rejected(data_dir):
    write(data_dir / "promotions.csv", """
        promotion_id,name,description,kind,value,start_date,end_date,status
        PR001,Too Much,,Percentage,150,,,True
    """)
    with pytest.raises(pydantic.ValidationError):
        CsvCatalogAccess(data_dir).list_promotions()


def test_factory_uses_configured_data_dir(data_dir):
    set_config_for_test(log_level="WARNING", data_dir=str(data_dir))
    assert len(get_catalog_access("csv").list_services()) == 2
    with pytest.raises(ValueError):
        get_catalog_access("sqlite")
