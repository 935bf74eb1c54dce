#!/usr/bin/env python3
"""
seed_data.py

Generates a fake laundry-shop catalog to CSVs under a local folder (default: sample_data).

Entities:
- services, goods, promotions, stores, customers, staff

Run:
  python -m laundry_console.backend.seed_data --seed 42
"""

from __future__ import annotations
import argparse
import csv
import os
import random
import sys
from datetime import date, timedelta
from typing import Dict, List, Optional

from laundry_console.config import get_config
from laundry_console.logging import get_logger

# -----------------------------
# Catalog vocabulary
# -----------------------------

SERVICES = [
    # name, price (VND), description
    ("Wash & Fold", 30_000, "Machine wash, tumble dry and fold, per kg"),
    ("Dry Cleaning", 50_000, "Solvent cleaning for delicate garments"),
    ("Ironing", 15_000, "Steam press, per item"),
    ("Duvet Cleaning", 120_000, "Deep clean for duvets and comforters"),
    ("Shoe Cleaning", 80_000, "Hand wash and deodorize, per pair"),
    ("Stain Removal", 40_000, "Targeted pre-treatment, per item"),
    ("Express Wash", 45_000, "Same-day wash and fold, per kg"),
    ("Curtain Cleaning", 90_000, "Wash and press, per panel"),
]

GOODS_BY_CATEGORY = {
    "Detergent": [("Liquid Detergent", "bottle", 65_000), ("Detergent Powder", "bag", 55_000)],
    "Softener": [("Fabric Softener", "bottle", 48_000)],
    "Packaging": [("Garment Bag", "piece", 5_000), ("Hanger", "piece", 3_000)],
    "Care": [("Stain Remover Spray", "bottle", 72_000), ("Leather Conditioner", "jar", 95_000)],
}

STORE_NAMES = ["Central", "Riverside", "Old Quarter", "Airport", "University"]

FIRST_NAMES = ["An", "Binh", "Chi", "Dung", "Hoa", "Khanh", "Lan", "Minh", "Nam", "Phuong", "Quang", "Thao", "Trang", "Tuan", "Vy"]
LAST_NAMES = ["Nguyen", "Tran", "Le", "Pham", "Hoang", "Vu", "Dang", "Bui", "Do", "Ngo"]

CUSTOMER_TYPES = ["Regular", "Silver", "Gold"]


# -----------------------------
# Utility functions
# -----------------------------

def ensure_dir(path: str) -> None:
    if not os.path.exists(path):
        os.makedirs(path, exist_ok=True)

def rand_name() -> str:
    return f"{random.choice(LAST_NAMES)} {random.choice(FIRST_NAMES)}"

def rand_phone() -> str:
    return "09" + "".join(random.choices("0123456789", k=8))


# -----------------------------
# Core generators
# -----------------------------

def gen_services() -> List[Dict]:
    return [
        {"service_id": f"SV{i:03d}", "name": name, "price": price, "description": desc}
        for i, (name, price, desc) in enumerate(SERVICES, start=1)
    ]

def gen_stores() -> List[Dict]:
    stores = []
    for i, name in enumerate(STORE_NAMES, start=1):
        stores.append({
            "store_id": f"ST{i:03d}",
            "name": f"{name} Laundry",
            "phone_number": rand_phone(),
            "address": f"{random.randint(1, 300)} {name} Street",
            "status": True,
        })
    return stores

def gen_goods(stores: List[Dict]) -> List[Dict]:
    goods = []
    goods_id = 1
    for category, items in GOODS_BY_CATEGORY.items():
        for name, unit, price in items:
            goods.append({
                "goods_id": f"GD{goods_id:03d}",
                "name": name,
                "category": category,
                "quantity": random.randint(0, 200),
                "price": price,
                "unit": unit,
                "status": random.random() > 0.1,
                "store_id": random.choice(stores)["store_id"],
            })
            goods_id += 1
    return goods

def gen_promotions(today: date) -> List[Dict]:
    promos = [
        ("Weekday 10%", "Percentage", 10),
        ("Student 15%", "Percentage", 15),
        ("Grand Opening 20%", "Percentage", 20),
        ("Welcome 20K", "Cash", 20_000),
        ("Loyalty 50K", "Cash", 50_000),
    ]
    rows = []
    for i, (name, kind, value) in enumerate(promos, start=1):
        start = today - timedelta(days=random.randint(0, 30))
        end = today + timedelta(days=random.randint(7, 60))
        rows.append({
            "promotion_id": f"PR{i:03d}",
            "name": name,
            "description": f"{name} off the order total",
            "kind": kind,
            "value": value,
            "start_date": start.isoformat(),
            "end_date": end.isoformat(),
            "status": True,
        })
    # One expired promotion so the drop-down has something to hide
    rows.append({
        "promotion_id": f"PR{len(promos) + 1:03d}",
        "name": "Tet Holiday 25%",
        "description": "Expired seasonal promotion",
        "kind": "Percentage",
        "value": 25,
        "start_date": (today - timedelta(days=120)).isoformat(),
        "end_date": (today - timedelta(days=90)).isoformat(),
        "status": True,
    })
    return rows

def gen_customers(n: int) -> List[Dict]:
    customers = []
    for i in range(1, n + 1):
        customers.append({
            "customer_id": f"CU{i:04d}",
            "name": rand_name(),
            "phone_number": rand_phone(),
            "email": f"customer{i}@example.com",
            "address": f"{random.randint(1, 500)} Le Loi Street",
            "customer_type": random.choice(CUSTOMER_TYPES),
        })
    return customers

def gen_staff(stores: List[Dict], per_store: int) -> List[Dict]:
    staff = []
    staff_id = 1
    for store in stores:
        for j in range(per_store):
            staff.append({
                "staff_id": f"SF{staff_id:03d}",
                "store_id": store["store_id"],
                "name": rand_name(),
                "phone_number": rand_phone(),
                "role": "ADMIN" if j == 0 else "STAFF",
                "status": True,
            })
            staff_id += 1
    return staff

def write_csv(path: str, rows: List[Dict], headers: List[str]) -> None:
    with open(path, "w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=headers)
        w.writeheader()
        for r in rows:
            w.writerow(r)


# -----------------------------
# Main
# -----------------------------

def main(argv: Optional[List[str]] = None) -> int:
    config = get_config()
    logger = get_logger(__name__)

    parser = argparse.ArgumentParser(description="Generate a fake laundry catalog to CSVs.")
    parser.add_argument("--output-dir", type=str, default=config.data_dir)
    parser.add_argument("--customers", type=int, default=50, help="Number of customers to generate.")
    parser.add_argument("--staff-per-store", type=int, default=3)
    parser.add_argument("--today", type=str, default=None, help="YYYY-MM-DD anchor for promotion windows (defaults to today)")
    parser.add_argument("--seed", type=int, default=config.default_seed_value)
    parser.add_argument("--no-overwrite", action="store_true", help="Fail if CSVs already exist.")
    args = parser.parse_args(argv)

    random.seed(args.seed)

    outdir = args.output_dir
    ensure_dir(outdir)

    files = {
        "services": os.path.join(outdir, "services.csv"),
        "goods": os.path.join(outdir, "goods.csv"),
        "promotions": os.path.join(outdir, "promotions.csv"),
        "stores": os.path.join(outdir, "stores.csv"),
        "customers": os.path.join(outdir, "customers.csv"),
        "staff": os.path.join(outdir, "staff.csv"),
    }
    if args.no_overwrite:
        for p in files.values():
            if os.path.exists(p):
                print(f"Refusing to overwrite existing file: {p}", file=sys.stderr)
                return 2

    today = date.fromisoformat(args.today) if args.today else date.today()

    services = gen_services()
    stores = gen_stores()
    goods = gen_goods(stores)
    promotions = gen_promotions(today)
    customers = gen_customers(args.customers)
    staff = gen_staff(stores, args.staff_per_store)

    write_csv(files["services"], services,
              ["service_id", "name", "price", "description"])
    write_csv(files["goods"], goods,
              ["goods_id", "name", "category", "quantity", "price", "unit", "status", "store_id"])
    write_csv(files["promotions"], promotions,
              ["promotion_id", "name", "description", "kind", "value", "start_date", "end_date", "status"])
    write_csv(files["stores"], stores,
              ["store_id", "name", "phone_number", "address", "status"])
    write_csv(files["customers"], customers,
              ["customer_id", "name", "phone_number", "email", "address", "customer_type"])
    write_csv(files["staff"], staff,
              ["staff_id", "store_id", "name", "phone_number", "role", "status"])

    logger.info(f"Generated catalog in {outdir}")
    logger.info(f" services: {len(services)} | goods: {len(goods)} | promotions: {len(promotions)}")
    logger.info(f" stores: {len(stores)} | customers: {len(customers)} | staff: {len(staff)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
