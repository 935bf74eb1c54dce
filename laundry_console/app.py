from datetime import date, datetime, time

import pandas as pd
import streamlit as st

from laundry_console.config import get_config
from laundry_console.data.util import get_catalog_access
from laundry_console.pricing import (
    OrderHeader,
    OrderPricingEngine,
    OrderValidationError,
    build_create_request,
)
from laundry_console.pricing.formatting import format_currency

st.set_page_config(page_title="Laundry Orders — New Order", layout="wide")

config = get_config()
ORDER_STATUSES = ["Pending", "Processing", "Completed", "Delivered", "Cancelled"]

# -----------------------------------------------------------------------------
# Session state: catalogs are fetched once, one engine per browser session
# -----------------------------------------------------------------------------
if "catalog" not in st.session_state:
    ca = get_catalog_access()
    st.session_state.catalog = {
        "services": ca.list_services(),
        "goods": ca.list_goods(),
        "promotions": ca.list_promotions(),
        "stores": ca.list_stores(),
        "customers": ca.list_customers(),
        "staff": ca.list_staff(),
        "goods_categories": ca.list_goods_categories().values,
    }
catalog = st.session_state.catalog

if "engine" not in st.session_state:
    st.session_state.engine = OrderPricingEngine(
        services=catalog["services"],
        goods=catalog["goods"],
        promotions=catalog["promotions"],
    )
engine: OrderPricingEngine = st.session_state.engine
st.session_state.setdefault("line_error", "")
st.session_state.setdefault("form_error", "")


def _run(op, error_key: str = "line_error"):
    """Call an engine operation and keep its validation message for display."""
    try:
        op()
        st.session_state[error_key] = ""
    except OrderValidationError as e:
        st.session_state[error_key] = str(e)


services_by_id = {s.service_id: s for s in engine.services}
goods_by_id = {g.goods_id: g for g in engine.goods}

# -----------------------------------------------------------------------------
# Order information
# -----------------------------------------------------------------------------
st.title("Add New Laundry Order")

# The previous run saved an order and reset the engine before rerunning
saved_order = st.session_state.pop("saved_order", None)
if saved_order is not None:
    st.success("Laundry order is ready for submission")
    st.json(saved_order.to_payload())
    st.dataframe(
        pd.DataFrame([d.model_dump() for d in saved_order.order_details]),
        use_container_width=True,
    )

st.markdown("### Order Information")

c1, c2, c3 = st.columns(3)
store = c1.selectbox(
    "Store", [None] + catalog["stores"],
    format_func=lambda s: "Select a store" if s is None else s.name,
)
customer = c2.selectbox(
    "Customer", [None] + catalog["customers"],
    format_func=lambda c: "Select a customer" if c is None else f"{c.name} - {c.phone_number}",
)
staff_choices = [s for s in catalog["staff"] if store is None or s.store_id in (None, store.store_id)]
staff = c3.selectbox(
    "Staff", [None] + staff_choices,
    format_func=lambda s: "Select staff" if s is None else s.name,
)

c1, c2, c3 = st.columns(3)
status = c1.selectbox("Status", ORDER_STATUSES, index=ORDER_STATUSES.index(config.default_order_status))
received = c2.date_input("Received Date", value=date.today())
returned = c3.date_input("Expected Return Date", value=None)

available = [None] + engine.promotions.available()
promotion = st.selectbox(
    "Promotion", available, key="promotion",
    index=available.index(engine.selected_promotion) if engine.selected_promotion in available else 0,
    format_func=lambda p: "No promotion" if p is None else (
        f"{p.name} - {p.value}%" if p.kind == "Percentage" else f"{p.name} - {format_currency(p.value)}"
    ),
)
if (promotion.promotion_id if promotion else None) != engine.composition.selected_promotion_id:
    _run(lambda: engine.select_promotion(promotion.promotion_id if promotion else None), "form_error")

c1, c2 = st.columns(2)
pickup_address = c1.text_input("Pickup Address (optional)")
delivery_address = c2.text_input("Delivery Address (optional)")

# -----------------------------------------------------------------------------
# Pending line item
# -----------------------------------------------------------------------------
st.markdown("### Order Details")
pending = engine.pending

c1, c2, c3 = st.columns(3)
service_ids = [None] + list(services_by_id)
service_id = c1.selectbox(
    "Service", service_ids,
    index=service_ids.index(pending.service_id),
    format_func=lambda sid: "Select a service" if sid is None else (
        f"{services_by_id[sid].name} ({format_currency(services_by_id[sid].price)})"
    ),
)
if service_id != pending.service_id:
    _run(lambda: engine.select_service(service_id))

category = c2.selectbox(
    "Goods Category", [None] + catalog["goods_categories"],
    format_func=lambda c: "All categories" if c is None else c,
)
goods_ids = [None] + [gid for gid, g in goods_by_id.items() if category is None or g.category == category]
if pending.goods_id and pending.goods_id not in goods_ids:
    goods_ids.append(pending.goods_id)
goods_id = c3.selectbox(
    "Goods (optional)", goods_ids,
    index=goods_ids.index(pending.goods_id),
    format_func=lambda gid: "None" if gid is None else goods_by_id[gid].name,
)
if goods_id != pending.goods_id:
    _run(lambda: engine.select_pending_goods(goods_id))

c1, c2, c3 = st.columns(3)
quantity = c1.text_input("Quantity", value=str(engine.pending.quantity))
if quantity != str(engine.pending.quantity):
    _run(lambda: engine.set_pending_quantity(quantity))
price = c2.text_input("Price", value=str(engine.pending.unit_price))
if price != str(engine.pending.unit_price):
    _run(lambda: engine.set_pending_unit_price(price))
c3.metric("Subtotal", format_currency(engine.pending.subtotal))

note = st.text_area("Notes (optional)", value=engine.pending.note or "", height=68)
if (note or None) != engine.pending.note:
    engine.set_pending_note(note)

if st.session_state.line_error:
    st.error(st.session_state.line_error)

if st.button("Add Service", disabled=engine.pending.service_id is None or bool(st.session_state.line_error)):
    _run(engine.commit_pending_line_item)
    st.rerun()

# -----------------------------------------------------------------------------
# Added services table
# -----------------------------------------------------------------------------
for index, line in enumerate(engine.line_items):
    c1, c2, c3, c4, c5, c6 = st.columns([3, 2, 1, 2, 2, 1])
    service = services_by_id.get(line.service_id)
    goods = goods_by_id.get(line.goods_id) if line.goods_id else None
    c1.write(service.name if service else "Unknown")
    c2.write(goods.name if goods else ("Unknown" if line.goods_id else "N/A"))
    c3.write(line.quantity)
    c4.write(format_currency(line.unit_price))
    c5.write(format_currency(line.subtotal))
    if c6.button("Remove", key=f"remove-{index}"):
        engine.remove_line_item(index)
        st.rerun()

# -----------------------------------------------------------------------------
# Totals and submit
# -----------------------------------------------------------------------------
c1, c2, c3 = st.columns(3)
c1.metric("Total", format_currency(engine.total_amount))
c2.metric("Discount", format_currency(engine.discount_amount))
c3.metric("Amount Paid", format_currency(engine.amount_paid))

if st.session_state.form_error:
    st.error(st.session_state.form_error)

if st.button("Save Order", type="primary"):
    header = OrderHeader(
        store_id=store.store_id if store else None,
        customer_id=customer.customer_id if customer else None,
        staff_id=staff.staff_id if staff else None,
        received_date=datetime.combine(received, time()),
        returned_date=datetime.combine(returned, time()) if returned else None,
        pickup_address=pickup_address or None,
        delivery_address=delivery_address or None,
        status=status,
    )
    try:
        request = build_create_request(engine.finalize(), header)
    except OrderValidationError as e:
        st.session_state.form_error = str(e)
        st.rerun()
    else:
        st.session_state.form_error = ""
        st.session_state.saved_order = request
        engine.reset()
        st.session_state.pop("promotion", None)
        st.rerun()
