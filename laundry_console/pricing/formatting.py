from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from laundry_console.config import get_config

# code -> (symbol, decimal places, thousands separator, decimal separator)
CURRENCY_FORMATS = {
    "VND": ("₫", 0, ".", ","),
}


def format_currency(amount: Decimal | int | float, currency: Optional[str] = None) -> str:
    """Render an amount for display, e.g. ``100.000 ₫`` for VND.

    Currencies without a known format fall back to ``1,234.50 USD``.
    """
    currency = (currency or get_config().currency_code).upper()
    symbol, places, thousands, decimal_sep = CURRENCY_FORMATS.get(currency, (currency, 2, ",", "."))

    rounded = Decimal(str(amount)).quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)
    text = f"{abs(rounded):,.{places}f}"
    text = text.replace(",", "\0").replace(".", decimal_sep).replace("\0", thousands)
    sign = "-" if rounded < 0 else ""
    return f"{sign}{text} {symbol}"
