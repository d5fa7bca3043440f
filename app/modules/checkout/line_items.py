# -*- coding: utf-8 -*-
"""
app/modules/checkout/line_items.py

Construcción de line_items para Stripe Checkout a partir de los items del
storefront, enriquecidos con el catálogo cuando traen product_id.

Autor: Storefront Gateway
Fecha: 2026-10-19
"""

from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Dict, List, Optional, Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.catalog import CatalogUnavailable, Product, ProductNotFound, ProductRepository

from .schemas import CheckoutItem

logger = logging.getLogger(__name__)


def to_minor_units(amount: Decimal) -> int:
    """Convierte un precio en unidades mayores (20.00) a centavos (2000)."""
    return int((Decimal(amount) * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def _product_line_item(product: Product, quantity: int, currency: str) -> Dict[str, Any]:
    price_data: Dict[str, Any] = {
        "currency": currency,
        "unit_amount": to_minor_units(product.price),
    }
    # Si el producto ya existe en Stripe, se referencia; si no, se describe inline
    if product.stripe_id:
        price_data["product"] = product.stripe_id
    else:
        price_data["product_data"] = {"name": product.name}
    return {"price_data": price_data, "quantity": quantity}


def _adhoc_line_item(item: CheckoutItem, currency: str) -> Dict[str, Any]:
    return {
        "price_data": {
            "currency": currency,
            "product_data": {"name": item.name},
            "unit_amount": item.unit_amount,
        },
        "quantity": item.quantity,
    }


async def build_line_items(
    items: Sequence[CheckoutItem],
    session: Optional[AsyncSession],
    currency: str,
) -> List[Dict[str, Any]]:
    """
    Traduce los items del request a line_items de Stripe.

    Args:
        items: Items validados del request
        session: Sesión del catálogo, o None si no hay base de datos
        currency: Código de moneda en minúsculas (usd, mxn, ...)

    Returns:
        Lista de line_items en el mismo orden que los items recibidos.

    Raises:
        CatalogUnavailable: Si algún item trae product_id y no hay catálogo
        ProductNotFound: Si algún product_id no existe
    """
    currency = currency.lower()
    product_ids = [item.product_id for item in items if item.product_id]

    products: Dict[str, Product] = {}
    if product_ids:
        if session is None:
            raise CatalogUnavailable()
        products = await ProductRepository(session).get_many(product_ids)
        missing = set(product_ids) - set(products)
        if missing:
            raise ProductNotFound(missing)

    line_items: List[Dict[str, Any]] = []
    for item in items:
        if item.product_id:
            line_items.append(_product_line_item(products[item.product_id], item.quantity, currency))
        else:
            line_items.append(_adhoc_line_item(item, currency))

    logger.debug(
        "Line items built: total=%d from_catalog=%d",
        len(line_items), len(product_ids),
    )
    return line_items


__all__ = ["build_line_items", "to_minor_units"]
