# -*- coding: utf-8 -*-
"""
app/modules/catalog/models.py

Modelo ORM (solo lectura) para la tabla product del backing store.

El esquema pertenece al backing store; el gateway nunca escribe en él.

Autor: Storefront Gateway
Fecha: 2026-10-19
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional

from sqlalchemy import DateTime, Integer, Numeric, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from app.shared.database.base import Base


class Product(Base):
    """Producto del catálogo del storefront."""

    __tablename__ = "product"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    price: Mapped[Decimal] = mapped_column(
        Numeric(12, 2),
        nullable=False,
        doc="Precio en unidades mayores de la moneda (p. ej. 20.00 USD).",
    )
    sku: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)
    status: Mapped[str] = mapped_column(String(32), nullable=False)
    stock: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    stripe_id: Mapped[Optional[str]] = mapped_column(
        String(255),
        nullable=True,
        doc="ID del producto en Stripe (prod_...), si existe.",
    )
    category_id: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)
    image_url: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )

    def __repr__(self) -> str:
        return f"<Product id={self.id!r} name={self.name!r} price={self.price}>"


__all__ = ["Product"]
