# -*- coding: utf-8 -*-
"""
app/modules/catalog/repository.py

Repositorio de solo lectura para productos del catálogo.

Autor: Storefront Gateway
Fecha: 2026-10-19
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from .models import Product

logger = logging.getLogger(__name__)


class ProductRepository:
    """Consultas de productos contra el backing store."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def get(self, product_id: str) -> Optional[Product]:
        return await self._session.get(Product, product_id)

    async def get_many(self, product_ids: Iterable[str]) -> Dict[str, Product]:
        """
        Obtiene varios productos en una sola consulta.

        Args:
            product_ids: IDs a buscar (se ignoran duplicados)

        Returns:
            Dict id -> Product con los productos encontrados. Los IDs
            inexistentes simplemente no aparecen.
        """
        ids = sorted(set(product_ids))
        if not ids:
            return {}

        result = await self._session.execute(select(Product).where(Product.id.in_(ids)))
        products = {p.id: p for p in result.scalars().all()}

        logger.debug("Catalog lookup: requested=%d found=%d", len(ids), len(products))
        return products


__all__ = ["ProductRepository"]
