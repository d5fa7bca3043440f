# -*- coding: utf-8 -*-
"""
app/modules/catalog/__init__.py

Catálogo de productos (solo lectura) usado para enriquecer el checkout.
"""

from .errors import CatalogUnavailable, ProductNotFound
from .models import Product
from .repository import ProductRepository

__all__ = ["Product", "ProductRepository", "ProductNotFound", "CatalogUnavailable"]
