# -*- coding: utf-8 -*-
"""
app/modules/catalog/errors.py

Excepciones de dominio para el catálogo.
"""


class ProductNotFound(Exception):
    """Se lanza cuando uno o más productos no existen en el catálogo."""
    def __init__(self, product_ids):
        self.product_ids = sorted(product_ids)
        super().__init__(f"Product not found: {', '.join(self.product_ids)}")


class CatalogUnavailable(Exception):
    """Se lanza cuando se requiere el catálogo pero no hay base de datos configurada."""
    def __init__(self, message: str = "Catalog not configured"):
        super().__init__(message)


__all__ = ["ProductNotFound", "CatalogUnavailable"]
