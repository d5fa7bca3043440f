# -*- coding: utf-8 -*-
import logging

import pytest

json_logger = pytest.importorskip(
    "pythonjsonlogger", reason="Se omite test JSON si no está instalado python-json-logger"
)


def _root_formatters():
    return [h.formatter for h in logging.getLogger().handlers if h.formatter is not None]


def test_setup_logging_plain():
    from app.shared.config.logging_config import setup_logging
    setup_logging(level="DEBUG", fmt="plain")
    logger = logging.getLogger("test_plain")
    # No debe fallar emitir logs
    logger.debug("hello plain")
    assert logging.getLogger().level == logging.DEBUG
    assert any(isinstance(h, logging.StreamHandler) for h in logging.getLogger().handlers)


def test_setup_logging_json():
    from app.shared.config.logging_config import setup_logging
    setup_logging(level="INFO", fmt="json")
    logging.getLogger("test_json").info("hello json")
    assert any(f.__class__.__module__.startswith("pythonjsonlogger") for f in _root_formatters()), (
        "Se esperaba JsonFormatter activo en modo json"
    )


def test_noisy_libraries_are_quieted():
    from app.shared.config.logging_config import setup_logging
    setup_logging(level="DEBUG", fmt="pretty")
    assert logging.getLogger("stripe").level == logging.WARNING
    assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING
# Fin del archivo tests/shared/config/test_logging_config.py
