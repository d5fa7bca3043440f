# tests/conftest.py
# -*- coding: utf-8 -*-
"""
Config global de tests del storefront gateway.

- Fuerza PYTHON_ENV=test antes de importar la app (settings de prueba)
- App por test construida con create_app(settings) y gateway de Stripe falso
- Cliente httpx con ASGITransport y ciclo de vida vía asgi-lifespan
- Catálogo en SQLite en memoria (aiosqlite) para rutas y repositorio
- Helpers para emitir JWT de prueba y firmar webhooks como Stripe
"""

import hashlib
import hmac
import os
import time
from collections.abc import AsyncIterator
from datetime import timedelta
from decimal import Decimal
from typing import Any, Dict, List, Optional, Tuple

import pytest
from asgi_lifespan import LifespanManager
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

# -----------------------------------------------------------------------------
# 0) Entorno mínimo ANTES de cualquier import de app.*
# -----------------------------------------------------------------------------
os.environ["PYTHON_ENV"] = "test"
for _k in ("DB_URL", "DATABASE_URL", "CORS_ORIGINS"):
    os.environ.pop(_k, None)

from app.modules.auth import create_access_token, issue_access_token  # noqa: E402
from app.modules.catalog import Product  # noqa: E402
from app.modules.checkout import get_stripe_gateway  # noqa: E402
from app.shared.config.settings_testing import EnvTestingSettings  # noqa: E402
from app.shared.database import Base, get_optional_session  # noqa: E402

WEBHOOK_SECRET = "whsec_test_suite_secret"


@pytest.fixture(scope="session")
def anyio_backend():
    """Permite a pytest-anyio usar asyncio."""
    return "asyncio"


# -----------------------------------------------------------------------------
# 1) Settings y app
# -----------------------------------------------------------------------------
@pytest.fixture
def settings() -> EnvTestingSettings:
    return EnvTestingSettings(
        stripe_webhook_secret=WEBHOOK_SECRET,
        client_url="http://shop.test",
        default_currency="usd",
    )


class FakeStripeGateway:
    """
    Sustituto del StripeGateway: registra llamadas y devuelve objetos planos.
    Si `error` está definido, cualquier operación lo lanza.
    """

    def __init__(self) -> None:
        self.calls: List[Tuple[str, Dict[str, Any]]] = []
        self.error: Optional[Exception] = None

    def _record(self, name: str, **kwargs: Any) -> None:
        self.calls.append((name, kwargs))
        if self.error is not None:
            raise self.error

    async def create_payment_intent(self, *, amount: int, currency: str):
        self._record("create_payment_intent", amount=amount, currency=currency)
        return {"id": "pi_test_1", "client_secret": "pi_test_1_secret_abc", "amount": amount}

    async def create_checkout_session(self, *, line_items, success_url: str, cancel_url: str):
        self._record(
            "create_checkout_session",
            line_items=line_items, success_url=success_url, cancel_url=cancel_url,
        )
        return {"id": "cs_test_1", "url": "https://checkout.stripe.test/c/cs_test_1"}

    async def retrieve_checkout_session(self, session_id: str):
        self._record("retrieve_checkout_session", session_id=session_id)
        return {"id": session_id, "object": "checkout.session", "status": "open"}

    async def list_checkout_line_items(self, session_id: str):
        self._record("list_checkout_line_items", session_id=session_id)
        return {
            "object": "list",
            "data": [{"id": "li_1", "quantity": 2, "amount_total": 4000}],
            "has_more": False,
        }

    async def expire_checkout_session(self, session_id: str):
        self._record("expire_checkout_session", session_id=session_id)
        return {"id": session_id, "object": "checkout.session", "status": "expired"}


@pytest.fixture
def fake_gateway() -> FakeStripeGateway:
    return FakeStripeGateway()


@pytest.fixture
def app(settings, fake_gateway):
    """App FastAPI por test con settings fijos y Stripe falso."""
    from app.main import create_app

    fastapi_app = create_app(settings)
    fastapi_app.dependency_overrides[get_stripe_gateway] = lambda: fake_gateway
    return fastapi_app


@pytest.fixture
async def async_client(app) -> AsyncIterator[AsyncClient]:
    """
    Cliente HTTP asíncrono contra la app con ASGITransport y gestión de
    startup/shutdown mediante asgi-lifespan.
    """
    async with LifespanManager(app):
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://testserver") as client:
            yield client


# -----------------------------------------------------------------------------
# 2) Credenciales Bearer
# -----------------------------------------------------------------------------
@pytest.fixture
def make_token(settings):
    """Fábrica de JWT firmados con el secreto y la vigencia de los settings de prueba."""

    def _make(
        subject: str = "user_123",
        secret: Optional[str] = None,
        expires_delta: Optional[timedelta] = None,
        **extra: Any,
    ) -> str:
        if secret is None:
            return issue_access_token(subject, settings, expires_delta=expires_delta, **extra)
        return create_access_token(
            subject,
            secret,
            algorithm=settings.jwt_algorithm,
            expires_delta=expires_delta,
            **extra,
        )

    return _make


@pytest.fixture
def auth_headers(make_token) -> Dict[str, str]:
    return {"Authorization": f"Bearer {make_token()}"}


# -----------------------------------------------------------------------------
# 3) Firma de webhooks (formato Stripe-Signature: t=<ts>,v1=<hmac>)
# -----------------------------------------------------------------------------
def sign_stripe_payload(payload: bytes, secret: str = WEBHOOK_SECRET, timestamp: Optional[int] = None) -> str:
    ts = int(time.time()) if timestamp is None else timestamp
    signed = f"{ts}.".encode("utf-8") + payload
    signature = hmac.new(secret.encode("utf-8"), signed, hashlib.sha256).hexdigest()
    return f"t={ts},v1={signature}"


@pytest.fixture
def stripe_signature():
    return sign_stripe_payload


# -----------------------------------------------------------------------------
# 4) Catálogo en SQLite en memoria
# -----------------------------------------------------------------------------
@pytest.fixture
async def catalog_sessionmaker() -> AsyncIterator[async_sessionmaker[AsyncSession]]:
    """
    Motor ASYNC SQLite en memoria con la tabla product sembrada.
    StaticPool mantiene una única conexión para que la BD sobreviva entre sesiones.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    factory = async_sessionmaker(bind=engine, expire_on_commit=False, class_=AsyncSession)
    async with factory() as session:
        session.add_all([
            Product(
                id="prod_mug", name="Coffee Mug", description="Ceramic mug",
                price=Decimal("12.50"), sku="MUG-01", status="active", stock=10,
                stripe_id="prod_StripeMug",
            ),
            Product(
                id="prod_tee", name="T-Shirt", description="Cotton tee",
                price=Decimal("20.00"), sku="TEE-01", status="active", stock=5,
            ),
        ])
        await session.commit()

    try:
        yield factory
    finally:
        await engine.dispose()


@pytest.fixture
def with_catalog(app, catalog_sessionmaker):
    """Conecta las rutas de la app al catálogo SQLite."""

    async def _session():
        async with catalog_sessionmaker() as session:
            yield session

    app.dependency_overrides[get_optional_session] = _session
    return catalog_sessionmaker
