# backend/tests/conftest.py
"""
Fixtures comunes.

La configuración exige DATABASE_URL y API_KEY, así que se fijan antes de
importar la aplicación. Cada test usa su propia base SQLite en disco.
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("API_KEY", "test-api-key")

from datetime import datetime, timedelta, timezone

import pytest
from httpx import ASGITransport, AsyncClient

from app.api.deps import get_gateway
from app.crud.gateway import DataGateway
from app.db.database import init_db, make_engine, make_session_factory
from app.main import app

API_KEY = os.environ["API_KEY"]
NOW = datetime(2025, 6, 15, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def now():
    return NOW


@pytest.fixture
async def engine(tmp_path):
    test_engine = make_engine(f"sqlite+aiosqlite:///{tmp_path / 'molant_test.db'}")
    await init_db(bind=test_engine)
    yield test_engine
    await test_engine.dispose()


@pytest.fixture
def gateway(engine):
    return DataGateway(make_session_factory(engine))


@pytest.fixture
async def client(gateway):
    app.dependency_overrides[get_gateway] = lambda: gateway
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test", headers={"X-API-Key": API_KEY}) as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
async def seeded(gateway):
    """
    Datos mínimos: dos clientes, un proveedor, artículos en las tres
    bandas de stock, un pedido reciente y otro antiguo, y un pago.
    """
    acme = await gateway.insert("clients", {"name": "Acme Ltd", "contact": "acme@example.com", "credit_limit": 5000, "credit_days": 30})
    beta = await gateway.insert("clients", {"name": "Beta Stores", "contact": "0700 000 000", "credit_limit": 1000, "credit_days": 15})
    vendor = await gateway.insert("vendors", {"name": "Tech Supplies", "contact": "sales@tech.example", "type": "item"})

    laptop = await gateway.insert("items", {"name": "Laptop", "vendor_id": vendor["id"], "buy_price": 500, "sell_price": 650, "stock_qty": 25})
    mouse = await gateway.insert("items", {"name": "Mouse", "vendor_id": vendor["id"], "buy_price": 5, "sell_price": 10, "stock_qty": 10})
    cable = await gateway.insert("items", {"name": "Cable", "buy_price": 0, "sell_price": 3, "stock_qty": 0})

    recent = await gateway.insert("orders", {
        "client_id": acme["id"], "type": "item", "total_amount": 1300, "status": "pending",
        "created_at": NOW - timedelta(days=2),
    })
    old = await gateway.insert("orders", {
        "client_id": beta["id"], "type": "service", "total_amount": 200, "status": "completed",
        "created_at": NOW - timedelta(days=40),
    })
    payment = await gateway.insert("payments", {
        "client_id": acme["id"], "order_id": recent["id"], "amount_paid": 300, "balance": 1000,
        "payment_date": NOW - timedelta(days=1),
    })
    return {
        "acme": acme, "beta": beta, "vendor": vendor,
        "laptop": laptop, "mouse": mouse, "cable": cable,
        "recent_order": recent, "old_order": old, "payment": payment,
    }
