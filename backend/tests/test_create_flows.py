# backend/tests/test_create_flows.py
"""
Altas con lógica propia: numeración de documentos, pedidos con líneas y
pagos con saldo.
"""

import pytest
from pydantic import ValidationError

from app.core.exceptions import RecordNotFound
from app.crud import document_crud, order_crud, payment_crud
from app.schemas.document_schema import DocumentCreate, DocumentType
from app.schemas.order_schema import OrderCreate, OrderDetailCreate
from app.schemas.payment_schema import PaymentCreate


def test_format_document_number():
    assert document_crud.format_document_number("PF", 7, 2025) == "PF/2025/0007"


def test_next_sequence_ignores_other_years_and_prefixes():
    existing = ["PF/2025/0003", "PF/2024/0009", "DN/2025/0010", "PF/2025/0001", "legacy-42", None]
    assert document_crud.next_sequence(existing, "PF", 2025) == 4
    assert document_crud.next_sequence([], "RC", 2025) == 1


async def test_create_document_numbers_per_type(gateway, seeded, now):
    base = {"order_id": seeded["recent_order"]["id"], "client_id": seeded["acme"]["id"]}

    first = await document_crud.create_document(gateway, DocumentCreate(type=DocumentType.PROFORMA, **base), now=now)
    second = await document_crud.create_document(gateway, DocumentCreate(type=DocumentType.PROFORMA, **base), now=now)
    receipt = await document_crud.create_document(gateway, DocumentCreate(type=DocumentType.RECEIPT, **base), now=now)

    assert first["document_number"] == "PF/2025/0001"
    assert second["document_number"] == "PF/2025/0002"
    assert receipt["document_number"] == "RC/2025/0001"
    assert first["status"] == "pending"


async def test_create_document_keeps_given_number(gateway, seeded, now):
    doc = DocumentCreate(
        type=DocumentType.JOB_CARD,
        order_id=seeded["recent_order"]["id"],
        client_id=seeded["acme"]["id"],
        document_number="JC/2025/0100",
    )
    created = await document_crud.create_document(gateway, doc, now=now)
    assert created["document_number"] == "JC/2025/0100"
    assert await document_crud.get_next_document_number(gateway, DocumentType.JOB_CARD, now) == "JC/2025/0101"


def test_order_line_must_reference_item_or_service():
    with pytest.raises(ValidationError):
        OrderDetailCreate(quantity=1, unit_price=10)
    with pytest.raises(ValidationError):
        OrderDetailCreate(item_id="a", service_id="b", quantity=1, unit_price=10)


async def test_create_order_computes_subtotals_and_total(gateway, seeded):
    order_in = OrderCreate(
        client_id=seeded["acme"]["id"],
        type="item",
        details=[
            OrderDetailCreate(item_id=seeded["laptop"]["id"], quantity=2, unit_price=650),
            OrderDetailCreate(item_id=seeded["mouse"]["id"], quantity=3, unit_price=10.5),
        ],
    )
    order = await order_crud.create_order(gateway, order_in)

    assert order["total_amount"] == 1331.5
    assert [d["subtotal"] for d in order["details"]] == [1300, 31.5]

    stored = await order_crud.get_order_with_details(gateway, order["id"])
    assert len(stored["details"]) == 2


async def test_create_order_without_lines_keeps_given_total(gateway, seeded):
    order = await order_crud.create_order(gateway, OrderCreate(client_id=seeded["beta"]["id"], type="service", total_amount=99.999))
    assert order["total_amount"] == 100.0
    assert order["details"] == []


async def test_payment_balance_accounts_for_previous_payments(gateway, seeded):
    order_id = seeded["recent_order"]["id"]
    payment = await payment_crud.create_payment(
        gateway, PaymentCreate(client_id=seeded["acme"]["id"], order_id=order_id, amount_paid=500)
    )
    # 1300 - (300 previos + 500)
    assert payment["balance"] == 500
    assert await payment_crud.get_paid_amount(gateway, order_id) == 800


async def test_payment_for_missing_order_fails(gateway, seeded):
    with pytest.raises(RecordNotFound):
        await payment_crud.create_payment(
            gateway, PaymentCreate(client_id=seeded["acme"]["id"], order_id="missing", amount_paid=10)
        )


def test_payment_amount_must_be_positive():
    with pytest.raises(ValidationError):
        PaymentCreate(client_id="c", order_id="o", amount_paid=0)
