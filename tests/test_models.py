from __future__ import annotations

import pytest
from pydantic import ValidationError

from pycart.exceptions import PartialCheckoutError
from pycart.models.cart import CartItem
from pycart.models.inventory import InventoryItem
from pycart.models.requests import CreateCartItemRequest, UpdateCartItemRequest
from pycart.render import HtmlRenderer


def test_inventory_amount_defaults_to_zero_and_rejects_negative() -> None:
    assert InventoryItem.model_validate({"id": 1, "content": "Widget"}).amount == 0
    with pytest.raises(ValidationError):
        InventoryItem(id=1, content="Widget", amount=-1)


def test_with_amount_clamps_at_zero() -> None:
    item = InventoryItem(id=1, content="Widget", amount=2)

    assert item.with_amount(-3).amount == 0
    assert item.amount == 2


def test_cart_item_requires_positive_amount() -> None:
    with pytest.raises(ValidationError):
        CartItem(id=1, content="Widget", amount=0)


def test_raw_payload_is_kept_but_ignored_by_equality() -> None:
    payload = {"id": 1, "content": "Widget", "amount": 2, "createdAt": "2026-01-01"}
    item = CartItem.model_validate(payload)

    assert item.raw == payload
    assert item == CartItem(id=1, content="Widget", amount=2)
    assert "raw" not in item.model_dump()


def test_equal_records_hash_alike_regardless_of_raw() -> None:
    a = CartItem.model_validate({"id": 1, "content": "Widget", "amount": 2, "note": "a"})
    b = CartItem.model_validate({"id": 1, "content": "Widget", "amount": 2, "note": "b"})

    assert a.raw != b.raw
    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b}) == 1
    assert {a: "line"}[b] == "line"


def test_create_request_keeps_content_verbatim() -> None:
    assert CreateCartItemRequest(id=1, content=" Widget ", amount=1).content == " Widget "
    assert CreateCartItemRequest(id=2, content="", amount=1).model_dump() == {"id": 2, "content": "", "amount": 1}


def test_requests_reject_zero_quantities() -> None:
    with pytest.raises(ValidationError):
        CreateCartItemRequest(id=1, content="Widget", amount=0)
    with pytest.raises(ValidationError):
        UpdateCartItemRequest(amount=0)
    with pytest.raises(ValidationError):
        UpdateCartItemRequest(amount=1, content="Widget")  # type: ignore[call-arg]


def test_partial_checkout_error_message_names_failed_ids() -> None:
    exc = PartialCheckoutError({3: RuntimeError("x"), 1: RuntimeError("y")}, removed=[2])

    assert exc.failed_ids == (1, 3)
    assert "1, 3" in str(exc)


def test_html_renderer_escapes_content_and_tags_controls() -> None:
    renderer = HtmlRenderer()

    renderer.render_inventory([InventoryItem(id=4, content="<b>Widget</b>", amount=2)])
    renderer.render_cart([CartItem(id=4, content="Widget", amount=3)])

    assert "&lt;b&gt;Widget&lt;/b&gt;" in renderer.inventory_markup
    assert '<button class="add-to-cart-btn" data-id="4">' in renderer.inventory_markup
    assert "<span>2</span>" in renderer.inventory_markup
    assert "x 3" in renderer.cart_markup
    assert '<button class="delete-btn" data-id="4">' in renderer.cart_markup
