"""Integration tests for the Cart use cases."""

import pytest

from ecommerce.application.cart_use_case import CartUseCase
from ecommerce.application.dto import (
    AddProductRequest,
    RemoveProductRequest,
    UpdateCartLineRequest,
)
from ecommerce.domain.context import RequestContext
from ecommerce.domain.exceptions import DomainException, EntityNotFoundError, ValidationError
from ecommerce.domain.model.cart import Cart, CartLine
from ecommerce.domain.model.product import Product
from ecommerce.domain.model.value_objects import Money
from tests.fakes import FakeCartRepository, FakeProductRepository, FakeValidator


def _setup(lines: list[CartLine] | None = None):
    products = [
        Product(id="p1", name="Widget", price=Money.of("3.00")),
        Product(id="p2", name="Gadget", price=Money.of("10.00")),
    ]
    validator = FakeValidator()
    cart_repo = FakeCartRepository([Cart(id="c1", user_id="u1", lines=list(lines or []))])
    product_repo = FakeProductRepository(products)
    use_case = CartUseCase(validator, cart_repo, product_repo)
    return use_case, validator, cart_repo, product_repo


class TestAddProduct:

    def test_line_priced_from_catalog(self):
        use_case, _, cart_repo, _ = _setup()
        line = use_case.add_product(
            RequestContext(), AddProductRequest(cart_id="c1", product_id="p2", quantity=2)
        )

        assert line.price == Money.of("20.00")
        [(created,)] = cart_repo.called("create_cart_line")
        assert created is line
        assert created.cart_id == "c1"

    def test_validation_failure_stops_everything(self):
        use_case, validator, cart_repo, product_repo = _setup()
        validator.fail_on("validate_struct", ValidationError("invalid input"))

        with pytest.raises(ValidationError, match="invalid input"):
            use_case.add_product(
                RequestContext(), AddProductRequest(cart_id="", product_id="p1", quantity=0)
            )

        assert product_repo.calls == []
        assert cart_repo.calls == []

    def test_unknown_product(self):
        use_case, _, cart_repo, _ = _setup()

        with pytest.raises(EntityNotFoundError):
            use_case.add_product(
                RequestContext(), AddProductRequest(cart_id="c1", product_id="nope", quantity=1)
            )

        assert cart_repo.called("create_cart_line") == []

    def test_create_error_propagates(self):
        use_case, _, cart_repo, _ = _setup()
        cart_repo.fail_on("create_cart_line", DomainException("db error"))

        with pytest.raises(DomainException, match="db error"):
            use_case.add_product(
                RequestContext(), AddProductRequest(cart_id="c1", product_id="p1", quantity=1)
            )


class TestUpdateCartLine:

    def test_price_recomputed_from_current_price(self):
        original = CartLine(cart_id="c1", product_id="p1", quantity=2, price=Money.of("20.00"))
        use_case, _, cart_repo, _ = _setup([original])

        use_case.update_cart_line(
            RequestContext(), UpdateCartLineRequest(cart_id="c1", product_id="p1", quantity=5)
        )

        # 3.00 * 5, not the old 20.00 scaled up
        assert original.price == Money.of("15.00")
        assert original.quantity == 5
        assert cart_repo.called("update_cart_line") == [(original,)]

    def test_catalog_price_change_picked_up(self):
        original = CartLine(cart_id="c1", product_id="p1", quantity=1, price=Money.of("3.00"))
        use_case, _, _, product_repo = _setup([original])
        product_repo.get_product_by_id(RequestContext(), "p1").update_price(Money.of("4.50"))

        line = use_case.update_cart_line(
            RequestContext(), UpdateCartLineRequest(cart_id="c1", product_id="p1", quantity=2)
        )

        assert line.price == Money.of("9.00")

    def test_validation_failure_stops_everything(self):
        use_case, validator, cart_repo, product_repo = _setup()
        validator.fail_on("validate_struct", ValidationError("invalid"))

        with pytest.raises(ValidationError, match="invalid"):
            use_case.update_cart_line(
                RequestContext(), UpdateCartLineRequest(cart_id="", product_id="p1", quantity=0)
            )

        assert product_repo.calls == []
        assert cart_repo.calls == []

    def test_missing_line(self):
        use_case, _, cart_repo, _ = _setup()

        with pytest.raises(EntityNotFoundError):
            use_case.update_cart_line(
                RequestContext(), UpdateCartLineRequest(cart_id="c1", product_id="p1", quantity=1)
            )

        assert cart_repo.called("update_cart_line") == []


class TestRemoveProduct:

    def test_removes_line(self):
        line = CartLine(cart_id="c1", product_id="p1", quantity=1, price=Money.of("3.00"))
        use_case, validator, cart_repo, _ = _setup([line])

        use_case.remove_product(RequestContext(), RemoveProductRequest(cart_id="c1", product_id="p1"))

        assert cart_repo.called("remove_cart_line") == [(line,)]
        assert validator.calls == []

    def test_missing_line(self):
        use_case, _, cart_repo, _ = _setup()

        with pytest.raises(EntityNotFoundError, match="not found"):
            use_case.remove_product(
                RequestContext(), RemoveProductRequest(cart_id="c1", product_id="p1")
            )

        assert cart_repo.called("remove_cart_line") == []


class TestGetCartByUserId:

    def test_returns_cart(self):
        use_case, _, _, _ = _setup()
        c = use_case.get_cart_by_user_id(RequestContext(), "u1")
        assert c.id == "c1"
        assert c.lines == []

    def test_error_propagates(self):
        use_case, _, _, _ = _setup()
        with pytest.raises(EntityNotFoundError):
            use_case.get_cart_by_user_id(RequestContext(), "nobody")
