"""Integration tests for the Order use cases.

Uses in-memory fakes — no file I/O.
"""

from decimal import Decimal

import pytest

from ecommerce.application.dto import (
    ListOrdersRequest,
    PlaceOrderLineRequest,
    PlaceOrderRequest,
)
from ecommerce.application.order_use_case import OrderUseCase
from ecommerce.domain.context import RequestContext
from ecommerce.domain.exceptions import (
    DomainException,
    EntityNotFoundError,
    InvalidOrderStatusError,
    InvalidStatusError,
    PermissionDeniedError,
    RepositoryContractError,
    ValidationError,
)
from ecommerce.domain.model.order import Order, OrderLine, OrderStatus
from ecommerce.domain.model.product import Product
from ecommerce.domain.model.value_objects import Money
from tests.fakes import FakeOrderRepository, FakeProductRepository, FakeValidator


def _setup(products: list[Product] | None = None, orders: list[Order] | None = None):
    if products is None:
        products = [
            Product(id="p1", name="Widget", price=Money.of("10.00")),
            Product(id="p2", name="Gadget", price=Money.of("20.00")),
        ]
    validator = FakeValidator()
    order_repo = FakeOrderRepository(orders)
    product_repo = FakeProductRepository(products)
    use_case = OrderUseCase(validator, order_repo, product_repo)
    return use_case, validator, order_repo, product_repo


def _request(*lines: tuple[str, int], user_id: str = "u1") -> PlaceOrderRequest:
    return PlaceOrderRequest(
        user_id=user_id,
        lines=[PlaceOrderLineRequest(product_id=pid, quantity=qty) for pid, qty in lines],
    )


def _existing(status: OrderStatus = OrderStatus.NEW, user_id: str = "u1") -> Order:
    return Order(
        id="o1",
        user_id=user_id,
        lines=[OrderLine(product_id="p1", quantity=1, price=Money.of("10"))],
        total_price=Money.of("10"),
        status=status,
    )


# ── place_order ──────────────────────────────────────────────────────────────


class TestPlaceOrderHappyPath:

    def test_two_lines_total(self):
        use_case, _, _, _ = _setup()
        order = use_case.place_order(RequestContext(), _request(("p1", 1), ("p2", 3)))

        assert order.total_price == Money.of("70.0")
        assert order.lines[0].price == Money.of("10.0")
        assert order.lines[1].price == Money.of("60.0")

    def test_single_line(self):
        products = [Product(id="p1", name="Widget", price=Money.of("50.0"))]
        use_case, _, _, _ = _setup(products)

        order = use_case.place_order(RequestContext(), _request(("p1", 2)))

        assert len(order.lines) == 1
        assert order.lines[0].price == Money.of("100.0")
        assert order.lines[0].product is products[0]

    def test_total_is_sum_of_lines(self):
        use_case, _, _, _ = _setup()
        order = use_case.place_order(
            RequestContext(), _request(("p1", 4), ("p2", 2), ("p1", 1))
        )
        assert order.total_price.amount == sum(l.price.amount for l in order.lines)

    def test_lines_carry_resolved_products(self):
        use_case, _, _, product_repo = _setup()
        order = use_case.place_order(RequestContext(), _request(("p1", 1), ("p2", 3)))

        assert order.lines[0].product is product_repo.get_product_by_id(RequestContext(), "p1")
        assert order.lines[1].product is product_repo.get_product_by_id(RequestContext(), "p2")

    def test_order_starts_new_and_is_persisted(self):
        use_case, _, order_repo, _ = _setup()
        order = use_case.place_order(RequestContext(), _request(("p1", 1)))

        assert order.status == OrderStatus.NEW
        assert order.user_id == "u1"
        assert order_repo.stored(order.id).total_price == Money.of("10")

    def test_products_looked_up_in_input_order(self):
        use_case, _, _, product_repo = _setup()
        use_case.place_order(RequestContext(), _request(("p2", 1), ("p1", 1)))

        assert product_repo.called("get_product_by_id") == [("p2",), ("p1",)]

    def test_submitted_lines_are_priced(self):
        use_case, _, order_repo, _ = _setup()
        use_case.place_order(RequestContext(), _request(("p2", 3)))

        [(user_id, lines)] = order_repo.called("create_order")
        assert user_id == "u1"
        assert lines[0].price == Money.of("60")
        assert lines[0].quantity == 3


class TestPlaceOrderPriceLock:

    def test_price_snapshot_at_placement(self):
        use_case, _, order_repo, product_repo = _setup()
        order = use_case.place_order(RequestContext(), _request(("p1", 1)))

        widget = product_repo.get_product_by_id(RequestContext(), "p1")
        widget.update_price(Money.of("99.99"))

        assert order_repo.stored(order.id).lines[0].price == Money.of("10.00")


class TestPlaceOrderFailures:

    def test_validation_failure_stops_everything(self):
        use_case, validator, order_repo, product_repo = _setup()
        validator.fail_on("validate_struct", ValidationError("invalid input"))

        with pytest.raises(ValidationError, match="invalid input"):
            use_case.place_order(RequestContext(), PlaceOrderRequest(user_id="", lines=[]))

        assert product_repo.calls == []
        assert order_repo.calls == []

    def test_unknown_product_aborts(self):
        use_case, _, order_repo, _ = _setup()

        with pytest.raises(EntityNotFoundError, match="not found"):
            use_case.place_order(RequestContext(), _request(("p1", 1), ("missing", 2)))

        assert order_repo.called("create_order") == []

    def test_first_failing_lookup_stops_the_rest(self):
        use_case, _, _, product_repo = _setup()

        with pytest.raises(EntityNotFoundError):
            use_case.place_order(RequestContext(), _request(("missing", 1), ("p1", 1)))

        assert product_repo.called("get_product_by_id") == [("missing",)]

    def test_repository_error_propagates(self):
        use_case, _, order_repo, _ = _setup()
        error = DomainException("insert failed")
        order_repo.fail_on("create_order", error)

        with pytest.raises(DomainException) as exc_info:
            use_case.place_order(RequestContext(), _request(("p1", 1)))

        assert exc_info.value is error

    def test_short_line_list_from_repository_rejected(self):
        use_case, _, order_repo, _ = _setup()
        order_repo.mangle_lines = lambda lines: lines[:1]

        with pytest.raises(RepositoryContractError, match="expected 2"):
            use_case.place_order(RequestContext(), _request(("p1", 1), ("p2", 1)))

    def test_reordered_lines_from_repository_rejected(self):
        use_case, _, order_repo, _ = _setup()
        order_repo.mangle_lines = lambda lines: list(reversed(lines))

        with pytest.raises(RepositoryContractError, match="out of order"):
            use_case.place_order(RequestContext(), _request(("p1", 1), ("p2", 1)))


# ── list_my_orders / get_order_by_id ─────────────────────────────────────────


class TestOrderQueries:

    def test_list_my_orders(self):
        other = _existing(user_id="u2")
        other.id = "o2"
        use_case, _, _, _ = _setup(orders=[_existing(), other])

        orders, page = use_case.list_my_orders(
            RequestContext(), ListOrdersRequest(user_id="u1", page=1, limit=10)
        )

        assert [o.id for o in orders] == ["o1"]
        assert page.total == 1
        assert page.current_page == 1

    def test_list_my_orders_empty(self):
        use_case, _, _, _ = _setup()
        orders, page = use_case.list_my_orders(
            RequestContext(), ListOrdersRequest(user_id="u1", page=2, limit=5)
        )

        assert orders == []
        assert page.total == 0
        assert page.current_page == 2

    def test_list_my_orders_error_propagates(self):
        use_case, _, order_repo, _ = _setup()
        order_repo.fail_on("get_my_orders", DomainException("db error"))

        with pytest.raises(DomainException, match="db error"):
            use_case.list_my_orders(RequestContext(), ListOrdersRequest(user_id="u1"))

    def test_get_order_by_id_preloads(self):
        use_case, _, order_repo, _ = _setup(orders=[_existing()])
        order = use_case.get_order_by_id(RequestContext(), "o1")

        assert order.id == "o1"
        assert len(order.lines) == 1
        assert order_repo.called("get_order_by_id") == [("o1", True)]

    def test_get_order_by_id_not_found(self):
        use_case, _, _, _ = _setup()
        with pytest.raises(EntityNotFoundError, match="not found"):
            use_case.get_order_by_id(RequestContext(), "o123")


# ── update_order ─────────────────────────────────────────────────────────────


class TestUpdateOrderHappyPath:

    def test_new_to_done(self):
        use_case, _, order_repo, _ = _setup(orders=[_existing()])
        updated = use_case.update_order(RequestContext(), "o1", "u1", "done")

        assert updated.status == OrderStatus.DONE
        assert order_repo.stored("o1").status == OrderStatus.DONE

    def test_fetches_without_preload(self):
        use_case, _, order_repo, _ = _setup(orders=[_existing()])
        use_case.update_order(RequestContext(), "o1", "u1", "in_progress")

        assert order_repo.called("get_order_by_id") == [("o1", False)]

    @pytest.mark.parametrize("source", [OrderStatus.NEW, OrderStatus.IN_PROGRESS])
    @pytest.mark.parametrize("target", list(OrderStatus))
    def test_non_terminal_accepts_any_target(self, source, target):
        use_case, _, _, _ = _setup(orders=[_existing(status=source)])
        updated = use_case.update_order(RequestContext(), "o1", "u1", target.value)
        assert updated.status == target


class TestUpdateOrderRejections:

    def test_other_user_denied(self):
        use_case, _, order_repo, _ = _setup(orders=[_existing()])

        with pytest.raises(PermissionDeniedError, match="permission denied"):
            use_case.update_order(RequestContext(), "o1", "otherUser", "done")

        assert order_repo.called("update_order") == []

    def test_permission_checked_before_status(self):
        use_case, _, _, _ = _setup(orders=[_existing(status=OrderStatus.DONE)])

        with pytest.raises(PermissionDeniedError):
            use_case.update_order(RequestContext(), "o1", "otherUser", "badstatus")

    @pytest.mark.parametrize("terminal", [OrderStatus.DONE, OrderStatus.CANCELED])
    @pytest.mark.parametrize("target", ["new", "in_progress", "done", "canceled", "badstatus"])
    def test_terminal_orders_never_move(self, terminal, target):
        use_case, _, order_repo, _ = _setup(orders=[_existing(status=terminal)])

        with pytest.raises(InvalidOrderStatusError, match="invalid order status"):
            use_case.update_order(RequestContext(), "o1", "u1", target)

        assert order_repo.stored("o1").status == terminal

    def test_unknown_target_status(self):
        use_case, _, order_repo, _ = _setup(orders=[_existing()])

        with pytest.raises(InvalidStatusError, match="invalid status") as exc_info:
            use_case.update_order(RequestContext(), "o1", "u1", "badstatus")

        assert not isinstance(exc_info.value, InvalidOrderStatusError)
        assert order_repo.called("update_order") == []

    def test_missing_order(self):
        use_case, _, _, _ = _setup()
        with pytest.raises(EntityNotFoundError):
            use_case.update_order(RequestContext(), "nope", "u1", "done")

    def test_repository_update_error_propagates(self):
        use_case, _, order_repo, _ = _setup(orders=[_existing()])
        order_repo.fail_on("update_order", DomainException("update failed"))

        with pytest.raises(DomainException, match="update failed"):
            use_case.update_order(RequestContext(), "o1", "u1", "in_progress")


def test_decimal_prices_stay_exact():
    products = [Product(id="p1", name="Pen", price=Money.of("0.10"))]
    use_case, _, _, _ = _setup(products)
    order = use_case.place_order(RequestContext(), _request(("p1", 3)))
    assert order.total_price.amount == Decimal("0.30")
