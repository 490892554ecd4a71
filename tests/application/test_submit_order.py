"""Integration tests for the SubmitOrder use case."""

import asyncio

from foodorder.application.submit_order import SubmitOrderHandler
from foodorder.domain.exceptions import GatewayError
from foodorder.domain.model.extras import Extra
from foodorder.domain.model.menu_item import MenuItem
from foodorder.domain.model.value_objects import Money
from tests.fakes import FakeOrderRepository


def _menu_item() -> MenuItem:
    return MenuItem(
        id=1,
        name="Ao molho",
        description="Pasta",
        price=Money.of("10.00"),
        category=1,
        image_url="https://example.com/ao_molho.png",
        formatted_price="$10.00",
    )


EXTRAS = (Extra(1, "Bacon", Money.of("2.00"), quantity=2),)


class TestSubmitOrder:

    def test_success_sends_one_payload(self):
        repo = FakeOrderRepository()
        result = asyncio.run(SubmitOrderHandler(repo).handle(_menu_item(), EXTRAS, 2))
        assert result.ok is True
        assert len(repo.created) == 1
        assert repo.created[0] is result.payload

    def test_payload_price_excludes_extras(self):
        repo = FakeOrderRepository()
        asyncio.run(SubmitOrderHandler(repo).handle(_menu_item(), EXTRAS, 2))
        payload = repo.created[0]
        assert payload.price == Money.of("20.00")
        assert payload.extras == EXTRAS

    def test_gateway_failure_becomes_failed_result(self):
        repo = FakeOrderRepository(error=GatewayError("Order service answered 500"))
        result = asyncio.run(SubmitOrderHandler(repo).handle(_menu_item(), EXTRAS, 1))
        assert result.ok is False
        assert result.reason == "Order service answered 500"
        assert len(repo.attempts) == 1

    def test_not_loaded_sends_nothing(self):
        repo = FakeOrderRepository()
        result = asyncio.run(SubmitOrderHandler(repo).handle(None, (), 1))
        assert result.ok is False
        assert result.payload is None
        assert repo.attempts == []
