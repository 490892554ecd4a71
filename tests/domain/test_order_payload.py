"""Unit tests for the order payload."""

from foodorder.domain.model.extras import Extra
from foodorder.domain.model.menu_item import ExtraDefinition, MenuItem
from foodorder.domain.model.order import OrderPayload
from foodorder.domain.model.value_objects import Money


def _menu_item() -> MenuItem:
    return MenuItem(
        id=7,
        name="Veggie",
        description="Grilled vegetables",
        price=Money.of("10.00"),
        category=2,
        image_url="https://example.com/veggie.png",
        formatted_price="$10.00",
        extras=(ExtraDefinition(1, "Bacon", Money.of("2.00")),),
    )


class TestOrderPayload:

    def test_price_excludes_extras(self):
        extras = (Extra(1, "Bacon", Money.of("2.00"), quantity=3),)
        payload = OrderPayload.create(_menu_item(), extras, food_quantity=2)
        assert payload.price == Money.of("20.00")

    def test_copies_item_fields(self):
        payload = OrderPayload.create(_menu_item(), (), food_quantity=1)
        assert payload.product_id == 7
        assert payload.name == "Veggie"
        assert payload.description == "Grilled vegetables"
        assert payload.category == 2
        assert payload.thumbnail_url == "https://example.com/veggie.png"

    def test_to_json_wire_shape(self):
        extras = (Extra(1, "Bacon", Money.of("2.00"), quantity=2),)
        body = OrderPayload.create(_menu_item(), extras, food_quantity=3).to_json()
        assert body == {
            "product_id": 7,
            "name": "Veggie",
            "description": "Grilled vegetables",
            "price": 30.0,
            "category": 2,
            "thumbnail_url": "https://example.com/veggie.png",
            "extras": [{"id": 1, "name": "Bacon", "value": 2.0, "quantity": 2}],
        }
