import pytest

from orders import OrderNotificationError, ValidationFailure, parse_order


def test_parse_keeps_numbers_as_sent(order_payload):
    order = parse_order(order_payload)

    assert order.pancakes == 3 and isinstance(order.pancakes, int)
    assert order.total_amount == 15 and isinstance(order.total_amount, int)
    assert order.total_xmr == 0.05
    assert order.user_location.lat == 40.0
    assert order.user_location.lng == -75.0
    assert order.distance == 2.3
    assert order.customer_email == "buyer@example.com"


@pytest.mark.parametrize(
    "field", ["pancakes", "totalAmount", "totalXMR", "userLocation", "distance", "customerEmail"]
)
def test_every_field_is_required(order_payload, field):
    del order_payload[field]

    with pytest.raises(ValidationFailure) as exc:
        parse_order(order_payload)

    assert field in exc.value.detail


def test_wrong_type_is_rejected(order_payload):
    order_payload["distance"] = "far"

    with pytest.raises(ValidationFailure):
        parse_order(order_payload)


@pytest.mark.parametrize("payload", [None, [], "order", 3])
def test_non_object_body_is_rejected(payload):
    with pytest.raises(ValidationFailure):
        parse_order(payload)


def test_validation_failure_is_an_order_error():
    assert issubclass(ValidationFailure, OrderNotificationError)
