from typing import Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

# int before float so 15 renders as "15" and 0.05 as "0.05"
Number = Union[int, float]


class OrderNotificationError(Exception):
    """Base class for everything that turns an order into the failure response."""


class ValidationFailure(OrderNotificationError):
    """The submitted payload is missing a field or has one of the wrong type."""

    def __init__(self, detail):
        super().__init__(detail)
        self.detail = detail


class UserLocation(BaseModel):
    lat: Number
    lng: Number


class OrderSubmission(BaseModel):
    """One customer's order as posted by the front end."""

    model_config = ConfigDict(populate_by_name=True)

    pancakes: Number
    total_amount: Number = Field(alias="totalAmount")
    total_xmr: Number = Field(alias="totalXMR")
    user_location: UserLocation = Field(alias="userLocation")
    distance: Number
    customer_email: str = Field(alias="customerEmail")


def parse_order(payload):
    """Validate a decoded JSON body into an OrderSubmission.

    Raises ValidationFailure for anything that is not a complete order,
    including a body that is not a JSON object at all.
    """
    if not isinstance(payload, dict):
        raise ValidationFailure("request body must be a JSON object")
    try:
        return OrderSubmission.model_validate(payload)
    except ValidationError as err:
        raise ValidationFailure(str(err)) from err
