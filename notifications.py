"""Order notification emails and the owner-then-customer send sequence.

Field values go into the HTML bodies exactly as submitted. Nothing is
escaped, so markup in ``customerEmail`` reaches the owner's inbox as markup.
"""
from dataclasses import dataclass
from typing import Optional

from mailer import EmailDispatchFailure

OWNER_SUBJECT = "New Pancake Order!"
CUSTOMER_SUBJECT = "Your Pancake Order Confirmation"


@dataclass(frozen=True)
class OutgoingEmail:
    sender: str
    recipient: str
    subject: str
    html: str


@dataclass(frozen=True)
class DispatchResult:
    owner_sent: bool = False
    customer_sent: bool = False
    error: Optional[EmailDispatchFailure] = None

    @property
    def ok(self):
        return self.owner_sent and self.customer_sent and self.error is None

    @property
    def failed_step(self):
        if self.error is None:
            return None
        return "customer" if self.owner_sent else "owner"


def compose_owner_email(order, settings):
    html = f"""
        <h2>New Order Details:</h2>
        <p>Number of Pancakes: {order.pancakes}</p>
        <p>Total Amount: ${order.total_amount}</p>
        <p>XMR Amount: {order.total_xmr}</p>
        <p>Customer Email: {order.customer_email}</p>
        <p>Customer Location:</p>
        <p>- Latitude: {order.user_location.lat}</p>
        <p>- Longitude: {order.user_location.lng}</p>
        <p>Distance from store: {order.distance} miles</p>
    """
    return OutgoingEmail(
        sender=settings.gmail_user,
        recipient=settings.owner_address,
        subject=OWNER_SUBJECT,
        html=html,
    )


def compose_customer_email(order, settings):
    html = f"""
        <h2>Thank you for your order!</h2>
        <p>Order Details:</p>
        <p>Number of Pancakes: {order.pancakes}</p>
        <p>Total Amount: ${order.total_amount}</p>
        <p>XMR Amount: {order.total_xmr}</p>
        <p>Your pancakes will be delivered to your location.</p>
        <p>Each order includes maple syrup and whipped cream!</p>
        <p>We'll begin preparing your order once payment is confirmed.</p>
    """
    return OutgoingEmail(
        sender=settings.gmail_user,
        recipient=order.customer_email,
        subject=CUSTOMER_SUBJECT,
        html=html,
    )


def _send(mailer, email):
    mailer.send_message(email.sender, email.recipient, email.subject, email.html)


def dispatch_order_notifications(order, mailer, settings) -> DispatchResult:
    """Send the owner email, then the customer email.

    Stops at the first failed send; the customer is never emailed when
    the owner notification did not go out.
    """
    try:
        _send(mailer, compose_owner_email(order, settings))
    except EmailDispatchFailure as err:
        return DispatchResult(error=err)

    try:
        _send(mailer, compose_customer_email(order, settings))
    except EmailDispatchFailure as err:
        return DispatchResult(owner_sent=True, error=err)

    return DispatchResult(owner_sent=True, customer_sent=True)
