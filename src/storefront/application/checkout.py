"""Application service: Checkout use case.

Mirrors the storefront's shipping -> payment -> review flow. Placing the
order re-checks every line against current stock and then clears the cart.

Payment is a placeholder: the chosen method is recorded, nothing is
charged. Stock is not decremented and the order is not persisted.
"""

from __future__ import annotations

import logging
from dataclasses import fields
from datetime import datetime, timezone
from enum import Enum

from storefront.application.cart_mutation import CartMutationHandler
from storefront.application.dto import CheckoutSummaryDTO, ShippingAddress
from storefront.application.mapping import lines_to_dto
from storefront.domain.exceptions import ValidationError
from storefront.domain.model.cart import Cart, CartLine
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.service.cart_admission_service import CartAdmissionService

logger = logging.getLogger(__name__)


class PaymentMethod(Enum):
    CREDIT_CARD = "Credit Card"
    PAYPAL = "PayPal"


OPTIONAL_ADDRESS_FIELDS = frozenset({"address_line2"})


def validate_shipping_address(address: ShippingAddress) -> None:
    missing = [
        f.name
        for f in fields(address)
        if f.name not in OPTIONAL_ADDRESS_FIELDS
        and not (getattr(address, f.name) or "").strip()
    ]
    if missing:
        raise ValidationError(
            "Please fill in all required shipping address fields: "
            + ", ".join(missing)
        )


def parse_payment_method(raw: str) -> PaymentMethod:
    try:
        return PaymentMethod(raw)
    except ValueError:
        choices = ", ".join(m.value for m in PaymentMethod)
        raise ValidationError(
            f"Unsupported payment method {raw!r} (choose one of: {choices})"
        ) from None


class CheckoutHandler(CartMutationHandler):

    def handle(
        self,
        user_id: str,
        shipping_address: ShippingAddress,
        payment_method: str,
    ) -> CheckoutSummaryDTO:
        validate_shipping_address(shipping_address)
        method = parse_payment_method(payment_method)
        admission = CartAdmissionService(self._product_repo)
        checked: list[tuple[CartLine, Product]] = []

        def mutation(cart: Cart) -> bool:
            if cart.is_empty:
                raise ValidationError("Cannot check out an empty cart")
            checked[:] = admission.verify(cart)
            cart.clear()
            return True

        self._mutate(user_id, mutation)

        view = lines_to_dto(checked)
        subtotal = Money.total(product.price * line.quantity.value for line, product in checked)
        shipping = Money.zero()
        total = subtotal + shipping
        logger.info(
            "User %s checked out %d item(s) for %s via %s",
            user_id,
            view.total_items,
            total,
            method.value,
        )
        return CheckoutSummaryDTO(
            shipping_address=shipping_address,
            payment_method=method.value,
            lines=view.lines,
            total_items=view.total_items,
            subtotal=view.subtotal,
            shipping=str(shipping),
            total=str(total),
            placed_at=datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M UTC"),
        )
