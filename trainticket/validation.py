"""Checks applied to incoming requests before they reach the service."""

from __future__ import annotations

import logging
from typing import Optional

from .models import (
    GetUsersBySectionRequest,
    ModifyUserSeatRequest,
    PurchaseTicketRequest,
    Section,
)

log = logging.getLogger(__name__)


class ValidationError(ValueError):
    """Raised when a request is missing a field or carries a bad value."""


def _reject(message: str) -> ValidationError:
    log.info(message)
    return ValidationError(message)


def validate_purchase_request(request: PurchaseTicketRequest) -> None:
    """Raise ValidationError unless the purchase request is complete."""
    if not request.from_location:
        raise _reject("FromLocation is required")
    if not request.to_location:
        raise _reject("ToLocation is required")
    if request.user is None:
        raise _reject("User is required")
    if request.price_paid <= 0:
        raise _reject("PricePaid must be greater than zero")


def validate_section(request: GetUsersBySectionRequest) -> None:
    """Raise ValidationError unless the request names a real section."""
    if request.section is None:
        raise _reject("Section is required")
    if request.section == Section.UNKNOWN:
        raise _reject("Section is invalid")


def validate_modify_user_seat_request(request: Optional[ModifyUserSeatRequest]) -> None:
    """Raise ValidationError unless the request names a ticket and a new seat."""
    if request is None:
        raise _reject("request cannot be None")
    if not request.ticket_id:
        raise _reject("ticketId is required")
    if request.new_seat is None:
        raise _reject("new seat is required")