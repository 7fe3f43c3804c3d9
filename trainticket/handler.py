"""Request handling in front of the ticket service: validation, then delegation."""

from __future__ import annotations

import logging

from .models import (
    GetReceiptDetailsRequest,
    GetReceiptDetailsResponse,
    GetUsersBySectionRequest,
    GetUsersBySectionResponse,
    ModifyUserSeatRequest,
    ModifyUserSeatResponse,
    PurchaseTicketRequest,
    PurchaseTicketResponse,
    RemoveUserRequest,
    RemoveUserResponse,
    TicketServiceProtocol,
)
from .validation import (
    ValidationError,
    validate_modify_user_seat_request,
    validate_purchase_request,
    validate_section,
)

log = logging.getLogger(__name__)


class TicketHandler:
    """Validates incoming requests and passes them on to a ticket service.

    Invalid requests raise ValidationError before the service is called;
    errors raised by the service are logged and propagate unchanged.
    """

    def __init__(self, ticket_service: TicketServiceProtocol) -> None:
        self.ticket_service = ticket_service

    def purchase_ticket(self, request: PurchaseTicketRequest) -> PurchaseTicketResponse:
        """Validate a purchase request and buy a ticket through the service."""
        try:
            validate_purchase_request(request)
        except ValidationError as exc:
            log.info("Invalid PurchaseTicket request: %s", exc)
            raise

        user = request.user
        log.info(
            "Received PurchaseTicket request: From=%s, To=%s, User=%s %s (%s), Price=%.2f",
            request.from_location,
            request.to_location,
            user.first_name,
            user.last_name,
            user.email,
            request.price_paid,
        )
        try:
            return self.ticket_service.purchase_ticket(request)
        except Exception as exc:
            log.info("Error processing PurchaseTicket request: %s", exc)
            raise

    def get_receipt_details(
        self, request: GetReceiptDetailsRequest
    ) -> GetReceiptDetailsResponse:
        """Return the receipt for the ticket named in the request."""
        if not request.ticket_id:
            raise ValidationError("ticketId is required")
        try:
            receipt = self.ticket_service.get_receipt_details(request.ticket_id)
        except Exception as exc:
            log.info("Error retrieving receipt for ticketID %s: %s", request.ticket_id, exc)
            raise
        return GetReceiptDetailsResponse(receipt=receipt)

    def get_users_by_section(
        self, request: GetUsersBySectionRequest
    ) -> GetUsersBySectionResponse:
        """List the users seated in the requested section."""
        try:
            validate_section(request)
        except ValidationError as exc:
            log.info("Invalid section in GetUsersBySection request: %s", exc)
            raise
        try:
            return self.ticket_service.get_users_by_section(request.section)
        except Exception as exc:
            log.info("Error in GetUsersBySection: %s", exc)
            raise

    def remove_user(self, request: RemoveUserRequest) -> RemoveUserResponse:
        """Remove the user identified by the e-mail address in the request."""
        if not request.email:
            raise ValidationError("email is required")
        try:
            return self.ticket_service.remove_user(request.email)
        except Exception as exc:
            log.info("Error in RemoveUser: %s", exc)
            raise

    def modify_user_seat(self, request: ModifyUserSeatRequest) -> ModifyUserSeatResponse:
        """Look up the ticket's receipt and move its holder to the requested seat."""
        try:
            validate_modify_user_seat_request(request)
        except ValidationError as exc:
            log.info("Invalid ModifyUserSeat request: %s", exc)
            raise
        try:
            receipt = self.ticket_service.get_receipt_details(request.ticket_id)
        except Exception as exc:
            log.info("Error retrieving receipt for ticketID %s: %s", request.ticket_id, exc)
            raise
        try:
            return self.ticket_service.modify_user_seat(receipt, request.new_seat)
        except Exception as exc:
            log.info("Error in ModifyUserSeat: %s", exc)
            raise