"""In-memory ticket service: seat allocation, receipts and seat changes."""

from __future__ import annotations

import logging
import threading
import uuid
from datetime import datetime, timezone
from typing import Optional

from .constants import (
    ERR_NO_AVAILABLE_SEATS,
    ERR_RECEIPT_NOT_FOUND,
    ERR_SEAT_OCCUPIED,
    ERR_USER_NOT_FOUND,
    MAX_SEATS_PER_SECTION,
    MSG_SEAT_UPDATED_SUCCESS,
    MSG_TICKET_PURCHASE_SUCCESS,
    MSG_USER_REMOVED_SUCCESS,
    MSG_USERS_RETRIEVED,
)
from .models import (
    GetUsersBySectionResponse,
    ModifyUserSeatResponse,
    PurchaseTicketRequest,
    PurchaseTicketResponse,
    Receipt,
    RemoveUserResponse,
    Seat,
    Section,
    UserSeat,
)

log = logging.getLogger(__name__)


class NoAvailableSeatsError(RuntimeError):
    """Raised when every seat on the train is taken."""

    def __init__(self) -> None:
        super().__init__(ERR_NO_AVAILABLE_SEATS)


class ReceiptNotFoundError(LookupError):
    """Raised when no receipt exists for a ticket id."""

    def __init__(self, ticket_id: str) -> None:
        super().__init__(f"{ERR_RECEIPT_NOT_FOUND} for ticketID {ticket_id}")
        self.ticket_id = ticket_id


class TicketService:
    """Keeps receipts and seat occupancy in memory, safe for use across threads."""

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self.receipts: dict[str, Receipt] = {}
        self.occupied_seats: dict[str, Receipt] = {}
        self.section_capacities: dict[Section, int] = {
            Section.A: MAX_SEATS_PER_SECTION,
            Section.B: MAX_SEATS_PER_SECTION,
        }

    def find_next_available_seat(self) -> Seat:
        """Return the first free seat, filling section A before section B."""
        with self._lock:
            for section, capacity in self.section_capacities.items():
                for number in range(1, capacity + 1):
                    seat_number = f"{section.seat_prefix}{number}"
                    if seat_number not in self.occupied_seats:
                        return Seat(seat_number=seat_number, section=section)
            raise NoAvailableSeatsError()

    def purchase_ticket(self, request: PurchaseTicketRequest) -> PurchaseTicketResponse:
        """Allocate a seat and issue a receipt; report failure when the train is full."""
        with self._lock:
            try:
                seat = self.find_next_available_seat()
            except NoAvailableSeatsError as exc:
                email = request.user.email if request.user else ""
                log.info("[PurchaseTicket] Failed for user %s: %s", email, exc)
                return PurchaseTicketResponse(success=False, message=str(exc), receipt=None)

            ticket_id = str(uuid.uuid4())
            receipt = Receipt(
                ticket_id=ticket_id,
                from_location=request.from_location,
                to_location=request.to_location,
                user=request.user,
                price_paid=request.price_paid,
                allocated_seat=seat,
                purchase_date=datetime.now(timezone.utc),
            )
            self.receipts[ticket_id] = receipt
            self.occupied_seats[seat.seat_number] = receipt
            log.info(
                "[PurchaseTicket] Success: TicketID=%s, Seat=%s, Section=%s",
                ticket_id,
                seat.seat_number,
                seat.section,
            )
            return PurchaseTicketResponse(
                success=True, message=MSG_TICKET_PURCHASE_SUCCESS, receipt=receipt
            )

    def get_receipt_details(self, ticket_id: str) -> Receipt:
        """Return the receipt for a ticket id or raise ReceiptNotFoundError."""
        with self._lock:
            receipt = self.receipts.get(ticket_id)
            if receipt is None:
                error = ReceiptNotFoundError(ticket_id)
                log.info("[GetReceiptDetails] %s", error)
                raise error
            log.info("[GetReceiptDetails] Retrieved receipt for ticketID %s", ticket_id)
            return receipt

    def get_users_by_section(self, section: Section) -> GetUsersBySectionResponse:
        """List the users and seats in the given section."""
        with self._lock:
            users = [
                UserSeat(user=receipt.user, seat=receipt.allocated_seat)
                for receipt in self.receipts.values()
                if receipt.allocated_seat is not None
                and receipt.allocated_seat.section == section
            ]
            log.info(
                "[GetUsersBySection] Retrieved %d users in section %s", len(users), section
            )
            return GetUsersBySectionResponse(
                success=True, message=MSG_USERS_RETRIEVED, users_in_section=users
            )

    def remove_user(self, email: str) -> RemoveUserResponse:
        """Remove the first ticket held by the given e-mail address and free its seat."""
        with self._lock:
            ticket_id: Optional[str] = next(
                (
                    tid
                    for tid, receipt in self.receipts.items()
                    if receipt.user is not None and receipt.user.email == email
                ),
                None,
            )
            if not ticket_id:
                log.info("[RemoveUser] No user found with email: %s", email)
                return RemoveUserResponse(success=False, message=ERR_USER_NOT_FOUND)

            receipt = self.receipts.pop(ticket_id)
            if receipt.allocated_seat is not None:
                self.occupied_seats.pop(receipt.allocated_seat.seat_number, None)
            log.info("[RemoveUser] Removed user with email: %s, TicketID: %s", email, ticket_id)
            return RemoveUserResponse(success=True, message=MSG_USER_REMOVED_SUCCESS)

    def modify_user_seat(self, receipt: Receipt, new_seat: Seat) -> ModifyUserSeatResponse:
        """Move the holder of a receipt to a new seat unless another ticket holds it."""
        with self._lock:
            existing = self.receipts.get(receipt.ticket_id)
            if existing is None:
                log.info("[ModifyUserSeat] Receipt not found for TicketID: %s", receipt.ticket_id)
                return ModifyUserSeatResponse(success=False, message=ERR_RECEIPT_NOT_FOUND)

            occupant = self.occupied_seats.get(new_seat.seat_number)
            if occupant is not None and occupant.ticket_id != receipt.ticket_id:
                log.info("[ModifyUserSeat] Seat %s is already occupied", new_seat.seat_number)
                return ModifyUserSeatResponse(success=False, message=ERR_SEAT_OCCUPIED)

            if existing.allocated_seat is not None:
                self.occupied_seats.pop(existing.allocated_seat.seat_number, None)
            existing.allocated_seat = new_seat
            self.occupied_seats[new_seat.seat_number] = existing
            log.info(
                "[ModifyUserSeat] Updated seat for TicketID: %s to Seat: %s",
                receipt.ticket_id,
                new_seat.seat_number,
            )
            return ModifyUserSeatResponse(
                success=True, message=MSG_SEAT_UPDATED_SUCCESS, updated_receipt=existing
            )