"""Messages exchanged with the train ticketing service."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Protocol, runtime_checkable


class Section(enum.IntEnum):
    """A section of the train."""

    UNKNOWN = 0
    A = 1
    B = 2

    @property
    def label(self) -> str:
        """The wire name of the section, such as ``SECTION_A``."""
        return f"SECTION_{self.name}"

    @property
    def seat_prefix(self) -> str:
        """The letter that starts every seat number in this section."""
        if self is Section.UNKNOWN:
            raise ValueError("the unknown section has no seats")
        return self.name

    def __str__(self) -> str:
        return self.label


@dataclass
class User:
    first_name: str = ""
    last_name: str = ""
    email: str = ""


@dataclass
class Seat:
    seat_number: str = ""
    section: Section = Section.UNKNOWN


@dataclass
class Receipt:
    ticket_id: str = ""
    from_location: str = ""
    to_location: str = ""
    user: Optional[User] = None
    price_paid: float = 0.0
    allocated_seat: Optional[Seat] = None
    purchase_date: Optional[datetime] = None


@dataclass
class UserSeat:
    user: Optional[User] = None
    seat: Optional[Seat] = None


@dataclass
class PurchaseTicketRequest:
    from_location: str = ""
    to_location: str = ""
    user: Optional[User] = None
    price_paid: float = 0.0


@dataclass
class PurchaseTicketResponse:
    success: bool = False
    message: str = ""
    receipt: Optional[Receipt] = None


@dataclass
class GetReceiptDetailsRequest:
    ticket_id: str = ""


@dataclass
class GetReceiptDetailsResponse:
    receipt: Optional[Receipt] = None


@dataclass
class GetUsersBySectionRequest:
    section: Optional[Section] = Section.UNKNOWN


@dataclass
class GetUsersBySectionResponse:
    success: bool = False
    message: str = ""
    users_in_section: list[UserSeat] = field(default_factory=list)


@dataclass
class RemoveUserRequest:
    email: str = ""


@dataclass
class RemoveUserResponse:
    success: bool = False
    message: str = ""


@dataclass
class ModifyUserSeatRequest:
    ticket_id: str = ""
    new_seat: Optional[Seat] = None


@dataclass
class ModifyUserSeatResponse:
    success: bool = False
    message: str = ""
    updated_receipt: Optional[Receipt] = None
    updated_seat: Optional[Seat] = None


@runtime_checkable
class TicketServiceProtocol(Protocol):
    """What a ticket handler needs from the service behind it."""

    def purchase_ticket(self, request: PurchaseTicketRequest) -> PurchaseTicketResponse:
        """Allocate a seat and issue a receipt."""
        ...

    def get_receipt_details(self, ticket_id: str) -> Receipt:
        """Return the receipt for a ticket id."""
        ...

    def get_users_by_section(self, section: Section) -> GetUsersBySectionResponse:
        """List the users seated in a section."""
        ...

    def remove_user(self, email: str) -> RemoveUserResponse:
        """Remove the user with the given e-mail address."""
        ...

    def modify_user_seat(self, receipt: Receipt, new_seat: Seat) -> ModifyUserSeatResponse:
        """Move the holder of a receipt to another seat."""
        ...