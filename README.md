# trainticket

An in-memory train ticketing service. It sells tickets on a train with two
sections, A and B, each with five seats (`trainticket.constants.MAX_SEATS_PER_SECTION`).
Seats are handed out in order: A1 to A5 first, then B1 to B5. The service also
keeps receipts, lists who sits in a section, removes passengers and moves them
to other seats.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `trainticket.models`: dataclasses for the requests and responses (`User`,
  `Seat`, `Receipt`, `UserSeat`, `PurchaseTicketRequest`, `PurchaseTicketResponse`,
  and so on), the `Section` enum (`UNKNOWN`, `A`, `B`) and
  `TicketServiceProtocol`, the interface a handler expects from a service.
- `trainticket.validation`: `validate_purchase_request`, `validate_section` and
  `validate_modify_user_seat_request`, which raise `ValidationError`.
- `trainticket.service`: `TicketService`, which holds all state behind a lock
  and is safe to use from several threads.
- `trainticket.handler`: `TicketHandler`, which validates requests and then
  calls any object that follows `TicketServiceProtocol`.
- `trainticket.constants`: the seat limit and the messages put in responses.

## Usage

```python
from trainticket.handler import TicketHandler
from trainticket.models import (
    GetReceiptDetailsRequest,
    GetUsersBySectionRequest,
    ModifyUserSeatRequest,
    PurchaseTicketRequest,
    RemoveUserRequest,
    Seat,
    Section,
    User,
)
from trainticket.service import TicketService

handler = TicketHandler(TicketService())

purchase = handler.purchase_ticket(
    PurchaseTicketRequest(
        from_location="London",
        to_location="Paris",
        user=User(first_name="Jane", last_name="Doe", email="jane@example.com"),
        price_paid=20.0,
    )
)
receipt = purchase.receipt
print(receipt.ticket_id, receipt.allocated_seat.seat_number)  # <uuid> A1

details = handler.get_receipt_details(GetReceiptDetailsRequest(ticket_id=receipt.ticket_id))
print(details.receipt.purchase_date)  # timezone-aware UTC datetime

in_a = handler.get_users_by_section(GetUsersBySectionRequest(section=Section.A))
for entry in in_a.users_in_section:
    print(entry.user.email, entry.seat.seat_number)

moved = handler.modify_user_seat(
    ModifyUserSeatRequest(
        ticket_id=receipt.ticket_id,
        new_seat=Seat(section=Section.B, seat_number="B2"),
    )
)
print(moved.success, moved.message)  # True Seat updated successfully
print(moved.updated_receipt.allocated_seat.seat_number)  # B2

removed = handler.remove_user(RemoveUserRequest(email="jane@example.com"))
print(removed.message)  # User removed successfully
```

Ticket ids are random UUID strings. `remove_user` removes the first ticket
found for the given e-mail address and frees its seat.

## Errors

- Malformed requests raise `trainticket.validation.ValidationError` (a
  `ValueError`) from the handler: a missing origin, destination or user, a
  non-positive price, a missing or unknown section, a missing ticket id,
  e-mail or new seat. The service is not called in these cases.
- Looking up a ticket that does not exist raises
  `trainticket.service.ReceiptNotFoundError` (a `LookupError`), both from
  `get_receipt_details` and from `modify_user_seat` on the handler.
- `TicketService.find_next_available_seat` raises
  `trainticket.service.NoAvailableSeatsError` when the train is full.
- Business outcomes are reported in the response rather than raised: a sold-out
  train, an unknown e-mail on removal, an unknown receipt or a seat already taken
  by another ticket on a seat change come back with `success=False` and a
  message from `trainticket.constants`.

## What it does not do

This is a library only. It has no network server or client and no command to
run; callers use `TicketHandler` or `TicketService` directly from Python. All
state lives in memory and is lost when the `TicketService` object goes away;
nothing is written to disk or a database.