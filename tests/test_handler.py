import pytest

from trainticket.constants import (
    ERR_USER_NOT_FOUND,
    MSG_SEAT_UPDATED_SUCCESS,
    MSG_TICKET_PURCHASE_SUCCESS,
    MSG_USER_REMOVED_SUCCESS,
)
from trainticket.handler import TicketHandler
from trainticket.models import (
    GetReceiptDetailsRequest,
    GetUsersBySectionRequest,
    GetUsersBySectionResponse,
    ModifyUserSeatRequest,
    ModifyUserSeatResponse,
    PurchaseTicketRequest,
    PurchaseTicketResponse,
    Receipt,
    RemoveUserRequest,
    RemoveUserResponse,
    Seat,
    Section,
    User,
)
from trainticket.service import ReceiptNotFoundError, TicketService
from trainticket.validation import ValidationError


class FakeService:
    """Records calls and answers with preset results or raises preset errors."""

    def __init__(self, **results):
        self.results = results
        self.calls = []

    def _answer(self, name, *args):
        self.calls.append((name, args))
        result = self.results[name]
        if isinstance(result, Exception):
            raise result
        return result

    def purchase_ticket(self, request):
        return self._answer("purchase_ticket", request)

    def get_receipt_details(self, ticket_id):
        return self._answer("get_receipt_details", ticket_id)

    def get_users_by_section(self, section):
        return self._answer("get_users_by_section", section)

    def remove_user(self, email):
        return self._answer("remove_user", email)

    def modify_user_seat(self, receipt, new_seat):
        return self._answer("modify_user_seat", receipt, new_seat)


@pytest.fixture
def valid_purchase():
    return PurchaseTicketRequest(
        from_location="Station A",
        to_location="Station B",
        user=User(first_name="Alice", last_name="Smith", email="alice.smith@example.com"),
        price_paid=50.0,
    )


# PurchaseTicket


def test_purchase_invalid_request_raises_without_calling_service():
    svc = FakeService()
    handler = TicketHandler(svc)
    with pytest.raises(ValidationError):
        handler.purchase_ticket(PurchaseTicketRequest())
    assert svc.calls == []


def test_purchase_service_error_propagates(valid_purchase):
    svc = FakeService(purchase_ticket=RuntimeError("service failure"))
    handler = TicketHandler(svc)
    with pytest.raises(RuntimeError, match="^service failure$"):
        handler.purchase_ticket(valid_purchase)
    assert svc.calls == [("purchase_ticket", (valid_purchase,))]


def test_purchase_success(valid_purchase):
    expected = PurchaseTicketResponse(
        message=MSG_TICKET_PURCHASE_SUCCESS,
        success=True,
        receipt=Receipt(ticket_id="12345"),
    )
    svc = FakeService(purchase_ticket=expected)
    resp = TicketHandler(svc).purchase_ticket(valid_purchase)
    assert resp.message == MSG_TICKET_PURCHASE_SUCCESS
    assert resp.success is True
    assert resp.receipt.ticket_id == "12345"


# GetReceiptDetails


def test_receipt_service_error_propagates():
    svc = FakeService(get_receipt_details=RuntimeError("receipt retrieval failed"))
    with pytest.raises(RuntimeError, match="^receipt retrieval failed$"):
        TicketHandler(svc).get_receipt_details(GetReceiptDetailsRequest(ticket_id="ticket-123"))
    assert svc.calls == [("get_receipt_details", ("ticket-123",))]


def test_receipt_success():
    svc = FakeService(get_receipt_details=Receipt(ticket_id="ticket-123"))
    resp = TicketHandler(svc).get_receipt_details(
        GetReceiptDetailsRequest(ticket_id="ticket-123")
    )
    assert resp.receipt.ticket_id == "ticket-123"


def test_receipt_missing_ticket_id():
    svc = FakeService()
    with pytest.raises(ValidationError, match="ticketId is required"):
        TicketHandler(svc).get_receipt_details(GetReceiptDetailsRequest())
    assert svc.calls == []


# GetUsersBySection


def test_users_by_section_invalid_section():
    svc = FakeService()
    with pytest.raises(ValidationError, match="Section is invalid"):
        TicketHandler(svc).get_users_by_section(
            GetUsersBySectionRequest(section=Section.UNKNOWN)
        )
    assert svc.calls == []


def test_users_by_section_service_error():
    svc = FakeService(get_users_by_section=RuntimeError("service failure"))
    with pytest.raises(RuntimeError, match="^service failure$"):
        TicketHandler(svc).get_users_by_section(GetUsersBySectionRequest(section=Section.A))
    assert svc.calls == [("get_users_by_section", (Section.A,))]


def test_users_by_section_success():
    expected = GetUsersBySectionResponse()
    svc = FakeService(get_users_by_section=expected)
    resp = TicketHandler(svc).get_users_by_section(GetUsersBySectionRequest(section=Section.A))
    assert resp is expected


# RemoveUser


def test_remove_user_missing_email():
    svc = FakeService()
    with pytest.raises(ValidationError, match="email is required"):
        TicketHandler(svc).remove_user(RemoveUserRequest(email=""))
    assert svc.calls == []


def test_remove_user_service_error():
    svc = FakeService(remove_user=RuntimeError("service removal error"))
    with pytest.raises(RuntimeError, match="^service removal error$"):
        TicketHandler(svc).remove_user(RemoveUserRequest(email="user@example.com"))
    assert svc.calls == [("remove_user", ("user@example.com",))]


def test_remove_user_success():
    expected = RemoveUserResponse()
    svc = FakeService(remove_user=expected)
    resp = TicketHandler(svc).remove_user(RemoveUserRequest(email="user@example.com"))
    assert resp is expected


# ModifyUserSeat


def test_modify_missing_ticket_id():
    svc = FakeService()
    with pytest.raises(ValidationError, match="ticketId is required"):
        TicketHandler(svc).modify_user_seat(
            ModifyUserSeatRequest(ticket_id="", new_seat=Seat(seat_number="A1"))
        )
    assert svc.calls == []


def test_modify_missing_new_seat():
    svc = FakeService()
    with pytest.raises(ValidationError, match="new seat is required"):
        TicketHandler(svc).modify_user_seat(
            ModifyUserSeatRequest(ticket_id="ticket-123", new_seat=None)
        )
    assert svc.calls == []


def test_modify_none_request():
    with pytest.raises(ValidationError):
        TicketHandler(FakeService()).modify_user_seat(None)


def test_modify_receipt_retrieval_error():
    svc = FakeService(get_receipt_details=RuntimeError("failed to retrieve receipt"))
    req = ModifyUserSeatRequest(ticket_id="ticket-123", new_seat=Seat(seat_number="B2"))
    with pytest.raises(RuntimeError, match="^failed to retrieve receipt$"):
        TicketHandler(svc).modify_user_seat(req)
    assert [name for name, _ in svc.calls] == ["get_receipt_details"]


def test_modify_seat_modification_error():
    receipt = Receipt(ticket_id="ticket-123")
    svc = FakeService(
        get_receipt_details=receipt,
        modify_user_seat=RuntimeError("seat modification failed"),
    )
    req = ModifyUserSeatRequest(ticket_id="ticket-123", new_seat=Seat(seat_number="B2"))
    with pytest.raises(RuntimeError, match="^seat modification failed$"):
        TicketHandler(svc).modify_user_seat(req)
    assert svc.calls[1] == ("modify_user_seat", (receipt, req.new_seat))


def test_modify_success():
    receipt = Receipt(ticket_id="ticket-123")
    svc = FakeService(
        get_receipt_details=receipt,
        modify_user_seat=ModifyUserSeatResponse(message="seat updated successfully"),
    )
    req = ModifyUserSeatRequest(ticket_id="ticket-123", new_seat=Seat(seat_number="B2"))
    resp = TicketHandler(svc).modify_user_seat(req)
    assert resp.message == "seat updated successfully"
    assert svc.calls == [
        ("get_receipt_details", ("ticket-123",)),
        ("modify_user_seat", (receipt, req.new_seat)),
    ]


# End to end with the in-memory service


def test_full_flow_with_real_service(valid_purchase):
    handler = TicketHandler(TicketService())

    bought = handler.purchase_ticket(valid_purchase)
    assert bought.success is True
    assert bought.receipt.allocated_seat.seat_number == "A1"
    ticket_id = bought.receipt.ticket_id

    details = handler.get_receipt_details(GetReceiptDetailsRequest(ticket_id=ticket_id))
    assert details.receipt.user.email == "alice.smith@example.com"

    in_a = handler.get_users_by_section(GetUsersBySectionRequest(section=Section.A))
    assert [us.user.email for us in in_a.users_in_section] == ["alice.smith@example.com"]

    moved = handler.modify_user_seat(
        ModifyUserSeatRequest(
            ticket_id=ticket_id, new_seat=Seat(seat_number="B2", section=Section.B)
        )
    )
    assert moved.success is True
    assert moved.message == MSG_SEAT_UPDATED_SUCCESS
    assert moved.updated_receipt.allocated_seat.seat_number == "B2"

    in_b = handler.get_users_by_section(GetUsersBySectionRequest(section=Section.B))
    assert len(in_b.users_in_section) == 1

    removed = handler.remove_user(RemoveUserRequest(email="alice.smith@example.com"))
    assert removed.success is True
    assert removed.message == MSG_USER_REMOVED_SUCCESS

    again = handler.remove_user(RemoveUserRequest(email="alice.smith@example.com"))
    assert again.success is False
    assert again.message == ERR_USER_NOT_FOUND


def test_modify_unknown_ticket_with_real_service():
    handler = TicketHandler(TicketService())
    with pytest.raises(ReceiptNotFoundError, match="receipt not found for ticketID missing"):
        handler.modify_user_seat(
            ModifyUserSeatRequest(ticket_id="missing", new_seat=Seat(seat_number="A1"))
        )