"""Seat limits and the messages reported by the ticket service."""

MAX_SEATS_PER_SECTION = 5

MSG_TICKET_PURCHASE_SUCCESS = "Ticket purchased successfully"
MSG_USERS_RETRIEVED = "Users retrieved successfully"
MSG_USER_REMOVED_SUCCESS = "User removed successfully"
MSG_SEAT_UPDATED_SUCCESS = "Seat updated successfully"

ERR_NO_AVAILABLE_SEATS = "no available seats on the train"
ERR_RECEIPT_NOT_FOUND = "receipt not found"
ERR_USER_NOT_FOUND = "user not found"
ERR_SEAT_OCCUPIED = "requested seat is already occupied"