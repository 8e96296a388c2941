# app/core/errors.py
"""
Business-rule errors raised by the service layer.

Every error carries the HTTP status it is rendered with; app.main installs a
single handler for ShareItError so routers never translate them by hand.
"""
from fastapi import status


class ShareItError(Exception):
    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


# ---------------------------
# 404 - not found / not visible
# ---------------------------
class NotFoundError(ShareItError):
    status_code = status.HTTP_404_NOT_FOUND


class UserNotFound(NotFoundError):
    def __init__(self, user_id: int):
        super().__init__(f"User {user_id} not found")


class ItemNotFound(NotFoundError):
    def __init__(self, item_id: int):
        super().__init__(f"Item {item_id} not found")


class ItemRequestNotFound(NotFoundError):
    def __init__(self, request_id: int):
        super().__init__(f"Item request {request_id} not found")


class BookingNotFound(NotFoundError):
    def __init__(self, booking_id: int):
        super().__init__(f"Booking {booking_id} not found")


class SelfBookingNotAllowed(NotFoundError):
    # Reported as not-found so owners can't probe ownership through bookings.
    def __init__(self, item_id: int):
        super().__init__(f"Item {item_id} not found")


# ---------------------------
# 400 - invalid input / business rule
# ---------------------------
class InvalidInterval(ShareItError):
    def __init__(self):
        super().__init__("Booking start must be before its end")


class ItemNotAvailable(ShareItError):
    def __init__(self, item_id: int):
        super().__init__(f"Item {item_id} is not available")


class NoEligibleBooking(ShareItError):
    def __init__(self, user_id: int, item_id: int):
        super().__init__(
            f"User {user_id} has no completed approved booking of item {item_id}"
        )


class UnknownState(ShareItError):
    def __init__(self, state: str):
        super().__init__(f"Unknown state: {state}")


class MissingUserHeader(ShareItError):
    def __init__(self, header: str):
        super().__init__(f"Missing header {header}")


# ---------------------------
# 403 / 409
# ---------------------------
class OwnerMismatch(ShareItError):
    status_code = status.HTTP_403_FORBIDDEN

    def __init__(self, user_id: int, booking_id: int):
        super().__init__(f"User {user_id} does not own the item of booking {booking_id}")


class AlreadyDecided(ShareItError):
    status_code = status.HTTP_409_CONFLICT

    def __init__(self, booking_id: int, current: str):
        super().__init__(f"Booking {booking_id} is already {current}")


class EmailAlreadyExists(ShareItError):
    status_code = status.HTTP_409_CONFLICT

    def __init__(self, email: str):
        super().__init__(f"Email {email} already exists")
