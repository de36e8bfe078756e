"""Rejection reasons returned by booking admission."""

from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    USER_NOT_FOUND = "USER_NOT_FOUND"
    HOTEL_NOT_FOUND = "HOTEL_NOT_FOUND"
    ROOM_NOT_FOUND = "ROOM_NOT_FOUND"
    INVALID_DATE_RANGE = "INVALID_DATE_RANGE"
    INSUFFICIENT_ROOMS = "INSUFFICIENT_ROOMS"


NOT_FOUND_CODES = frozenset(
    {ErrorCode.USER_NOT_FOUND, ErrorCode.HOTEL_NOT_FOUND, ErrorCode.ROOM_NOT_FOUND}
)


class BookingRejected(Exception):
    """Base rejection with code and user-safe message."""

    def __init__(self, code: ErrorCode, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message

    @property
    def is_not_found(self) -> bool:
        return self.code in NOT_FOUND_CODES

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class UserNotFoundError(BookingRejected):
    def __init__(self, email: str | None) -> None:
        super().__init__(code=ErrorCode.USER_NOT_FOUND, message="User not found.")
        self.email = email


class HotelNotFoundError(BookingRejected):
    def __init__(self, hotel_id: int) -> None:
        super().__init__(code=ErrorCode.HOTEL_NOT_FOUND, message="Hotel not found.")
        self.hotel_id = hotel_id


class RoomNotFoundError(BookingRejected):
    def __init__(self, room_id: int) -> None:
        super().__init__(
            code=ErrorCode.ROOM_NOT_FOUND,
            message=f"Room with ID {room_id} not found.",
        )
        self.room_id = room_id


class InvalidDateRangeError(BookingRejected):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_DATE_RANGE,
            message="Check-out date must be after check-in date.",
        )


class InsufficientRoomsError(BookingRejected):
    """Raised when one or more room types cannot cover the requested units.

    `shortages` maps each failing room id to (requested, available).
    """

    def __init__(self, shortages: dict[int, tuple[int, int]]) -> None:
        message = " ".join(
            f"Not enough rooms available for room ID {room_id}: "
            f"requested {requested}, available {available}."
            for room_id, (requested, available) in shortages.items()
        )
        super().__init__(code=ErrorCode.INSUFFICIENT_ROOMS, message=message)
        self.shortages = shortages

    @property
    def room_ids(self) -> list[int]:
        return list(self.shortages)
