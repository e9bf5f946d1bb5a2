# booking_api/errors.py
"""
Business-rule rejections raised by the services and rendered by the
exception handler in main.py as ``{"error": message}``.
"""


class BookingError(Exception):
    """Base exception for all scheduling errors."""

    status_code = 400
    message = "Request could not be processed"

    def __init__(self, message: str = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class ValidationFailed(BookingError):
    message = "Validation fails"


class InvalidProvider(BookingError):
    status_code = 401
    message = "You can only create appointments with providers"


class SelfBookingNotAllowed(BookingError):
    status_code = 401
    message = "You can't create an appointment for yourself"


class PastDateRejected(BookingError):
    message = "Past dates are not permitted"


class SlotUnavailable(BookingError):
    message = "Appointment date is not available"


class NotAuthorized(BookingError):
    status_code = 401
    message = "You don't have permission to cancel this appointment"


class CutoffExceeded(BookingError):
    status_code = 401
    message = "You can only cancel appointments 2 hours in advance"


class NotFound(BookingError):
    status_code = 404
    message = "Appointment not found"


class AlreadyCanceled(BookingError):
    status_code = 409
    message = "Appointment already canceled"
