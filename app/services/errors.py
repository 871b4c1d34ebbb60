# app/services/errors.py
"""
Gate workflow errors.
Every error carries a stable `code` and the message shown to the gate attendant.
Raised by visitor_validator / visitor_service, mapped to HTTP in app.main.
"""


class VisitorError(Exception):
    code = "visitor_error"
    status_code = 400
    default_message = "Request could not be processed"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class CheckInError(VisitorError):
    """Any failure of the check-in workflow."""


class CheckOutError(VisitorError):
    """Any failure of the check-out workflow."""


# ── Validation (before any store I/O) ────────────────────────────────────────
class InvalidInput(CheckInError, CheckOutError):
    status_code = 422


class InvalidId(InvalidInput):
    code = "invalid_id"
    default_message = "ID must be exactly 8 digits"


class InvalidMobile(InvalidInput):
    code = "invalid_mobile"
    default_message = "Mobile number must be a valid Kenyan number (e.g., 0712345678)"


class MissingName(InvalidInput):
    code = "missing_name"
    default_message = "First name and last name are required"


class InvalidPlate(InvalidInput):
    code = "invalid_plate"
    default_message = "Car plate must be in Kenyan format (e.g., KBM243T)"


# ── Business rules (detected via a store query) ──────────────────────────────
class AlreadyInside(CheckInError):
    code = "already_inside"
    status_code = 409
    default_message = "This person is already checked in!"


class NotInside(CheckOutError):
    code = "not_inside"
    status_code = 404
    default_message = "No active check-in found for this ID"


# ── Store I/O ────────────────────────────────────────────────────────────────
class StoreUnavailable(CheckInError, CheckOutError):
    code = "store_unavailable"
    status_code = 503
    default_message = "Something went wrong. Please try again."
