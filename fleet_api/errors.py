# fleet_api/errors.py
"""
Domain errors raised by the services.
main.py maps each class to its HTTP status and a {"detail": message} body.
"""


class FleetError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(FleetError):
    """A field breaks a length rule, or a filter key is not allowed."""
    status_code = 400


class NotFoundError(FleetError):
    """Lookup by id found nothing, or a list query came back empty."""
    status_code = 404


class ConflictError(FleetError):
    """A driver or vehicle already has an open usage record."""
    status_code = 409


class StoreError(FleetError):
    """The store rejected a statement (CHECK, UNIQUE, malformed SQL)."""
    status_code = 400

    def __init__(self, message: str, integrity: bool = False):
        super().__init__(message)
        self.integrity = integrity
