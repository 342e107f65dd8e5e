# app/core/errors.py

class TicketFlowError(Exception):
    """Base for errors a request handler reports back to the client."""

    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(TicketFlowError):
    status_code = 422


class AuthError(TicketFlowError):
    """Credential mismatch. The message never says which check failed."""

    status_code = 401


class AuthorizationError(TicketFlowError):
    status_code = 401


class NotFoundError(TicketFlowError):
    status_code = 404
