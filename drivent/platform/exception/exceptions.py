class CustomBaseError(Exception):
    """
    Error with an HTTP status. @Logger.io logs these without a traceback, and the
    registered handler answers with `{"detail": message}`.
    """

    status_code: int = 500
    default_message: str = 'Internal server error'

    def __init__(self, message: str | None = None, status_code: int | None = None) -> None:
        self.message = message or self.default_message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class DomainError(CustomBaseError):
    status_code = 400
    default_message = 'Invalid request'


class AuthenticationError(CustomBaseError):
    status_code = 401
    default_message = 'You must be signed in to continue'


class PaymentRequiredError(CustomBaseError):
    status_code = 402
    default_message = 'Payment required'


class ForbiddenError(CustomBaseError):
    status_code = 403
    default_message = 'Forbidden'


class NotFoundError(CustomBaseError):
    status_code = 404
    default_message = 'No result for this search!'


class ConflictError(CustomBaseError):
    status_code = 409
    default_message = 'Conflict'


class BadGatewayError(CustomBaseError):
    status_code = 502
    default_message = 'Upstream service failed'
