class SalonError(Exception):
    """Base class for errors that map onto an HTTP response."""
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInputError(SalonError):
    status_code = 400


class IntegrityViolationError(SalonError):
    """Computed values disagree with submitted ones, or a unique field is taken."""
    status_code = 400


class AuthenticationError(SalonError):
    status_code = 401


class NotFoundError(SalonError):
    status_code = 404


class PageRedirect(Exception):
    """Raised by the page guard to send the browser somewhere else."""

    def __init__(self, location: str):
        super().__init__(location)
        self.location = location
