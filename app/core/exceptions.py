class AppError(Exception):
    """Base class for errors raised by the check-in workflow."""


class NotFoundError(AppError):
    error_code = "NOT_FOUND"


class UserNotFoundError(NotFoundError):
    error_code = "USER_NOT_FOUND"


class CheckinNotFoundError(NotFoundError):
    error_code = "CHECKIN_NOT_FOUND"


class InterventionNotFoundError(NotFoundError):
    error_code = "INTERVENTION_NOT_FOUND"


class NotificationError(AppError):
    """Crisis email could not be delivered. Never surfaced to API clients."""
