"""Exception hierarchy for date parsing and date arithmetic."""


class DateTaskError(Exception):
    """Base exception for datetasks errors.

    Provides dual messaging: a sanitized user-facing message and
    internal details for logging.
    """

    def __init__(
        self,
        user_message: str,
        internal_details: str = "",
        wrapped: Exception | None = None,
    ) -> None:
        super().__init__(user_message)
        self.user_message = user_message
        self.internal_details = internal_details or user_message
        self.wrapped = wrapped

    def internal(self) -> str:
        return self.internal_details


class InvalidDateStringError(DateTaskError):
    """Raised when a string does not match the expected date grammar."""


class InvalidDateFieldError(DateTaskError):
    """Raised when a date or time field is out of range."""


class UnknownTimeZoneError(DateTaskError):
    """Raised when a time zone name is not recognized."""


class InvalidDateValueError(DateTaskError):
    """Raised when a value cannot be used as a date."""


# Sanitized user-facing error message constants
ERR_MSG_INVALID_DATE_STRING = "invalid date string"
ERR_MSG_INVALID_DATE_FIELD = "date field out of range"
ERR_MSG_UNKNOWN_TIME_ZONE = "unknown time zone"
ERR_MSG_INVALID_DATE_VALUE = "invalid date value"
