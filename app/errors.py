class SalesAnalyticsError(ValueError):
    """Base class for every error raised by the analytics engine."""


class ValidationError(SalesAnalyticsError):
    """Top-level input is missing, empty or malformed."""

    def __init__(self, kind: str, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message


class InvalidOptionError(SalesAnalyticsError):
    def __init__(self, option: str, reason: str = "must be callable") -> None:
        super().__init__(f"Option '{option}' {reason}")
        self.option = option


class InvalidInputError(SalesAnalyticsError):
    def __init__(self, message: str = "Line item and product are both required") -> None:
        super().__init__(message)


class NonNumericFieldError(SalesAnalyticsError):
    def __init__(self, field: str, value: object = None) -> None:
        super().__init__(f"Field '{field}' must be a finite number, got {value!r}")
        self.field = field
        self.value = value
