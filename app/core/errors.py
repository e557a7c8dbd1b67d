"""Analytics error types.

Degenerate-but-valid data (empty windows, zero variance, zero chronic
load) never raises.  Only input that cannot be interpreted as the
expected entity does, before any computation runs.
"""


class AnalyticsInputError(ValueError):
    """Raised when a collection handed to the engine contains malformed items.

    Attributes:
        label: Name of the offending collection (e.g. "daily_loads")
        details: List of error detail strings
    """

    def __init__(self, label: str, details: list[str]):
        self.label = label
        self.details = details
        super().__init__(f"Invalid {label}: {'; '.join(details)}")
