"""Configuration exceptions."""

from behaviorgen.domain.exceptions.base import BehaviorGenError


class ConfigurationError(BehaviorGenError):
    """Invalid generator configuration.

    Attributes:
        key: Offending configuration key
        reason: Why the value is invalid (must not be empty)
    """

    def __init__(self, key: str, reason: str) -> None:
        # FAIL-FIRST validation
        if not key:
            raise ValueError("key must not be empty")
        if not reason:
            raise ValueError("reason must not be empty")

        self.key = key
        self.reason = reason
        super().__init__(f"Invalid configuration '{key}': {reason}")
