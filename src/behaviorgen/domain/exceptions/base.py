"""Base exceptions for behaviorgen domain."""


class BehaviorGenError(Exception):
    """Root exception for all behaviorgen errors.

    All domain exceptions inherit from this.
    Allows catching all behaviorgen-specific errors.
    """
