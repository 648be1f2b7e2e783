"""
Domain layer exceptions.

These exceptions represent domain-level errors that occur when
rules are violated or invariants are broken.
"""


class DomainError(Exception):
    """
    Base exception for all domain errors.

    All domain exceptions should inherit from this class
    so they can be caught and handled uniformly.
    """

    def __init__(self, message: str, details: dict[str, object] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message


class InvalidTransitionError(DomainError):
    """
    Raised when a state machine is asked for a transition it does not allow.

    Example: Grading a practice round before a guess was typed.
    """

    def __init__(self, machine: str, source: str, target: str, reason: str | None = None) -> None:
        message = reason or f"{machine} cannot move from {source} to {target}"
        super().__init__(message, {"machine": machine, "source": source, "target": target})
        self.machine = machine
        self.source = source
        self.target = target
