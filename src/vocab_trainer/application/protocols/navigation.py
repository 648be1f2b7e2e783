"""Protocols for the host view: routing and user confirmation."""

from typing import Protocol


class Navigator(Protocol):
    """Moves the user to another view."""

    def navigate(self, path: str) -> None: ...


class Confirmer(Protocol):
    """Asks the user a yes/no question before a destructive action."""

    def confirm(self, message: str) -> bool: ...
