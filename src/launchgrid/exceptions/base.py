"""Root of the launchgrid exception hierarchy."""

from typing import Optional


class LaunchGridError(Exception):
    """
    Base exception for launchgrid.

    Every error carries two messages: ``user_message`` is what the CLI
    prints, ``technical_message`` is what goes to the log. ``recoverable``
    tells callers whether retrying (after following ``recovery_hint``)
    can succeed; placement bugs such as overlapping devices are not
    recoverable, unplugged devices are.
    """

    def __init__(
        self,
        user_message: str,
        technical_message: Optional[str] = None,
        recoverable: bool = False,
        recovery_hint: Optional[str] = None,
    ):
        super().__init__(user_message)
        self.user_message = user_message
        self.technical_message = technical_message or user_message
        self.recoverable = recoverable
        self.recovery_hint = recovery_hint

    def __str__(self) -> str:
        return self.user_message

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.technical_message!r})"

    def get_full_message(self) -> str:
        """User message followed by the recovery hint, if any."""
        if not self.recovery_hint:
            return self.user_message
        return f"{self.user_message}\n\nSuggestion: {self.recovery_hint}"
