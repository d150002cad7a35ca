"""
Cancellation Tokens
Lets a view or game discard remote results that arrive after it was left.
"""


class CancellationToken:
    """One-way flag shared between the owner of some work and the work itself."""

    def __init__(self, reason: str = ""):
        self._cancelled = False
        self.reason = reason

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self, reason: str = "") -> None:
        if reason:
            self.reason = reason
        self._cancelled = True

    def __repr__(self) -> str:
        state = "cancelled" if self._cancelled else "active"
        return f"<CancellationToken {state} {self.reason!r}>"
