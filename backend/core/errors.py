from __future__ import annotations


class WaitlistError(Exception):
    """Business rule failure that maps onto a single HTTP status."""

    status_code: int = 500

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail


class ValidationError(WaitlistError):
    status_code = 400


class ConflictError(WaitlistError):
    status_code = 409


class NotFoundError(WaitlistError):
    status_code = 404
