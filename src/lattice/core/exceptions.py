# lattice/core/exceptions.py
from __future__ import annotations


class LatticeError(Exception):
    pass


class InvalidParameterError(LatticeError, ValueError):
    """A value handed to a builder setter or API function failed validation."""

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        super().__init__(f"invalid parameter: {field} {message}")


class MissingPropertyError(LatticeError, ValueError):
    """``build()`` was called before a required property was set."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"missing property: {field} is a required property")


class UnknownApiError(LatticeError, ValueError):
    pass


class TransportError(LatticeError):
    """The HTTP request failed, either on the network or with an error status."""

    def __init__(self, method: str, url: str, status_code: int | None = None, reason: str = "") -> None:
        self.method = method
        self.url = url
        self.status_code = status_code
        msg = f"{method} {url} failed"
        if status_code is not None:
            msg += f" with status {status_code}"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)
