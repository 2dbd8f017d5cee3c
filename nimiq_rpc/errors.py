"""Error taxonomy: every failed call raises exactly one of these."""
from __future__ import annotations

from typing import Any


class NimiqRpcError(Exception):
    """Base class for all client errors."""


class TransportError(NimiqRpcError):
    """Connection failure, timeout, or malformed JSON-RPC envelope."""


class RemoteError(NimiqRpcError):
    """The node answered with a JSON-RPC error object."""

    def __init__(self, code: int, message: str, data: Any = None) -> None:
        self.code = code
        self.message = message
        self.data = data
        super().__init__(f"RPC Error {code}: {message}")


class EncodingError(NimiqRpcError):
    """A call argument cannot be represented in its declared wire type."""


class DecodeError(NimiqRpcError):
    """A result payload does not match any declared shape."""

    def __init__(self, message: str, path: str = "$") -> None:
        self.path = path
        super().__init__(f"{path}: {message}")


class UnknownOperationError(NimiqRpcError, KeyError):
    """The requested operation is not in the catalog."""

    __str__ = Exception.__str__
