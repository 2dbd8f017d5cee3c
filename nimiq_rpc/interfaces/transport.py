"""Transport protocol: JSON-RPC call abstraction."""
from typing import Any, Protocol


class Transport(Protocol):
    """Sends one named remote call and returns its raw ``result``.

    Implementations raise :class:`~nimiq_rpc.errors.RemoteError` for a
    JSON-RPC error object and :class:`~nimiq_rpc.errors.TransportError` for
    anything that prevents a well-formed response.
    """

    async def call(self, method: str, params: list[Any]) -> Any: ...
