"""Typed client for the node's JSON-RPC interface."""
from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Mapping

from . import catalog
from .config import ClientConfig
from .decoder import decode_result
from .encoder import encode_params
from .errors import RemoteError
from .interfaces.transport import Transport
from .models import (
    Account,
    AnyTransaction,
    Block,
    FullBlock,
    OutgoingTransaction,
    PeerInfo,
    PeerState,
    Syncing,
    Transaction,
    TransactionReceipt,
    Wallet,
    Work,
)
from .transport import HttpTransport

logger = logging.getLogger(__name__)


class NimiqClient:
    """Typed facade over a JSON-RPC transport.

    Every operation goes through :meth:`call`, which looks the operation up
    in the catalog, encodes the arguments, performs the remote call and
    decodes the result. The client keeps no mutable state, so calls may run
    concurrently.

    Example:
        >>> client = NimiqClient(ClientConfig(url="http://127.0.0.1:8648"))
        >>> height = await client.block_number()
    """

    def __init__(
        self, config: ClientConfig, transport: Transport | None = None
    ) -> None:
        self.config = config

        headers: dict[str, str] = {}
        authorization = config.authorization_header()
        if authorization is not None:
            headers["Authorization"] = authorization
        self._headers: Mapping[str, str] = MappingProxyType(headers)

        if transport is None:
            transport = HttpTransport(
                config.url, headers=self._headers, timeout=config.timeout
            )
        self._transport = transport

    @property
    def headers(self) -> Mapping[str, str]:
        """Headers attached to every request (read-only)."""
        return self._headers

    async def call(self, operation: str, *args: Any) -> Any:
        """Run a catalog operation by name.

        Raises:
            UnknownOperationError: Unknown operation.
            EncodingError: Arguments do not fit the declared parameters.
            TransportError: The request could not be completed.
            RemoteError: The node returned a JSON-RPC error.
            DecodeError: The result does not match the declared shape.
        """
        spec = catalog.lookup(operation)
        params = encode_params(spec, args)

        logger.debug(
            "Calling %s (%s) with %d param(s)", operation, spec.wire_method, len(params)
        )
        try:
            raw = await self._transport.call(spec.wire_method, params)
        except RemoteError as e:
            logger.warning("%s failed on node: %s", spec.wire_method, e)
            raise

        return decode_result(spec, raw)

    # ------------------------------------------------------------------
    # Chain and blocks
    # ------------------------------------------------------------------

    async def block_number(self) -> int:
        return await self.call("block_number")

    async def consensus(self) -> str:
        return await self.call("consensus")

    async def syncing(self) -> Syncing:
        return await self.call("syncing")

    async def get_block_by_hash(
        self, block_hash: str, full_transactions: bool = False
    ) -> Block | None:
        return await self.call("get_block_by_hash", block_hash, full_transactions)

    async def get_block_by_number(
        self, block_number: int, full_transactions: bool = False
    ) -> Block | None:
        return await self.call("get_block_by_number", block_number, full_transactions)

    async def get_block_transaction_count_by_hash(self, block_hash: str) -> int:
        return await self.call("get_block_transaction_count_by_hash", block_hash)

    async def get_block_transaction_count_by_number(self, block_number: int) -> int:
        return await self.call("get_block_transaction_count_by_number", block_number)

    # ------------------------------------------------------------------
    # Accounts and wallets
    # ------------------------------------------------------------------

    async def accounts(self) -> tuple[Account, ...]:
        return await self.call("accounts")

    async def create_account(self) -> Wallet:
        return await self.call("create_account")

    async def get_account(self, address: str) -> Account:
        return await self.call("get_account", address)

    async def get_balance(self, address: str) -> int:
        return await self.call("get_balance", address)

    # ------------------------------------------------------------------
    # Transactions
    # ------------------------------------------------------------------

    async def create_raw_transaction(self, transaction: OutgoingTransaction) -> str:
        return await self.call("create_raw_transaction", transaction)

    async def send_raw_transaction(self, raw_transaction: str) -> str:
        return await self.call("send_raw_transaction", raw_transaction)

    async def send_transaction(self, transaction: OutgoingTransaction) -> str:
        return await self.call("send_transaction", transaction)

    async def get_transaction_by_block_hash_and_index(
        self, block_hash: str, index: int
    ) -> Transaction | None:
        return await self.call(
            "get_transaction_by_block_hash_and_index", block_hash, index
        )

    async def get_transaction_by_block_number_and_index(
        self, block_number: int, index: int
    ) -> Transaction | None:
        return await self.call(
            "get_transaction_by_block_number_and_index", block_number, index
        )

    async def get_transaction_by_hash(
        self, transaction_hash: str
    ) -> AnyTransaction | None:
        return await self.call("get_transaction_by_hash", transaction_hash)

    async def get_transaction_receipt(
        self, transaction_hash: str
    ) -> TransactionReceipt | None:
        return await self.call("get_transaction_receipt", transaction_hash)

    async def get_transactions_by_address(
        self, address: str, limit: int = 1000
    ) -> tuple[AnyTransaction, ...]:
        return await self.call("get_transactions_by_address", address, limit)

    async def mempool_content(self) -> tuple[str, ...]:
        return await self.call("mempool_content")

    async def min_fee_per_byte(self) -> int:
        return await self.call("min_fee_per_byte")

    async def min_fee_per_byte_with_update(self, fee: int) -> int:
        return await self.call("min_fee_per_byte_with_update", fee)

    # ------------------------------------------------------------------
    # Mining
    # ------------------------------------------------------------------

    async def mining(self) -> bool:
        return await self.call("mining")

    async def hashrate(self) -> float:
        return await self.call("hashrate")

    async def miner_address(self) -> str:
        return await self.call("miner_address")

    async def miner_threads(self) -> int:
        return await self.call("miner_threads")

    async def miner_threads_with_update(self, threads: int) -> int:
        return await self.call("miner_threads_with_update", threads)

    async def get_work(self) -> Work:
        return await self.call("get_work")

    async def get_block_template(self) -> FullBlock:
        return await self.call("get_block_template")

    async def submit_block(self, full_block: str) -> None:
        return await self.call("submit_block", full_block)

    async def pool_confirmed_balance(self) -> int:
        return await self.call("pool_confirmed_balance")

    async def pool_connection_state(self) -> int:
        return await self.call("pool_connection_state")

    # ------------------------------------------------------------------
    # Network
    # ------------------------------------------------------------------

    async def peer_count(self) -> int:
        return await self.call("peer_count")

    async def peer_list(self) -> tuple[PeerInfo, ...]:
        return await self.call("peer_list")

    async def peer_state(self, peer_address: str) -> PeerState:
        return await self.call("peer_state", peer_address)

    async def peer_state_with_update(
        self, peer_address: str, command: str
    ) -> PeerState:
        return await self.call("peer_state_with_update", peer_address, command)

    # ------------------------------------------------------------------
    # Node administration
    # ------------------------------------------------------------------

    async def log(self, tag: str, level: str) -> bool:
        return await self.call("log", tag, level)

    async def get_constant(self, name: str) -> int:
        return await self.call("get_constant", name)

    async def set_constant(self, name: str, value: int) -> int:
        return await self.call("set_constant", name, value)

    async def reset_constant(self, name: str) -> int:
        return await self.call("reset_constant", name)
