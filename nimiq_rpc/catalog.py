"""Method catalog: the single table of supported node operations.

Each entry names the operation (snake_case, as exposed by the client), the
exact wire method, its positional parameters and the shape of its result.
Overloads such as ``miner_threads`` / ``miner_threads_with_update`` share a
wire method and differ only in arity.
"""
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from .errors import UnknownOperationError
from .models import (
    ACCOUNT,
    SYNCING,
    TRANSACTION_RECORD,
    Block,
    FullBlock,
    OutgoingTransaction,
    PeerInfo,
    PeerState,
    Transaction,
    TransactionReceipt,
    Wallet,
    Work,
)
from .shapes import (
    BOOL,
    FLOAT,
    I8,
    I64,
    NULL,
    STR,
    U8,
    U16,
    U32,
    U64,
    Choice,
    ListOf,
    Nullable,
    Record,
    Shape,
)

LOG_LEVELS = ("trace", "verbose", "debug", "info", "warn", "error", "assert")
PEER_COMMANDS = ("connect", "disconnect", "ban", "unban", "fail")


@dataclass(frozen=True)
class Param:
    name: str
    shape: Shape


@dataclass(frozen=True)
class MethodSpec:
    operation: str
    wire_method: str
    params: tuple[Param, ...]
    result: Shape
    description: str = ""

    @property
    def arity(self) -> int:
        return len(self.params)


def _method(
    operation: str,
    wire_method: str,
    result: Shape,
    *params: Param,
    description: str = "",
) -> MethodSpec:
    return MethodSpec(operation, wire_method, tuple(params), result, description)


_BLOCK_HASH = Param("block_hash", STR)
_BLOCK_NUMBER = Param("block_number", U32)
_TX_HASH = Param("transaction_hash", STR)
_ADDRESS = Param("address", STR)
_OUTGOING = Param("transaction", Record(OutgoingTransaction))
_CONSTANT = Param("name", STR)

_METHODS: tuple[MethodSpec, ...] = (
    _method("accounts", "accounts", ListOf(ACCOUNT),
            description="Accounts owned by the node's wallet."),
    _method("block_number", "blockNumber", U32,
            description="Height of the most recent block."),
    _method("consensus", "consensus", STR,
            description="Consensus state; 'established' when healthy."),
    _method("create_account", "createAccount", Record(Wallet),
            description="Create an account and store its key in the node."),
    _method("create_raw_transaction", "createRawTransaction", STR, _OUTGOING,
            description="Create and sign a transaction without sending it."),
    _method("get_account", "getAccount", ACCOUNT, _ADDRESS,
            description="Account details for an address."),
    _method("get_balance", "getBalance", U64, _ADDRESS,
            description="Balance of an address in the smallest unit."),
    _method("get_block_by_hash", "getBlockByHash", Nullable(Record(Block)),
            _BLOCK_HASH, Param("full_transactions", BOOL),
            description="Block by hash, or None when unknown."),
    _method("get_block_by_number", "getBlockByNumber", Nullable(Record(Block)),
            _BLOCK_NUMBER, Param("full_transactions", BOOL),
            description="Block by height, or None when unknown."),
    _method("get_block_template", "getBlockTemplate", Record(FullBlock),
            description="Template for mining the next block."),
    _method("get_block_transaction_count_by_hash",
            "getBlockTransactionCountByHash", U16, _BLOCK_HASH,
            description="Number of transactions in a block, by hash."),
    _method("get_block_transaction_count_by_number",
            "getBlockTransactionCountByNumber", U16, _BLOCK_NUMBER,
            description="Number of transactions in a block, by height."),
    _method("get_transaction_by_block_hash_and_index",
            "getTransactionByBlockHashAndIndex", Nullable(Record(Transaction)),
            _BLOCK_HASH, Param("index", U16),
            description="Transaction at a position in a block, by block hash."),
    _method("get_transaction_by_block_number_and_index",
            "getTransactionByBlockNumberAndIndex", Nullable(Record(Transaction)),
            _BLOCK_NUMBER, Param("index", U16),
            description="Transaction at a position in a block, by height."),
    _method("get_transaction_by_hash", "getTransactionByHash",
            Nullable(TRANSACTION_RECORD), _TX_HASH,
            description="Transaction by hash, or None when unknown."),
    _method("get_transaction_receipt", "getTransactionReceipt",
            Nullable(Record(TransactionReceipt)), _TX_HASH,
            description="Receipt of a mined transaction, or None."),
    _method("get_transactions_by_address", "getTransactionsByAddress",
            ListOf(TRANSACTION_RECORD), _ADDRESS, Param("limit", U16),
            description="Latest transactions sent or received by an address."),
    _method("get_work", "getWork", Record(Work),
            description="Proof-of-work instructions for external miners."),
    _method("hashrate", "hashrate", FLOAT,
            description="Local mining hash rate in hashes per second."),
    _method("log", "log", BOOL, Param("tag", STR), Param("level", Choice(LOG_LEVELS)),
            description="Set the node's log level, globally for tag '*'."),
    _method("mempool_content", "mempoolContent", ListOf(STR),
            description="Hashes of the transactions in the mempool."),
    _method("miner_address", "minerAddress", STR,
            description="Address mining rewards are paid to."),
    _method("miner_threads", "minerThreads", U8,
            description="Number of CPU threads used for mining."),
    _method("miner_threads_with_update", "minerThreads", U16, Param("threads", U16),
            description="Set the number of mining threads."),
    _method("min_fee_per_byte", "minFeePerByte", U32,
            description="Minimum fee per byte accepted by the mempool."),
    _method("min_fee_per_byte_with_update", "minFeePerByte", U32, Param("fee", U32),
            description="Set the minimum fee per byte."),
    _method("mining", "mining", BOOL,
            description="Whether the node is mining."),
    _method("peer_count", "peerCount", I8,
            description="Number of connected peers."),
    _method("peer_list", "peerList", ListOf(Record(PeerInfo)),
            description="All peers known to the node."),
    _method("peer_state", "peerState", Record(PeerState), Param("peer_address", STR),
            description="State of a single peer."),
    _method("peer_state_with_update", "peerState", Record(PeerState),
            Param("peer_address", STR), Param("command", Choice(PEER_COMMANDS)),
            description="Connect, disconnect, ban or unban a peer."),
    _method("pool_confirmed_balance", "poolConfirmedBalance", U64,
            description="Confirmed mining pool balance."),
    _method("pool_connection_state", "poolConnectionState", U8,
            description="Mining pool connection state."),
    _method("send_raw_transaction", "sendRawTransaction", STR,
            Param("raw_transaction", STR),
            description="Broadcast a signed, hex-encoded transaction."),
    _method("send_transaction", "sendTransaction", STR, _OUTGOING,
            description="Sign and broadcast a transaction from a node account."),
    _method("submit_block", "submitBlock", NULL, Param("full_block", STR),
            description="Submit a hex-encoded mined block."),
    _method("syncing", "syncing", SYNCING,
            description="Sync progress, or a bare flag when not syncing."),
    _method("get_constant", "getConstant", I64, _CONSTANT,
            description="Value of a node constant."),
    _method("set_constant", "setConstant", I64, _CONSTANT, Param("value", I64),
            description="Override a node constant."),
    _method("reset_constant", "resetConstant", I64, _CONSTANT,
            description="Restore a node constant to its default."),
)

CATALOG: Mapping[str, MethodSpec] = MappingProxyType(
    {spec.operation: spec for spec in _METHODS}
)


def lookup(operation: str) -> MethodSpec:
    """Return the catalog entry for ``operation``.

    Raises:
        UnknownOperationError: If the operation is not in the catalog.
    """
    try:
        return CATALOG[operation]
    except KeyError:
        raise UnknownOperationError(f"Unknown operation '{operation}'") from None
