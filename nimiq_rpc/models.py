"""Domain models: all frozen (immutable), one per node response shape.

Every field declares its wire key and shape. Optional fields have no
default; the decoder passes ``None`` when the node leaves them out.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .shapes import (
    BOOL,
    I64,
    STR,
    U8,
    U16,
    U32,
    U64,
    Into,
    ListOf,
    OneOf,
    Record,
    SequenceOf,
    wire,
)

# ---------------------------------------------------------------------------
# Accounts
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class BasicAccount:
    id: str = wire("id", STR)
    address: str = wire("address", STR)
    balance: int = wire("balance", U64)
    type: int = wire("type", U8)


@dataclass(frozen=True)
class VestingAccount(BasicAccount):
    """Vesting contract: balance unlocks in steps for ``owner``."""

    owner: str = wire("owner", STR)
    owner_address: str = wire("ownerAddress", STR)
    vesting_start: int = wire("vestingStart", U64)
    vesting_step_blocks: int = wire("vestingStepBlocks", U64)
    vesting_step_amount: int = wire("vestingStepAmount", U64)
    vesting_total_amount: int = wire("vestingTotalAmount", U64)


@dataclass(frozen=True)
class HtlcAccount(BasicAccount):
    """Hashed time-locked contract between ``sender`` and ``recipient``."""

    sender: str = wire("sender", STR)
    sender_address: str = wire("senderAddress", STR)
    recipient: str = wire("recipient", STR)
    recipient_address: str = wire("recipientAddress", STR)
    hash_root: str = wire("hashRoot", STR)
    hash_algorithm: int = wire("hashAlgorithm", U8)
    hash_count: int = wire("hashCount", U8)
    timeout: int = wire("timeout", U64)
    total_amount: int = wire("totalAmount", U64)


Account = Union[VestingAccount, HtlcAccount, BasicAccount]

# Contract variants first: their required fields are a superset of the
# basic ones, so a basic-first order would never yield a contract.
ACCOUNT = OneOf(
    "Account",
    (Record(VestingAccount), Record(HtlcAccount), Record(BasicAccount)),
)

# ---------------------------------------------------------------------------
# Transactions
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Transaction:
    """Transaction at a known position in a block."""

    hash: str = wire("hash", STR)
    block_hash: str = wire("blockHash", STR)
    block_number: int = wire("blockNumber", U64)
    timestamp: int = wire("timestamp", U64)
    confirmations: int = wire("confirmations", U64)
    transaction_index: int = wire("transactionIndex", I64)
    from_: str = wire("from", STR)
    from_address: str = wire("fromAddress", STR)
    to: str = wire("to", STR)
    to_address: str = wire("toAddress", STR)
    value: int = wire("value", U64)
    fee: int = wire("fee", U64)
    flags: int = wire("flags", U32)
    data: str | None = wire("data", STR, optional=True)
    proof: str | None = wire("proof", STR, optional=True)


@dataclass(frozen=True)
class TransactionDetails:
    """Transaction looked up by hash or address; may carry an inclusion proof."""

    hash: str = wire("hash", STR)
    block_hash: str = wire("blockHash", STR)
    block_number: int = wire("blockNumber", U64)
    timestamp: int = wire("timestamp", U64)
    confirmations: int = wire("confirmations", U64)
    from_: str = wire("from", STR)
    from_address: str = wire("fromAddress", STR)
    to: str = wire("to", STR)
    to_address: str = wire("toAddress", STR)
    value: int = wire("value", U64)
    fee: int = wire("fee", U64)
    flags: int = wire("flags", U32)
    data: str | None = wire("data", STR, optional=True)
    proof: str | None = wire("proof", STR, optional=True)


AnyTransaction = Union[Transaction, TransactionDetails]

# Transaction requires transactionIndex; everything else falls through.
TRANSACTION_RECORD = OneOf(
    "TransactionRecord", (Record(Transaction), Record(TransactionDetails))
)

# Hashes first: an empty list is reported as the light form. Full elements
# resolve one by one, so a block may list transactions without an index.
TRANSACTION_SEQUENCE = SequenceOf("TransactionSequence", (STR, TRANSACTION_RECORD))


@dataclass(frozen=True)
class TransactionReceipt:
    transaction_hash: str = wire("transactionHash", STR)
    transaction_index: int = wire("transactionIndex", I64)
    block_number: int = wire("blockNumber", U64)
    block_hash: str = wire("blockHash", STR)
    confirmations: int = wire("confirmations", U64)
    timestamp: int = wire("timestamp", U64)


@dataclass(frozen=True)
class OutgoingTransaction:
    """Transaction to be signed by the node (request only)."""

    from_: str = wire("from", STR)
    to: str = wire("to", STR)
    value: int = wire("value", U64)
    fee: int = wire("fee", U32)


# ---------------------------------------------------------------------------
# Blocks
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Block:
    """Block with either transaction hashes or full transactions.

    ``transactions`` is a tuple of ``str`` (light form) or a tuple of
    :class:`Transaction` or :class:`TransactionDetails` (full form); never
    hashes mixed with objects.
    """

    number: int = wire("number", U64)
    hash: str = wire("hash", STR)
    pow: str = wire("pow", STR)
    parent_hash: str = wire("parentHash", STR)
    nonce: int = wire("nonce", U64)
    body_hash: str = wire("bodyHash", STR)
    accounts_hash: str = wire("accountsHash", STR)
    miner: str = wire("miner", STR)
    miner_address: str = wire("minerAddress", STR)
    difficulty: str = wire("difficulty", STR)
    extra_data: str = wire("extraData", STR)
    size: int = wire("size", U32)
    timestamp: int = wire("timestamp", U64)
    transactions: tuple[str, ...] | tuple[AnyTransaction, ...] = wire(
        "transactions", TRANSACTION_SEQUENCE
    )


@dataclass(frozen=True)
class BlockHeader:
    version: int = wire("version", U16)
    prev_hash: str = wire("prevHash", STR)
    interlink_hash: str = wire("interlinkHash", STR)
    accounts_hash: str = wire("accountsHash", STR)
    n_bits: int = wire("nBits", U32)
    height: int = wire("height", U32)


@dataclass(frozen=True)
class BlockBody:
    hash: str = wire("hash", STR)
    miner_addr: str = wire("minerAddr", STR)
    extra_data: str = wire("extraData", STR)
    transactions: tuple[str, ...] = wire("transactions", ListOf(STR))
    merkle_hashes: tuple[str, ...] = wire("merkleHashes", ListOf(STR))
    pruned_accounts: tuple[str, ...] = wire("prunedAccounts", ListOf(STR))


@dataclass(frozen=True)
class FullBlock:
    """Block template returned for mining."""

    header: BlockHeader = wire("header", Record(BlockHeader))
    interlink: str = wire("interlink", STR)
    target: int = wire("target", U64)
    body: BlockBody = wire("body", Record(BlockBody))


@dataclass(frozen=True)
class Work:
    data: str = wire("data", STR)
    suffix: str = wire("suffix", STR)
    target: int = wire("target", U64)
    algorithm: str = wire("algorithm", STR)


# ---------------------------------------------------------------------------
# Sync status
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SyncState:
    """Bare boolean answer; ``False`` means the node is not syncing."""

    syncing: bool


@dataclass(frozen=True)
class SyncProgress:
    starting_block: int = wire("startingBlock", U64)
    current_block: int = wire("currentBlock", U64)
    highest_block: int = wire("highestBlock", U64)


Syncing = Union[SyncState, SyncProgress]

SYNCING = OneOf(
    "Syncing",
    (Into(BOOL, SyncState, "SyncState"), Record(SyncProgress)),
)

# ---------------------------------------------------------------------------
# Peers and wallets
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class PeerInfo:
    """Entry of the node's peer list; connection details only when connected."""

    id: str = wire("id", STR)
    address: str = wire("address", STR)
    address_state: int = wire("addressState", U64)
    connection_state: int | None = wire("connectionState", U64, optional=True)
    version: int | None = wire("version", U64, optional=True)
    time_offset: int | None = wire("timeOffset", I64, optional=True)
    head_hash: str | None = wire("headHash", STR, optional=True)
    latency: int | None = wire("latency", U64, optional=True)
    rx: int | None = wire("rx", U64, optional=True)
    tx: int | None = wire("tx", U64, optional=True)


@dataclass(frozen=True)
class PeerState:
    id: str = wire("id", STR)
    address: str = wire("address", STR)
    address_state: int = wire("addressState", U8)


@dataclass(frozen=True)
class Wallet:
    id: str = wire("id", STR)
    address: str = wire("address", STR)
    public_key: str = wire("publicKey", STR)
