"""Typed async client for a Nimiq node's JSON-RPC interface."""
from .catalog import CATALOG, MethodSpec, Param
from .client import NimiqClient
from .config import ClientConfig, CredentialsConfig, load_config
from .errors import (
    DecodeError,
    EncodingError,
    NimiqRpcError,
    RemoteError,
    TransportError,
    UnknownOperationError,
)
from .models import (
    BasicAccount,
    Block,
    BlockBody,
    BlockHeader,
    FullBlock,
    HtlcAccount,
    OutgoingTransaction,
    PeerInfo,
    PeerState,
    SyncProgress,
    SyncState,
    Transaction,
    TransactionDetails,
    TransactionReceipt,
    VestingAccount,
    Wallet,
    Work,
)

__all__ = [
    "CATALOG",
    "MethodSpec",
    "Param",
    "NimiqClient",
    "ClientConfig",
    "CredentialsConfig",
    "load_config",
    "NimiqRpcError",
    "TransportError",
    "RemoteError",
    "EncodingError",
    "DecodeError",
    "UnknownOperationError",
    "BasicAccount",
    "VestingAccount",
    "HtlcAccount",
    "Block",
    "BlockHeader",
    "BlockBody",
    "FullBlock",
    "Transaction",
    "TransactionDetails",
    "TransactionReceipt",
    "OutgoingTransaction",
    "SyncState",
    "SyncProgress",
    "PeerInfo",
    "PeerState",
    "Wallet",
    "Work",
]
