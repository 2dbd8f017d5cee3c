"""Shared test fixtures and sample node payloads."""
from __future__ import annotations

import textwrap
from pathlib import Path
from unittest.mock import AsyncMock

import pytest

from nimiq_rpc.client import NimiqClient
from nimiq_rpc.config import ClientConfig, CredentialsConfig
from nimiq_rpc.models import (
    BasicAccount,
    HtlcAccount,
    Transaction,
    TransactionDetails,
    VestingAccount,
)

# ---------------------------------------------------------------------------
# Sample payloads, shaped like real node answers
# ---------------------------------------------------------------------------

BASIC_ACCOUNT = {
    "id": "ad25610feb43d75307763d3f010822a757027429",
    "address": "NQ15 MLJN 23YB 8FBM 61TN 7LYG 2212 LVBG 4V19",
    "balance": 1200000,
    "type": 0,
}

VESTING_ACCOUNT = {
    **BASIC_ACCOUNT,
    "type": 1,
    "owner": "fd34ab7265a0e48c454ccbf4c9c61dfdf68f9a22",
    "ownerAddress": "NQ62 YLSA NUK5 L3J8 QHAC RFSC KHGV YPT8 Y6H2",
    "vestingStart": 1,
    "vestingStepBlocks": 259200,
    "vestingStepAmount": 2625000000000,
    "vestingTotalAmount": 2625000000000,
}

HTLC_ACCOUNT = {
    **BASIC_ACCOUNT,
    "type": 2,
    "sender": "d62d519b3478c63bdd729cf2ccb863178060c64a",
    "senderAddress": "NQ53 SQNM 36RL F333 PPBJ KKRC RE33 2X06 1HJA",
    "recipient": "f5ad55071730d3b9f05989481eefbda7324a44f8",
    "recipientAddress": "NQ41 XNNM A1QP 63AR KU2R H548 3UPV LUR4 MH7Q",
    "hashRoot": "df331b3c8f8a889703092ea05503779058b7f44e71bc57176378adde424ce922",
    "hashAlgorithm": 1,
    "hashCount": 1,
    "timeout": 1105605,
    "totalAmount": 5000000,
}

TRANSACTION = {
    "hash": "465a63b73aa0b9b54b777be9a585ea00b367a17898ad520e1f22cb2c986ff554",
    "blockHash": "dfe7d166f2c86bd10fa4b1f29cd06c13228f893167ce9826137c85758645572f",
    "blockNumber": 76415,
    "timestamp": 1528297445,
    "confirmations": 151281,
    "transactionIndex": 20,
    "from": "355b4fe2304a9c818b9f0c3c1aaaf4ad4f6a0279",
    "fromAddress": "NQ16 6MDL YQHG 9AE8 32UY 1GX1 MAPL MM7N L0KR",
    "to": "4f61c06feeb7971af6997125fe40d629c01af92f",
    "toAddress": "NQ05 9VGU 0TYE NXBH MVLR E4JY UG6N 5701 MY9F",
    "value": 2636710000,
    "fee": 0,
    "flags": 0,
}

TRANSACTION_DETAILS = {
    key: value for key, value in TRANSACTION.items() if key != "transactionIndex"
}
TRANSACTION_DETAILS["proof"] = "0123abcd"

BLOCK_HEADER_FIELDS = {
    "number": 76415,
    "hash": "dfe7d166f2c86bd10fa4b1f29cd06c13228f893167ce9826137c85758645572f",
    "pow": "00000000000000f6e1b6c9d80a62c2ebc2b8a8545e2bd1a3bed87acb1a0a4330",
    "parentHash": "0aa38ed4fcc7a3da9b2a79ef32d4f0eaebc9cd38d4dcb4bb6d9ca80a18ed2e9c",
    "nonce": 3145478,
    "bodyHash": "0d5a0fe0ec6c3ffbe6cf0ad9bf0ba0d8a9ad9e42fff9b3548a6eb31a65a87df1",
    "accountsHash": "6b1e1a7d6bb1a47d9b0ce1b08cbb0a00f0ea5a3cabb2e58d0aa96d7a73b3b1a1",
    "miner": "ad25610feb43d75307763d3f010822a757027429",
    "minerAddress": "NQ15 MLJN 23YB 8FBM 61TN 7LYG 2212 LVBG 4V19",
    "difficulty": "1.4574",
    "extraData": "",
    "size": 3017,
    "timestamp": 1528297445,
}

BLOCK_LIGHT = {**BLOCK_HEADER_FIELDS, "transactions": ["h1", "h2"]}
BLOCK_FULL = {**BLOCK_HEADER_FIELDS, "transactions": [TRANSACTION]}


# ---------------------------------------------------------------------------
# Expected decoded values
# ---------------------------------------------------------------------------


def expected_basic_account() -> BasicAccount:
    return BasicAccount(
        id=BASIC_ACCOUNT["id"],
        address=BASIC_ACCOUNT["address"],
        balance=1200000,
        type=0,
    )


def expected_vesting_account() -> VestingAccount:
    return VestingAccount(
        id=BASIC_ACCOUNT["id"],
        address=BASIC_ACCOUNT["address"],
        balance=1200000,
        type=1,
        owner=VESTING_ACCOUNT["owner"],
        owner_address=VESTING_ACCOUNT["ownerAddress"],
        vesting_start=1,
        vesting_step_blocks=259200,
        vesting_step_amount=2625000000000,
        vesting_total_amount=2625000000000,
    )


def expected_htlc_account() -> HtlcAccount:
    return HtlcAccount(
        id=BASIC_ACCOUNT["id"],
        address=BASIC_ACCOUNT["address"],
        balance=1200000,
        type=2,
        sender=HTLC_ACCOUNT["sender"],
        sender_address=HTLC_ACCOUNT["senderAddress"],
        recipient=HTLC_ACCOUNT["recipient"],
        recipient_address=HTLC_ACCOUNT["recipientAddress"],
        hash_root=HTLC_ACCOUNT["hashRoot"],
        hash_algorithm=1,
        hash_count=1,
        timeout=1105605,
        total_amount=5000000,
    )


def expected_transaction() -> Transaction:
    return Transaction(
        hash=TRANSACTION["hash"],
        block_hash=TRANSACTION["blockHash"],
        block_number=76415,
        timestamp=1528297445,
        confirmations=151281,
        transaction_index=20,
        from_=TRANSACTION["from"],
        from_address=TRANSACTION["fromAddress"],
        to=TRANSACTION["to"],
        to_address=TRANSACTION["toAddress"],
        value=2636710000,
        fee=0,
        flags=0,
        data=None,
        proof=None,
    )


def expected_transaction_details() -> TransactionDetails:
    return TransactionDetails(
        hash=TRANSACTION["hash"],
        block_hash=TRANSACTION["blockHash"],
        block_number=76415,
        timestamp=1528297445,
        confirmations=151281,
        from_=TRANSACTION["from"],
        from_address=TRANSACTION["fromAddress"],
        to=TRANSACTION["to"],
        to_address=TRANSACTION["toAddress"],
        value=2636710000,
        fee=0,
        flags=0,
        data=None,
        proof="0123abcd",
    )


# ---------------------------------------------------------------------------
# Client fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def sample_config() -> ClientConfig:
    return ClientConfig(url="http://127.0.0.1:8648", timeout=10)


@pytest.fixture()
def sample_credentials_config() -> ClientConfig:
    return ClientConfig(
        url="https://node.example.com:8648",
        timeout=10,
        credentials=CredentialsConfig(username="alice", password="s3cret"),
    )


@pytest.fixture()
def mock_transport() -> AsyncMock:
    transport = AsyncMock()
    transport.call.return_value = None
    return transport


@pytest.fixture()
def client(sample_config: ClientConfig, mock_transport: AsyncMock) -> NimiqClient:
    return NimiqClient(sample_config, transport=mock_transport)


# ---------------------------------------------------------------------------
# Config YAML fixture
# ---------------------------------------------------------------------------

SAMPLE_YAML = textwrap.dedent("""\
    node:
      url: "https://node.example.com:8648"
      timeout: 10
      username: "alice"
      password: "s3cret"
""")


@pytest.fixture()
def sample_yaml_path(tmp_path: Path) -> Path:
    cfg_file = tmp_path / "config.yaml"
    cfg_file.write_text(SAMPLE_YAML)
    return cfg_file
