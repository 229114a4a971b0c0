"""Shared pytest fixtures for payment source tests."""

import copy
from collections.abc import Iterator
from typing import Any
from unittest.mock import patch

import pytest


REDIRECT_SOURCE: dict[str, Any] = {
    "id": "src_1Ab2Cd3Ef4Gh5Ij6",
    "object": "source",
    "amount": 1099,
    "client_secret": "src_client_secret_Zy9Xw8Vu7",
    "created": 1718447400,
    "currency": "eur",
    "flow": "redirect",
    "livemode": False,
    "metadata": {"order_id": "6735"},
    "owner": {
        "address": {
            "city": "Berlin",
            "country": "DE",
            "line1": "Alexanderplatz 1",
            "line2": None,
            "postal_code": "10178",
            "state": None,
        },
        "email": "jenny.rosen@example.com",
        "name": "Jenny Rosen",
        "phone": None,
        "verified_address": None,
        "verified_email": None,
        "verified_name": "Jenny Rosen",
        "verified_phone": None,
    },
    "redirect": {
        "return_url": "https://shop.example.com/return",
        "status": "pending",
        "url": "https://hooks.example.com/redirect/authenticate/src_1Ab2Cd3Ef4Gh5Ij6",
    },
    "status": "pending",
    "type": "sofort",
    "sofort": {
        "country": "DE",
        "bank_code": None,
        "bic": None,
        "statement_descriptor": None,
    },
    "usage": "single_use",
}

RECEIVER_SOURCE: dict[str, Any] = {
    "id": "src_7Kl8Mn9Op0Qr1St2",
    "object": "source",
    "amount": None,
    "client_secret": "src_client_secret_Ab1Cd2Ef3",
    "created": 1718447500,
    "currency": "usd",
    "flow": "receiver",
    "livemode": True,
    "metadata": {},
    "owner": {
        "address": None,
        "email": "amount_0@example.com",
        "name": None,
        "phone": None,
        "verified_address": None,
        "verified_email": None,
        "verified_name": None,
        "verified_phone": None,
    },
    "receiver": {
        "address": "110000000-test_52f5c3b5c4e1",
        "amount_charged": 0,
        "amount_received": 1000,
        "amount_returned": 0,
        "refund_attributes_method": "email",
        "refund_attributes_status": "missing",
    },
    "status": "chargeable",
    "type": "ach_credit_transfer",
    "ach_credit_transfer": {
        "account_number": "test_52f5c3b5c4e1",
        "routing_number": "110000000",
        "fingerprint": "ecpwEzmBOSMOqQTL",
        "bank_name": "TEST BANK",
        "swift_code": "TSTEZ122",
    },
    "usage": "reusable",
}

VERIFICATION_SOURCE: dict[str, Any] = {
    "id": "src_3Uv4Wx5Yz6Ab7Cd8",
    "object": "source",
    "amount": 500,
    "client_secret": "src_client_secret_Gh4Ij5Kl6",
    "created": 1718447600,
    "currency": "usd",
    "flow": "verification",
    "livemode": False,
    "metadata": None,
    "owner": None,
    "verification": {
        "attempts_remaining": 3,
        "status": "pending",
    },
    "status": "pending",
    "type": "ach_debit",
    "usage": "reusable",
}


@pytest.fixture
def redirect_payload() -> dict[str, Any]:
    """Redirect-flow source with a type-specific hash."""
    return copy.deepcopy(REDIRECT_SOURCE)


@pytest.fixture
def receiver_payload() -> dict[str, Any]:
    """Receiver-flow source with a type-specific hash."""
    return copy.deepcopy(RECEIVER_SOURCE)


@pytest.fixture
def verification_payload() -> dict[str, Any]:
    """Verification-flow source without a type-specific hash and a null owner."""
    return copy.deepcopy(VERIFICATION_SOURCE)


@pytest.fixture
def mock_decoder_logger() -> Iterator:
    """Patch the decoder's logger."""
    with patch("payment_sources.codec.decoder.logger") as mock_logger:
        yield mock_logger
