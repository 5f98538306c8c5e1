"""
Shared fixtures: credentials, canned API bodies and an httpx client
backed by MockTransport that records every request it sees.
"""

import json
from typing import Any, Callable, List

import httpx
import pytest

from kassa_connect.kassa import Kassa

SUCCESS_BODY = {
    "id": "0",
    "status": "pending",
    "paid": False,
    "amount": {"value": "666.00", "currency": "RUB"},
    "confirmation": {
        "type": "redirect",
        "confirmation_url": "https://example/checkout?orderId=0",
    },
    "created_at": "2021-08-13T14:13:46.45Z",
    "description": "d",
    "recipient": {"account_id": "1", "gateway_id": "2"},
    "refundable": False,
    "test": True,
}

ERROR_BODY = {
    "type": "error",
    "id": "x",
    "code": "invalid_request",
    "description": "bad field",
    "parameter": "amount.value",
}

LIST_BODY = {
    "type": "list",
    "items": [
        {
            "id": "22e12f66-000f-5000-8000-18db351245c7",
            "status": "waiting_for_capture",
            "paid": True,
            "amount": {"value": "2.00", "currency": "RUB"},
            "created_at": "2018-07-18T10:51:18.139Z",
            "description": "Заказ №72",
            "expires_at": "2018-07-25T10:52:00.233Z",
            "metadata": {"order_id": "72"},
            "payment_method": {
                "type": "bank_card",
                "id": "22e12f66-000f-5000-8000-18db351245c7",
                "saved": False,
                "card": {
                    "first6": "555555",
                    "last4": "4444",
                    "expiry_month": "07",
                    "expiry_year": "2022",
                    "card_type": "MasterCard",
                    "issuer_country": "RU",
                    "issuer_name": "Sberbank",
                },
                "title": "Bank card *4444",
            },
            "recipient": {"account_id": "100500", "gateway_id": "100700"},
            "refundable": False,
            "test": False,
        }
    ],
    "next_cursor": "37a5c87d-3984-51e8-a7f3-8de646d39ec15",
}


class Recorder:
    """Collects requests passed through a MockTransport."""

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def kassa() -> Kassa:
    return Kassa().set_shop_id("100500").set_secret_key("test_secret")


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture
def mock_client(recorder: Recorder) -> Callable[..., httpx.AsyncClient]:
    """Factory: mock_client(body, status_code=200) -> AsyncClient answering with body."""

    def make(body: Any, status_code: int = 200) -> httpx.AsyncClient:
        def handler(request: httpx.Request) -> httpx.Response:
            recorder.requests.append(request)
            if isinstance(body, (bytes, str)):
                return httpx.Response(status_code, content=body)
            return httpx.Response(status_code, content=json.dumps(body).encode("utf-8"))

        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    return make
