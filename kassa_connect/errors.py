"""
Исключения клиента.

Транспортные ошибки (httpx.HTTPError) сюда не заворачиваются и пробрасываются как есть.
"""

from typing import Optional


class KassaError(Exception):
    """Base exception for all kassa_connect errors."""

    pass


class PaymentEncodeError(KassaError):
    """Raised when a payment cannot be turned into a request body. No request is sent."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"Cannot encode payment: {message}")


class PaymentDecodeError(KassaError):
    """Raised when a response body matches neither the error nor the success schema."""

    def __init__(self, message: str, status_code: Optional[int] = None, body: bytes = b"") -> None:
        self.message = message
        self.status_code = status_code
        self.body = body
        super().__init__(f"Cannot decode response (HTTP {status_code}): {message}")


class PaymentSubmittedError(KassaError):
    """Raised when a payment builder is touched after do()."""

    def __init__(self, idempotence_key: str) -> None:
        self.idempotence_key = idempotence_key
        super().__init__(f"Payment {idempotence_key!r} was already submitted")


class ApiError(KassaError):
    """Error envelope returned by the API ({"type": "error", ...})."""

    def __init__(
        self,
        type: str = "error",
        id: str = "",
        code: str = "",
        description: str = "",
        parameter: str = "",
    ) -> None:
        self.type = type
        self.id = id
        self.code = code
        self.description = description
        self.parameter = parameter
        super().__init__(f"api returned error: {description} (in parameter {parameter})")
