import json
from typing import Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from .errors import ApiError, PaymentDecodeError
from .logging import get_logger
from .schemas.payment import ApiErrorResponse

logger = get_logger(__name__)

ERROR_TYPE = "error"

M = TypeVar("M", bound=BaseModel)


def parse_response(raw: bytes, model: Type[M], status_code: Optional[int] = None) -> M:
    """
    Разбор ответа API.

    ЮKassa на любой запрос отдаёт один JSON-объект, и надёжно отличить ошибку можно
    только по type == "error". Поэтому:
      1. тело целиком -> JSON-объект (иначе PaymentDecodeError);
      2. объект -> ApiErrorResponse; если даже он не собирается - PaymentDecodeError;
      3. type == "error" -> ApiError, успешную схему не трогаем;
      4. иначе тот же объект -> model (ошибка валидации -> PaymentDecodeError).
    """
    try:
        data = json.loads(raw)
    except ValueError as e:
        raise PaymentDecodeError(f"body is not JSON: {e}", status_code=status_code, body=raw) from e
    if not isinstance(data, dict):
        raise PaymentDecodeError(
            f"expected JSON object, got {type(data).__name__}", status_code=status_code, body=raw
        )

    try:
        envelope = ApiErrorResponse.model_validate(data)
    except ValidationError as e:
        raise PaymentDecodeError(f"error envelope mismatch: {e}", status_code=status_code, body=raw) from e

    if envelope.type == ERROR_TYPE:
        logger.debug(
            "kassa_api_error",
            status_code=status_code,
            error_id=envelope.id,
            code=envelope.code,
            parameter=envelope.parameter,
        )
        raise ApiError(**envelope.model_dump())

    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise PaymentDecodeError(
            f"{model.__name__} mismatch: {e}", status_code=status_code, body=raw
        ) from e
