from decimal import Decimal
from typing import Any, Dict, Optional, Union

import httpx
from pydantic import ValidationError
from pydantic_core import PydanticSerializationError

from .consts import IDEMPOTENCE_HEADER, PAYMENTS_PATH
from .errors import PaymentEncodeError, PaymentSubmittedError
from .kassa import Kassa
from .logging import get_logger
from .responses import parse_response
from .schemas.payment import Confirmation, PaymentBody, PaymentResponse, format_amount
from .utils.http import endpoint, send

logger = get_logger(__name__)


class Payment:
    """
    Создание платежа (POST /payments), сборка цепочкой:

        resp = await (
            Payment()
            .set_kassa(kassa)
            .set_idempotence_key(str(uuid4()))
            .set_amount(666, "RUB")
            .set_capture(True)
            .set_confirmation(Confirmation(type=ConfirmationType.REDIRECT, return_url=url))
            .set_description("Order #1")
            .do()
        )

    Idempotence-Key: при повторе запроса с тем же ключом ЮKassa вернёт результат первого,
    поэтому для нового платежа нужен новый ключ (подойдёт uuid4), а для повтора
    того же платежа - прежний.

    do() вызывается один раз; после него объект заморожен.
    Один и тот же Payment не меняют из нескольких задач одновременно - это забота вызывающего.
    """

    def __init__(self) -> None:
        self.kassa: Optional[Kassa] = None
        self.idempotence_key: str = ""
        self.amount: Optional[Dict[str, Any]] = None
        self.capture: bool = False
        self.confirmation: Optional[Union[Confirmation, Dict[str, Any]]] = None
        self.description: str = ""
        self._submitted = False

    def _ensure_open(self) -> None:
        if self._submitted:
            raise PaymentSubmittedError(self.idempotence_key)

    def set_kassa(self, kassa: Kassa) -> "Payment":
        self._ensure_open()
        self.kassa = kassa
        return self

    def set_idempotence_key(self, key: str) -> "Payment":
        self._ensure_open()
        self.idempotence_key = key
        return self

    def set_amount(self, value: Union[int, Decimal, str], currency: str) -> "Payment":
        # Пример: set_amount(Decimal("500"), "RUB"); float не принимается
        self._ensure_open()
        self.amount = {"value": value, "currency": currency}
        return self

    def set_capture(self, capture: bool) -> "Payment":
        # True - списать сразу; False - захолдировать и подтвердить позже
        self._ensure_open()
        self.capture = capture
        return self

    def set_confirmation(self, confirmation: Union[Confirmation, Dict[str, Any]]) -> "Payment":
        self._ensure_open()
        self.confirmation = confirmation
        return self

    def set_description(self, description: str) -> "Payment":
        # Показывается в личном кабинете и пользователю при оплате, не длиннее 128 символов
        self._ensure_open()
        self.description = description
        return self

    @property
    def submitted(self) -> bool:
        return self._submitted

    def payload(self) -> PaymentBody:
        """Тело запроса из текущих полей. Можно вызывать до do(), чтобы посмотреть, что уйдёт."""
        if self.amount is None:
            raise PaymentEncodeError("amount is not set")
        if self.confirmation is None:
            raise PaymentEncodeError("confirmation is not set")
        try:
            return PaymentBody(
                amount=self.amount,
                capture=self.capture,
                confirmation=self.confirmation,
                description=self.description,
            )
        except ValidationError as e:
            raise PaymentEncodeError(str(e)) from e

    async def do(
        self,
        http_client: Optional[httpx.AsyncClient] = None,
        timeout_sec: Optional[float] = None,
        base_url: Optional[str] = None,
    ) -> PaymentResponse:
        """
        Отправляет платёж. Возвращает PaymentResponse либо бросает:
          PaymentEncodeError - запрос не собрать (до сети не доходим);
          ApiError           - ЮKassa ответила {"type": "error", ...};
          PaymentDecodeError - ответ не разобрать;
          httpx.HTTPError    - сеть/таймаут, как есть.
        Повторов внутри нет. base_url переопределяет settings.BASE_URL для этого вызова.
        """
        self._ensure_open()
        if self.kassa is None:
            raise PaymentEncodeError("kassa is not set")
        if not self.idempotence_key:
            raise PaymentEncodeError("idempotence key is not set")

        body = self.payload()
        try:
            content = body.model_dump_json().encode("utf-8")
        except PydanticSerializationError as e:
            raise PaymentEncodeError(str(e)) from e
        self._submitted = True

        logger.debug(
            "creating_payment",
            idempotence_key=self.idempotence_key,
            amount=format_amount(body.amount.value),
            currency=body.amount.currency,
            capture=body.capture,
            confirmation=str(body.confirmation.type),
        )
        resp = await send(
            "POST",
            endpoint(PAYMENTS_PATH, base_url),
            auth=self.kassa.auth(),
            headers={IDEMPOTENCE_HEADER: self.idempotence_key, "Content-Type": "application/json"},
            content=content,
            http_client=http_client,
            timeout_sec=timeout_sec,
        )
        result = parse_response(resp.content, PaymentResponse, status_code=resp.status_code)
        logger.debug("payment_created", payment_id=result.id, status=str(result.status), test=result.test)
        return result
