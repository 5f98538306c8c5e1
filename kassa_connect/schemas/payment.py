from datetime import datetime
from decimal import Decimal, ROUND_HALF_EVEN, localcontext
from enum import Enum
from typing import Optional, Any, Dict, List

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    SerializerFunctionWrapHandler,
    field_serializer,
    field_validator,
    model_serializer,
    model_validator,
)

CENTS = Decimal("0.01")
DESCRIPTION_MAX_LEN = 128


def format_amount(value: Decimal) -> str:
    """
    Сумма строкой ровно с двумя знаками после точки: 666 -> "666.00", 666.5 -> "666.50".
    Лишние знаки округляются по-банковски (ROUND_HALF_EVEN).
    """
    with localcontext() as ctx:
        # quantize падает с InvalidOperation, если цифр больше, чем prec;
        # +4: целая часть, два знака копеек и возможный перенос разряда (99.995 -> 100.00)
        ctx.prec = max(ctx.prec, value.adjusted() + 4)
        q = value.quantize(CENTS, rounding=ROUND_HALF_EVEN)
    if q.is_zero():
        q = q.copy_abs()
    return f"{q:f}"


# ====== ЗАПРОС: создание платежа ======

class ConfirmationType(str, Enum):
    """Сценарий подтверждения платежа пользователем."""

    # Действия зависят от способа оплаты, выбранного в виджете ЮKassa
    EMBEDDED = "embedded"
    # Пользователь подтверждает во внешней системе (например, отвечает на SMS)
    EXTERNAL = "external"
    # Подтверждение в мобильном приложении (банк-клиент); только на мобильных устройствах
    MOBILE_APPLICATION = "mobile_application"
    # Пользователь сканирует QR-код
    QR = "qr"
    # Страница ЮKassa или партнёра (ввод карты, 3-D Secure), затем возврат на return_url
    REDIRECT = "redirect"

    def __str__(self) -> str:
        return self.value


class Amount(BaseModel):
    # value - точная десятичная сумма, float не принимаем
    value: Decimal = Field(ge=0, allow_inf_nan=False)
    currency: str  # трёхбуквенный код, например RUB

    @field_validator("value", mode="before")
    @classmethod
    def _reject_float(cls, v: Any) -> Any:
        if isinstance(v, (float, bool)):
            raise ValueError(f"amount value must be int, Decimal or str, got {type(v).__name__}")
        return v

    @field_serializer("value")
    def _serialize_value(self, v: Decimal) -> str:
        return format_amount(v)


class Confirmation(BaseModel):
    """
    Данные для сценария подтверждения.
    enforce - запросить 3-D Secure; имеет смысл только для redirect.
    """

    type: ConfirmationType
    return_url: Optional[str] = None
    enforce: Optional[bool] = None

    @model_validator(mode="after")
    def _check_scenario(self) -> "Confirmation":
        if self.type == ConfirmationType.REDIRECT and not self.return_url:
            raise ValueError("return_url is required for redirect confirmation")
        if self.enforce is not None and self.type != ConfirmationType.REDIRECT:
            raise ValueError("enforce works only with redirect confirmation")
        return self

    @model_serializer(mode="wrap")
    def _drop_unset(self, handler: SerializerFunctionWrapHandler) -> Dict[str, Any]:
        data = handler(self)
        return {k: v for k, v in data.items() if v is not None}


class PaymentBody(BaseModel):
    """
    Тело POST /payments. Kassa и Idempotence-Key сюда не попадают:
    первое идёт в Basic auth, второе - в заголовок.
    """

    amount: Amount
    capture: bool = False
    confirmation: Confirmation
    description: str = Field(default="", max_length=DESCRIPTION_MAX_LEN)

    @model_serializer(mode="wrap")
    def _omit_defaults(self, handler: SerializerFunctionWrapHandler) -> Dict[str, Any]:
        data = handler(self)
        if not self.capture:
            data.pop("capture", None)
        if not self.description:
            data.pop("description", None)
        return data


# ====== ОТВЕТЫ ======

class PaymentStatus(str, Enum):
    PENDING = "pending"
    WAITING_FOR_CAPTURE = "waiting_for_capture"
    SUCCEEDED = "succeeded"
    CANCELED = "canceled"

    def __str__(self) -> str:
        return self.value


class ApiErrorResponse(BaseModel):
    # Все поля необязательны: в эту модель сначала читается любой ответ
    type: str = ""
    id: str = ""
    code: str = ""
    description: str = ""
    parameter: str = ""

    @field_validator("*", mode="before")
    @classmethod
    def _null_to_empty(cls, v: Any) -> Any:
        # null в ответе == пустая строка
        return "" if v is None else v


class AmountFromResponse(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    value: str = ""
    currency: str = ""

    def decimal(self) -> Decimal:
        return Decimal(self.value)


class ConfirmationFromResponse(BaseModel):
    type: str = ""
    confirmation_url: str = ""


class Recipient(BaseModel):
    account_id: str = ""
    gateway_id: str = ""


class PaymentResponse(BaseModel):
    id: str
    status: PaymentStatus
    paid: bool = False
    amount: AmountFromResponse
    confirmation: Optional[ConfirmationFromResponse] = None
    created_at: datetime
    description: str = ""
    recipient: Optional[Recipient] = None
    refundable: bool = False
    test: bool = False


class CardInfo(BaseModel):
    first6: str = ""
    last4: str = ""
    expiry_month: str = ""
    expiry_year: str = ""
    card_type: str = ""
    issuer_country: str = ""
    issuer_name: str = ""


class PaymentMethod(BaseModel):
    type: str = ""
    id: str = ""
    saved: bool = False
    card: Optional[CardInfo] = None
    title: str = ""


class PaymentSummary(PaymentResponse):
    expires_at: Optional[datetime] = None
    payment_method: Optional[PaymentMethod] = None
    metadata: Dict[str, Any] = Field(default_factory=dict)


class PaymentList(BaseModel):
    type: str = ""
    items: List[PaymentSummary] = Field(default_factory=list)
    next_cursor: str = ""  # пустой, если страниц больше нет
