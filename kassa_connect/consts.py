from typing import Dict

# Заголовок идемпотентности для POST-запросов
IDEMPOTENCE_HEADER = "Idempotence-Key"

PAYMENTS_PATH = "payments"

# Тестовые карты песочницы: исход платежа -> платёжная система -> номер
SANDBOX_CARDS: Dict[str, Dict[str, str]] = {
    "successful": {
        "mastercard": "5555555555554444",
        "mastercard_3ds": "5555555555554477",
        "maestro": "6759649826438453",
        "visa": "4111111111111111",
        "visa_3ds": "4793128161644804",
        "visa_electron": "4175001000000017",
        "mir": "2202474301322987",
        "mir_3ds": "2200000000000004",
        "american_express": "370000000000002",
        "jcb": "3528000700000000",
        "diners_club": "36700102000000",
    },
    "3d_secure_failed": {
        "mastercard": "5555555555554592",
        "visa": "4839665499603842",
        "mir": "2200000000000012",
    },
    "call_issuer": {
        "mastercard": "5555555555554535",
        "visa": "4926946416239025",
        "mir": "2200000000000020",
    },
    "card_expired": {
        "mastercard": "5555555555554543",
        "visa": "4141435412630840",
        "mir": "2200000000000038",
    },
    "fraud_suspected": {
        "mastercard": "5555555555554568",
        "visa": "4483274282299972",
        "mir": "2200000000000046",
    },
    "general_decline": {
        "mastercard": "5555555555554527",
        "visa": "4889971706588753",
        "mir": "2202202212312379",
    },
    "insufficient_funds": {
        "mastercard": "5555555555554600",
        "visa": "4562265587712390",
        "mir": "2200000000000053",
    },
    "invalid_card_number": {
        "mastercard": "5555555555554618",
        "visa": "4951017853630544",
        "mir": "2201382000000013",
    },
    "invalid_csc": {
        "mastercard": "5555555555554626",
        "visa": "4194180666146368",
        "mir": "2200770212727079",
    },
    "issuer_unavailable": {
        "mastercard": "5555555555554501",
        "visa": "4654130848359150",
        "mir": "2201382000000021",
    },
    "payment_method_limit_exceeded": {
        "mastercard": "5555555555554576",
        "visa": "4565231022577548",
        "mir": "2201382000000039",
    },
    "payment_method_restricted": {
        "mastercard": "5555555555554550",
        "visa": "4233961169071671",
        "mir": "2201382000000047",
    },
    "country_forbidden": {
        "mastercard": "5555555555554584",
        "visa": "4969751510013864",
        "mir": "2201382000000054",
    },
    "canceled_fraud_suspected": {
        "mastercard": "5555555555554634",
        "visa": "4119098878796485",
        "mir": "2201696981989955",
    },
}


def sandbox_card(outcome: str, brand: str) -> str:
    """Номер тестовой карты для исхода `outcome` и платёжной системы `brand`."""
    o = outcome.strip().lower()
    b = brand.strip().lower()
    try:
        return SANDBOX_CARDS[o][b]
    except KeyError:
        raise KeyError(f"No sandbox card for outcome={outcome!r}, brand={brand!r}") from None
