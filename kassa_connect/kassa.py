from typing import Optional

import httpx
from pydantic import BaseModel, Field

from .consts import PAYMENTS_PATH
from .logging import get_logger
from .responses import parse_response
from .schemas.payment import PaymentList
from .utils.http import endpoint, send

logger = get_logger(__name__)


class Kassa(BaseModel):
    """
    Учётные данные магазина для Basic auth: shop_id - логин, secret_key - пароль.
    Ничего не валидирует: неверные ключи вернутся ошибкой от API.

    Один экземпляр можно использовать для многих платежей и запросов списка;
    одновременное чтение безопасно, изменение - на совести вызывающего кода.
    """

    shop_id: str = ""
    # Секретный ключ позволяет проводить любые операции от имени магазина, храните его надёжно
    secret_key: str = Field(default="", repr=False)

    def set_shop_id(self, shop_id: str) -> "Kassa":
        self.shop_id = shop_id
        return self

    def set_secret_key(self, key: str) -> "Kassa":
        # Ключ выпускается в разделе «Ключи API» личного кабинета
        self.secret_key = key
        return self

    def auth(self) -> httpx.BasicAuth:
        return httpx.BasicAuth(self.shop_id, self.secret_key)

    async def list_payments(
        self,
        http_client: Optional[httpx.AsyncClient] = None,
        timeout_sec: Optional[float] = None,
        base_url: Optional[str] = None,
    ) -> PaymentList:
        """
        GET /payments - только первая страница, без фильтров.
        next_cursor в ответе есть, но дальше по нему не ходим.
        """
        logger.debug("listing_payments", shop_id=self.shop_id)
        resp = await send(
            "GET",
            endpoint(PAYMENTS_PATH, base_url),
            auth=self.auth(),
            http_client=http_client,
            timeout_sec=timeout_sec,
        )
        result = parse_response(resp.content, PaymentList, status_code=resp.status_code)
        logger.debug("payments_listed", count=len(result.items), has_more=bool(result.next_cursor))
        return result
