from typing import Dict, Optional

import httpx

from ..settings import settings


def client(timeout_sec: Optional[float] = None) -> httpx.AsyncClient:
    return httpx.AsyncClient(timeout=settings.TIMEOUT_SEC if timeout_sec is None else timeout_sec)


def endpoint(path: str, base_url: Optional[str] = None) -> str:
    return f"{(base_url or settings.BASE_URL).rstrip('/')}/{path.lstrip('/')}"


async def send(
    method: str,
    url: str,
    auth: httpx.Auth,
    headers: Optional[Dict[str, str]] = None,
    content: Optional[bytes] = None,
    http_client: Optional[httpx.AsyncClient] = None,
    timeout_sec: Optional[float] = None,
) -> httpx.Response:
    """
    Один запрос без повторов. Тело ответа читается целиком до возврата.
    Чужой http_client не закрываем: им управляет вызывающий код.
    """
    if http_client is not None:
        extra = {} if timeout_sec is None else {"timeout": timeout_sec}
        return await http_client.request(method, url, auth=auth, headers=headers, content=content, **extra)
    async with client(timeout_sec) as c:
        return await c.request(method, url, auth=auth, headers=headers, content=content)
