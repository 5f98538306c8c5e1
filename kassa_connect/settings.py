from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="KASSA_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    APP_NAME: str = "KassaConnect"
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "console"  # console | json

    # YooKassa API
    # POST-запросы с JSON-телом, GET-запросы с query string; ответ всегда JSON.
    BASE_URL: str = "https://api.yookassa.ru/v3/"
    TIMEOUT_SEC: float = 15

    # Ключи магазина сюда НЕ кладём: shop_id / secret_key передаются в Kassa явно


settings = Settings()
