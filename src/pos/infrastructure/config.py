from decimal import Decimal
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Point-of-sale settings loaded from the environment.

    All variables are optional and prefixed with ``POS_``:
      - POS_SHIPPING_RATE_PER_KG (default 10)
      - POS_LOG_LEVEL (default WARNING)
      - POS_DEFAULT_CUSTOMER / POS_DEFAULT_BALANCE (customer used by the CLI)
    """

    shipping_rate_per_kg: Decimal = Decimal("10")
    log_level: str = "WARNING"

    default_customer: str = "Ibrahim"
    default_balance: Decimal = Decimal("1000")

    model_config = SettingsConfigDict(env_prefix="POS_", env_file=".env", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    return Settings()
