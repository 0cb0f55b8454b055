import logging

from pydantic import model_validator
from pydantic_settings import BaseSettings

POLYGON = 137
AMOY = 80002
SUPPORTED_CHAINS = (POLYGON, AMOY)


class Settings(BaseSettings):
    # Signing
    private_key: str = ""
    funder: str = ""
    signature_type: int | None = None
    chain_id: int = POLYGON

    # CLOB API credentials (derived from the key when not set)
    api_key: str = ""
    api_secret: str = ""
    passphrase: str = ""

    readonly: bool = False

    # Endpoints
    clob_api_url: str = "https://clob.polymarket.com"
    gamma_api_url: str = "https://gamma-api.polymarket.com"
    http_timeout: float = 30.0

    # Host
    host: str = "127.0.0.1"
    port: int = 8000
    log_level: str = "INFO"

    model_config = {
        "env_prefix": "POLYMARKET_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
        "frozen": True,
    }

    @model_validator(mode="after")
    def _check(self) -> "Settings":
        creds = [self.api_key, self.api_secret, self.passphrase]
        if any(creds) and not all(creds):
            raise ValueError("api_key, api_secret and passphrase must be set together")
        if self.chain_id not in SUPPORTED_CHAINS:
            raise ValueError(f"Unsupported chain_id {self.chain_id}")
        return self

    @property
    def has_api_creds(self) -> bool:
        return bool(self.api_key)

    @property
    def effective_signature_type(self) -> int:
        # Proxy wallets sign as browser-wallet proxies unless told otherwise.
        if self.signature_type is not None:
            return self.signature_type
        return 2 if self.funder else 0


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
