import uuid
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from plextv_api.models.auth import ClientIdentity


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    plex_client_identifier: str = str(uuid.uuid4())
    plex_product_name: str = "python-plextv-api"
    plex_api_url: str = "https://plex.tv"
    plex_auth_url: str = "https://app.plex.tv/auth#"
    forward_url_endpoint: str = "/plex/auth"

    # Outbound request policy
    connect_timeout: int = 3
    max_redirects: int = 10
    user_agent: str = "Mozilla/5.0 (X11; Linux; rv:98.0) Gecko/20100101 Firefox/98.0"

    frontend_url: str = "http://localhost:5173"
    log_level: str = "INFO"

    def client_identity(self) -> ClientIdentity:
        return ClientIdentity(
            client_identifier=self.plex_client_identifier,
            product_name=self.plex_product_name,
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()
