"""Application settings loaded from environment variables."""

from pathlib import Path
from typing import Literal

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration.

    All settings can be overridden via environment variables prefixed with SLOGI_.
    For example, SLOGI_PROVIDER=gemini together with SLOGI_GEMINI_API_KEY=... switches
    syllabification to the remote provider.
    """

    model_config = SettingsConfigDict(env_prefix="SLOGI_")

    reload: bool = False
    port: int = 8000
    cert_dir: str = "data/certs"
    ws_ping_timeout_seconds: int | None = 300

    provider: Literal["local", "gemini"] = "local"
    gemini_api_key: SecretStr | None = None
    gemini_model: str = "gemini-2.5-flash"
    gemini_base_url: str = "https://generativelanguage.googleapis.com/v1beta"
    provider_timeout_seconds: float = 30.0

    @property
    def ssl_certfile(self) -> str:
        """Path to SSL certificate file."""
        return str(Path(self.cert_dir) / "cert.pem")

    @property
    def ssl_keyfile(self) -> str:
        """Path to SSL private key file."""
        return str(Path(self.cert_dir) / "key.pem")

    @property
    def ssl_enabled(self) -> bool:
        """True if both the certificate and the key file exist."""
        return Path(self.ssl_certfile).is_file() and Path(self.ssl_keyfile).is_file()

    @property
    def local_url(self) -> str:
        """Base URL of the server on this host, https only if certificates exist."""
        scheme = "https" if self.ssl_enabled else "http"
        return f"{scheme}://localhost:{self.port}"


settings = Settings()
