"""Application settings — single file, Pydantic-based.

Node selection:
  - CHAIN_RPC_URL set -> that node's RPC root
  - CHAIN_RPC_URL absent -> local node at http://localhost:8732
"""

from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def _backend_root() -> Path:
    """Backend package root (backend/). config.py lives at backend/config.py."""
    return Path(__file__).resolve().parent


def _ensure_env_loaded() -> None:
    """Load .env from backend root (then project root). Idempotent."""
    root: Path = _backend_root()
    for candidate in (root / ".env", root.parent / ".env"):
        if candidate.exists():
            load_dotenv(candidate, override=False)


_ensure_env_loaded()


class ChainSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="CHAIN_",
        env_file=(str(_backend_root() / ".env"), ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    rpc_url: str = Field(default="http://localhost:8732", description="Node RPC root URL.")
    rpc_timeout: int = Field(default=30, description="Per-request timeout in seconds.")
    chain: str = Field(default="main", description="Chain alias used in /chains/{chain}/...")

    def rpc_info_for_logging(self) -> str:
        return f"{self.rpc_url.rstrip('/')} (chain={self.chain}, timeout={self.rpc_timeout}s)"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="TZBLOCKS_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    environment: str = Field(default="development")
    debug: bool = Field(default=False)

    chain: ChainSettings = Field(default_factory=ChainSettings)


@lru_cache
def get_settings() -> Settings:
    return Settings()
