from dataclasses import dataclass
from typing import Optional
import os
from dotenv import load_dotenv

from bingogen.constants import (
    API_KEY_PLACEHOLDERS,
    DEFAULT_CLAUDE_MODEL,
    DEFAULT_GEMINI_MODEL,
    DEFAULT_ITEM_COUNT,
    DEFAULT_OPENAI_MODEL,
    ENV_ANTHROPIC_API_KEY,
    ENV_GEMINI_API_KEY,
    ENV_LEGACY_API_KEY,
    ENV_OPENAI_API_KEY,
    ENV_PROVIDER,
    MSG_ERR_API_KEY,
    MSG_ERR_ITEM_COUNT,
    MSG_ERR_PROVIDER,
    PROVIDER_GEMINI,
    PROVIDERS,
    UNDEFINED_KEY,
)
from bingogen.errors import ConfigurationError


def validate_api_key(key: Optional[str], env_var: str) -> str:
    """Return the key unchanged, or raise ConfigurationError if it is missing or a placeholder."""
    match key:
        case None:
            raise ConfigurationError(MSG_ERR_API_KEY % env_var)
        case str() as k if not k.strip() or k == UNDEFINED_KEY:
            raise ConfigurationError(MSG_ERR_API_KEY % env_var)
        case str() as k if any(p in k for p in API_KEY_PLACEHOLDERS):
            raise ConfigurationError(MSG_ERR_API_KEY % env_var)
        case _:
            return key


@dataclass(frozen=True)
class Config:
    provider: str
    gemini_api_key: Optional[str]
    openai_api_key: Optional[str]
    anthropic_api_key: Optional[str]
    gemini_model: str
    openai_model: str
    claude_model: str
    item_count: int
    log_level: str

    @classmethod
    def from_env(cls) -> "Config":
        load_dotenv()

        provider = os.getenv(ENV_PROVIDER, PROVIDER_GEMINI)
        gemini_api_key = os.getenv(ENV_GEMINI_API_KEY) or os.getenv(ENV_LEGACY_API_KEY) or None
        openai_api_key = os.getenv(ENV_OPENAI_API_KEY) or None
        anthropic_api_key = os.getenv(ENV_ANTHROPIC_API_KEY) or None
        gemini_model = os.getenv("GEMINI_MODEL", DEFAULT_GEMINI_MODEL)
        openai_model = os.getenv("OPENAI_MODEL", DEFAULT_OPENAI_MODEL)
        claude_model = os.getenv("CLAUDE_MODEL", DEFAULT_CLAUDE_MODEL)
        item_count = os.getenv("BINGO_ITEM_COUNT", str(DEFAULT_ITEM_COUNT))
        log_level = os.getenv("LOG_LEVEL", "INFO")

        return cls._validate(
            provider=provider.strip().lower(),
            gemini_api_key=gemini_api_key,
            openai_api_key=openai_api_key,
            anthropic_api_key=anthropic_api_key,
            gemini_model=gemini_model,
            openai_model=openai_model,
            claude_model=claude_model,
            item_count=item_count,
            log_level=log_level,
        )

    @staticmethod
    def _validate(
        provider: str,
        gemini_api_key: Optional[str],
        openai_api_key: Optional[str],
        anthropic_api_key: Optional[str],
        gemini_model: str,
        openai_model: str,
        claude_model: str,
        item_count: str,
        log_level: str,
    ) -> "Config":
        match provider:
            case p if p in PROVIDERS:
                pass
            case _:
                raise ConfigurationError(MSG_ERR_PROVIDER % (provider, ", ".join(PROVIDERS)))

        try:
            count = int(item_count)
        except ValueError:
            raise ConfigurationError(MSG_ERR_ITEM_COUNT % item_count) from None
        match count:
            case n if n < 1:
                raise ConfigurationError(MSG_ERR_ITEM_COUNT % item_count)
            case _:
                pass

        return Config(
            provider=provider,
            gemini_api_key=gemini_api_key,
            openai_api_key=openai_api_key,
            anthropic_api_key=anthropic_api_key,
            gemini_model=gemini_model,
            openai_model=openai_model,
            claude_model=claude_model,
            item_count=count,
            log_level=log_level,
        )
