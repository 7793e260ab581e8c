"""create_backend — picks and constructs the configured generation backend."""
from bingogen.backends.claude import ClaudeBackend
from bingogen.backends.client import GenerationBackend
from bingogen.backends.gemini import GeminiBackend
from bingogen.backends.openai import OpenAIBackend
from bingogen.config import Config
from bingogen.constants import (
    MSG_ERR_PROVIDER,
    PROVIDER_CLAUDE,
    PROVIDER_GEMINI,
    PROVIDER_OPENAI,
    PROVIDERS,
)
from bingogen.errors import ConfigurationError


def create_backend(config: Config) -> GenerationBackend:
    """Build the backend for ``config.provider``. Raises ConfigurationError on a bad key."""
    match config.provider:
        case str() as p if p == PROVIDER_GEMINI:
            return GeminiBackend(config.gemini_api_key, config.gemini_model)
        case str() as p if p == PROVIDER_OPENAI:
            return OpenAIBackend(config.openai_api_key, config.openai_model)
        case str() as p if p == PROVIDER_CLAUDE:
            return ClaudeBackend(config.anthropic_api_key, config.claude_model)
        case other:
            raise ConfigurationError(MSG_ERR_PROVIDER % (other, ", ".join(PROVIDERS)))
