"""GenerationBackend — abstract base for structured-output LLM backends."""
from abc import ABC, abstractmethod
from collections.abc import Sequence

from bingogen.config import validate_api_key
from bingogen.constants import ENV_LEGACY_API_KEY
from bingogen.models import ContentPart, ResponseSchema


class GenerationBackend(ABC):
    name: str = "backend"
    env_var: str = ENV_LEGACY_API_KEY

    def __init__(self, api_key: str | None, model: str) -> None:
        self._api_key = validate_api_key(api_key, self.env_var)
        self._model = model

    @property
    def model(self) -> str:
        return self._model

    @abstractmethod
    async def generate(
        self,
        parts: Sequence[ContentPart],
        schema: ResponseSchema,
        system_instruction: str | None = None,
    ) -> str:
        """Send the parts and return the raw reply text (JSON, maybe fenced). Raises on failure."""
        ...
