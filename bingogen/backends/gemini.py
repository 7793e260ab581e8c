"""GeminiBackend — Google Gemini via the google-genai SDK."""
import base64
import logging
from collections.abc import Sequence

from google import genai
from google.genai import types

from bingogen.backends.client import GenerationBackend
from bingogen.constants import (
    DEFAULT_GEMINI_MODEL,
    ENV_GEMINI_API_KEY,
    JSON_MIME_TYPE,
    MSG_ROUTING_BACKEND,
)
from bingogen.models import ContentPart, ImagePart, ResponseSchema, TextPart

logger = logging.getLogger(__name__)


def to_gemini_schema(schema: ResponseSchema) -> types.Schema:
    return types.Schema(
        type=types.Type(schema.type.value),
        properties={key: to_gemini_schema(value) for key, value in schema.properties.items()} or None,
        items=to_gemini_schema(schema.items) if schema.items is not None else None,
    )


def to_gemini_part(part: ContentPart) -> types.Part:
    match part:
        case ImagePart(mime_type=mime_type, data=data):
            return types.Part.from_bytes(data=base64.b64decode(data), mime_type=mime_type)
        case TextPart(text=text):
            return types.Part.from_text(text=text)
        case _:
            raise TypeError(f"Unsupported content part: {part!r}")


class GeminiBackend(GenerationBackend):
    name = "Gemini"
    env_var = ENV_GEMINI_API_KEY

    def __init__(self, api_key: str | None, model: str = DEFAULT_GEMINI_MODEL) -> None:
        super().__init__(api_key, model)

    async def generate(
        self,
        parts: Sequence[ContentPart],
        schema: ResponseSchema,
        system_instruction: str | None = None,
    ) -> str:
        client = genai.Client(api_key=self._api_key)
        logger.info(MSG_ROUTING_BACKEND, self.name, self._model)
        response = await client.aio.models.generate_content(
            model=self._model,
            contents=list(map(to_gemini_part, parts)),
            config=types.GenerateContentConfig(
                system_instruction=system_instruction,
                response_mime_type=JSON_MIME_TYPE,
                response_schema=to_gemini_schema(schema),
            ),
        )
        return response.text or ""
