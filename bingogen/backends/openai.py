"""OpenAIBackend — OpenAI chat completions with a json_schema response format."""
import logging
from collections.abc import Sequence

from openai import AsyncOpenAI

from bingogen.backends.client import GenerationBackend
from bingogen.constants import DEFAULT_OPENAI_MODEL, ENV_OPENAI_API_KEY, MSG_ROUTING_BACKEND
from bingogen.models import ContentPart, ImagePart, ResponseSchema, TextPart

logger = logging.getLogger(__name__)


def to_openai_block(part: ContentPart) -> dict:
    match part:
        case ImagePart(mime_type=mime_type, data=data):
            return {
                "type": "image_url",
                "image_url": {"url": f"data:{mime_type};base64,{data}"},
            }
        case TextPart(text=text):
            return {"type": "text", "text": text}
        case _:
            raise TypeError(f"Unsupported content part: {part!r}")


class OpenAIBackend(GenerationBackend):
    name = "OpenAI"
    env_var = ENV_OPENAI_API_KEY

    def __init__(self, api_key: str | None, model: str = DEFAULT_OPENAI_MODEL) -> None:
        super().__init__(api_key, model)

    async def generate(
        self,
        parts: Sequence[ContentPart],
        schema: ResponseSchema,
        system_instruction: str | None = None,
    ) -> str:
        client = AsyncOpenAI(api_key=self._api_key)
        messages = (
            [{"role": "system", "content": system_instruction}] if system_instruction else []
        ) + [{"role": "user", "content": list(map(to_openai_block, parts))}]
        logger.info(MSG_ROUTING_BACKEND, self.name, self._model)
        response = await client.chat.completions.create(
            model=self._model,
            messages=messages,
            response_format={
                "type": "json_schema",
                "json_schema": {"name": schema.name, "schema": schema.to_json_schema()},
            },
        )
        content = response.choices[0].message.content
        return content.strip() if content else ""
