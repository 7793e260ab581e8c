"""ClaudeBackend — Anthropic Claude, structured output through a forced tool call."""
import json
import logging
from collections.abc import Sequence

from anthropic import AsyncAnthropic

from bingogen.backends.client import GenerationBackend
from bingogen.constants import (
    CLAUDE_MAX_TOKENS,
    CLAUDE_TOOL_DESCRIPTION,
    CLAUDE_TOOL_NAME,
    DEFAULT_CLAUDE_MODEL,
    ENV_ANTHROPIC_API_KEY,
    MSG_ROUTING_BACKEND,
)
from bingogen.models import ContentPart, ImagePart, ResponseSchema, TextPart

logger = logging.getLogger(__name__)


def to_claude_block(part: ContentPart) -> dict:
    match part:
        case ImagePart(mime_type=mime_type, data=data):
            return {
                "type": "image",
                "source": {"type": "base64", "media_type": mime_type, "data": data},
            }
        case TextPart(text=text):
            return {"type": "text", "text": text}
        case _:
            raise TypeError(f"Unsupported content part: {part!r}")


class ClaudeBackend(GenerationBackend):
    name = "Claude"
    env_var = ENV_ANTHROPIC_API_KEY

    def __init__(self, api_key: str | None, model: str = DEFAULT_CLAUDE_MODEL) -> None:
        super().__init__(api_key, model)

    async def generate(
        self,
        parts: Sequence[ContentPart],
        schema: ResponseSchema,
        system_instruction: str | None = None,
    ) -> str:
        client = AsyncAnthropic(api_key=self._api_key)
        extra = {"system": system_instruction} if system_instruction else {}
        logger.info(MSG_ROUTING_BACKEND, self.name, self._model)
        message = await client.messages.create(
            model=self._model,
            max_tokens=CLAUDE_MAX_TOKENS,
            messages=[{"role": "user", "content": list(map(to_claude_block, parts))}],
            tools=[
                {
                    "name": CLAUDE_TOOL_NAME,
                    "description": CLAUDE_TOOL_DESCRIPTION,
                    "input_schema": schema.to_json_schema(),
                }
            ],
            tool_choice={"type": "tool", "name": CLAUDE_TOOL_NAME},
            **extra,
        )
        tool_inputs = [b.input for b in message.content if b.type == "tool_use"]
        match tool_inputs:
            case [payload, *_]:
                return json.dumps(payload)
            case []:
                return "".join(b.text for b in message.content if b.type == "text").strip()
