from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union


class GenerationMode(str, Enum):
    SIMILAR = "similar"
    EXACT = "exact"


@dataclass(frozen=True)
class SubjectContext:
    subject: str
    is_math: bool

    def to_dict(self) -> dict[str, Any]:
        return {"subject": self.subject, "isMath": self.is_math}


@dataclass(frozen=True)
class BingoItem:
    id: str
    problem: str
    answer: str


# ── request content parts ─────────────────────────────────────────────────────


@dataclass(frozen=True)
class TextPart:
    text: str


@dataclass(frozen=True)
class ImagePart:
    """Inline image: mime type plus the base64 payload (not decoded)."""

    mime_type: str
    data: str


ContentPart = Union[TextPart, ImagePart]


# ── structured-output schema ──────────────────────────────────────────────────


class SchemaType(str, Enum):
    STRING = "STRING"
    BOOLEAN = "BOOLEAN"
    OBJECT = "OBJECT"
    ARRAY = "ARRAY"


@dataclass(frozen=True)
class ResponseSchema:
    """Shape the remote model must answer in. Backends translate it to their own format."""

    type: SchemaType
    properties: dict[str, "ResponseSchema"] = field(default_factory=dict)
    items: "ResponseSchema | None" = None
    name: str = "response"

    def to_json_schema(self) -> dict[str, Any]:
        """Plain JSON Schema (lower-case type names), as OpenAI and Anthropic expect."""
        schema: dict[str, Any] = {"type": self.type.value.lower()}
        match self.type:
            case SchemaType.OBJECT:
                schema["properties"] = {
                    key: value.to_json_schema() for key, value in self.properties.items()
                }
                schema["required"] = list(self.properties)
            case SchemaType.ARRAY if self.items is not None:
                schema["items"] = self.items.to_json_schema()
            case _:
                pass
        return schema
