"""Prompt construction and response schemas — pure functions, no I/O."""
from bingogen.constants import (
    FORMAT_MATH,
    FORMAT_TEXT,
    SUBJECT_PROMPT,
    SYSTEM_PROMPT,
    USER_PROMPT_EXACT,
    USER_PROMPT_SIMILAR,
    USER_PROMPT_TOPIC,
)
from bingogen.models import (
    ContentPart,
    GenerationMode,
    ImagePart,
    ResponseSchema,
    SchemaType,
    SubjectContext,
    TextPart,
)

SUBJECT_SCHEMA = ResponseSchema(
    type=SchemaType.OBJECT,
    name="subject_context",
    properties={
        "subject": ResponseSchema(type=SchemaType.STRING),
        "isMath": ResponseSchema(type=SchemaType.BOOLEAN),
    },
)

ITEMS_SCHEMA = ResponseSchema(
    type=SchemaType.OBJECT,
    name="bingo_items",
    properties={
        "items": ResponseSchema(
            type=SchemaType.ARRAY,
            items=ResponseSchema(
                type=SchemaType.OBJECT,
                properties={
                    "problem": ResponseSchema(type=SchemaType.STRING),
                    "answer": ResponseSchema(type=SchemaType.STRING),
                },
            ),
        ),
    },
)


def subject_prompt(topic: str) -> str:
    return SUBJECT_PROMPT % {"topic": topic}


def format_instruction(is_math: bool) -> str:
    return FORMAT_MATH if is_math else FORMAT_TEXT


def system_instruction(context: SubjectContext, count: int) -> str:
    return SYSTEM_PROMPT % {
        "subject": context.subject,
        "format": format_instruction(context.is_math),
        "count": count,
    }


def user_prompt(topic: str, count: int, has_image: bool, mode: GenerationMode) -> str:
    """Exact extraction, style-alike generation, or plain topic generation."""
    match (has_image, mode):
        case (True, GenerationMode.EXACT):
            return USER_PROMPT_EXACT % {"count": count}
        case (True, _):
            return USER_PROMPT_SIMILAR % {"count": count}
        case _:
            return USER_PROMPT_TOPIC % {"topic": topic, "count": count}


def build_parts(text: str, image: ImagePart | None = None) -> list[ContentPart]:
    """Image first (when present), then the instruction text."""
    match image:
        case None:
            return [TextPart(text)]
        case img:
            return [img, TextPart(text)]
