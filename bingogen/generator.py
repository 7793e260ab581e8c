"""ContentGenerator — subject detection and bingo item generation over one backend."""
import json
import logging
from typing import Any

from bingogen.backends.client import GenerationBackend
from bingogen.constants import (
    FALLBACK_SUBJECT,
    ITEM_ID_FORMAT,
    ITEM_SENTINEL,
    MSG_ERR_COUNT,
    MSG_ERR_EMPTY_REPLY,
    MSG_ERR_GENERATION,
    MSG_ERR_NO_ITEMS,
    MSG_ERR_SUBJECT_EMPTY,
    MSG_ERR_SUBJECT_SHAPE,
    MSG_GENERATION_FAILED,
    MSG_ITEMS_GENERATED,
    MSG_SUBJECT_DETECTED,
    MSG_SUBJECT_FALLBACK,
)
from bingogen.errors import ConfigurationError, GenerationError
from bingogen.models import BingoItem, GenerationMode, SubjectContext
from bingogen.parsing import parse_data_url, strip_code_fences
from bingogen.prompts import (
    ITEMS_SCHEMA,
    SUBJECT_SCHEMA,
    build_parts,
    subject_prompt,
    system_instruction,
    user_prompt,
)

logger = logging.getLogger(__name__)

FALLBACK_CONTEXT = SubjectContext(subject=FALLBACK_SUBJECT, is_math=False)


# ── pure helpers (module-level so tests can import them directly) ──────────────


def parse_subject(text: str) -> SubjectContext:
    cleaned = strip_code_fences(text)
    if not cleaned:
        raise GenerationError(MSG_ERR_SUBJECT_EMPTY)
    payload = json.loads(cleaned)
    match payload:
        case {"subject": str() as subject, "isMath": bool() as is_math} if subject.strip():
            return SubjectContext(subject=subject, is_math=is_math)
        case {"subject": str() as subject, **rest} if subject.strip() and "isMath" not in rest:
            return SubjectContext(subject=subject, is_math=False)
        case _:
            raise GenerationError(MSG_ERR_SUBJECT_SHAPE % (payload,))


def _field_or_sentinel(raw: Any, key: str) -> str:
    value = raw.get(key) if isinstance(raw, dict) else None
    match value:
        case str() as s if s:
            return s
        case bool():
            return ITEM_SENTINEL
        case int() | float():
            return str(value)
        case _:
            return ITEM_SENTINEL


def parse_items(text: str) -> list[BingoItem]:
    """Map the reply's ``items`` array to BingoItems; missing fields become the sentinel."""
    cleaned = strip_code_fences(text)
    if not cleaned:
        raise GenerationError(MSG_ERR_EMPTY_REPLY)
    payload = json.loads(cleaned)
    match payload:
        case {"items": [_, *_] as raw_items}:
            return [
                BingoItem(
                    id=ITEM_ID_FORMAT % index,
                    problem=_field_or_sentinel(raw, "problem"),
                    answer=_field_or_sentinel(raw, "answer"),
                )
                for index, raw in enumerate(raw_items)
            ]
        case _:
            raise GenerationError(MSG_ERR_NO_ITEMS)


# ── generator ─────────────────────────────────────────────────────────────────


class ContentGenerator:
    """Runs the two remote calls of a bingo session. The caller sequences them."""

    def __init__(self, backend: GenerationBackend) -> None:
        self._backend = backend

    async def detect_subject(self, topic: str, image: str | None = None) -> SubjectContext:
        """Infer subject and notation needs. Soft-fails to the fallback context,
        except for configuration errors, which always propagate."""
        try:
            image_part = parse_data_url(image) if image else None
            reply = await self._backend.generate(
                build_parts(subject_prompt(topic), image_part),
                SUBJECT_SCHEMA,
            )
            context = parse_subject(reply)
        except ConfigurationError:
            raise
        except Exception as exc:
            logger.warning(MSG_SUBJECT_FALLBACK, exc)
            return FALLBACK_CONTEXT
        logger.info(MSG_SUBJECT_DETECTED, context.subject, context.is_math)
        return context

    async def generate_bingo_items(
        self,
        context: SubjectContext,
        topic: str,
        count: int,
        image: str | None = None,
        mode: GenerationMode = GenerationMode.SIMILAR,
    ) -> list[BingoItem]:
        """Generate the item pool. Raises GenerationError when no usable reply arrives."""
        if count < 1:
            raise ValueError(MSG_ERR_COUNT % count)
        mode = GenerationMode(mode)
        try:
            image_part = parse_data_url(image) if image else None
            reply = await self._backend.generate(
                build_parts(user_prompt(topic, count, image_part is not None, mode), image_part),
                ITEMS_SCHEMA,
                system_instruction=system_instruction(context, count),
            )
            items = parse_items(reply)
        except ConfigurationError:
            raise
        except Exception as exc:
            logger.error(MSG_GENERATION_FAILED, exc)
            raise GenerationError(MSG_ERR_GENERATION % exc) from exc
        logger.info(MSG_ITEMS_GENERATED, len(items))
        return items
