"""ContentGenerator: subject detection and item generation against a fake backend"""
import json
from unittest.mock import AsyncMock

import pytest

from bingogen.backends.client import GenerationBackend
from bingogen.errors import ConfigurationError, GenerationError
from bingogen.generator import ContentGenerator, parse_items, parse_subject
from bingogen.models import BingoItem, GenerationMode, ImagePart, SubjectContext, TextPart
from bingogen.prompts import ITEMS_SCHEMA, SUBJECT_SCHEMA


class FakeBackend(GenerationBackend):
    name = "Fake"

    def __init__(self, reply: str = "", error: Exception | None = None) -> None:
        super().__init__("fake-key", "fake-model")
        self.generate = AsyncMock(return_value=reply, side_effect=error)

    async def generate(self, parts, schema, system_instruction=None) -> str:  # replaced per instance
        raise NotImplementedError


def make_items_reply(n: int) -> str:
    return json.dumps({"items": [{"problem": f"{i} + 1", "answer": str(i + 1)} for i in range(n)]})


MATH = SubjectContext("Wiskunde", True)


# ── detect_subject ────────────────────────────────────────────────────────────


async def test_detect_subject_parses_plain_reply():
    backend = FakeBackend('{"subject":"Wiskunde","isMath":true}')

    result = await ContentGenerator(backend).detect_subject("tafels")

    assert result == SubjectContext("Wiskunde", True)


async def test_detect_subject_parses_fenced_reply():
    backend = FakeBackend('```json\n{"subject":"Wiskunde","isMath":true}\n```')

    result = await ContentGenerator(backend).detect_subject("tafels")

    assert result == SubjectContext("Wiskunde", True)


async def test_detect_subject_uses_subject_schema_and_no_system_instruction():
    backend = FakeBackend('{"subject":"Aardrijkskunde","isMath":false}')

    await ContentGenerator(backend).detect_subject("rivieren")

    parts, schema = backend.generate.call_args.args
    assert schema is SUBJECT_SCHEMA
    assert parts == [TextPart(parts[0].text)]
    assert '"rivieren"' in parts[0].text


async def test_detect_subject_sends_image_before_text():
    backend = FakeBackend('{"subject":"Biologie","isMath":false}')

    await ContentGenerator(backend).detect_subject("", "data:image/png;base64,AAAA")

    parts, _ = backend.generate.call_args.args
    assert parts[0] == ImagePart("image/png", "AAAA")
    assert isinstance(parts[1], TextPart)


@pytest.mark.parametrize(
    "reply",
    [
        "",
        "not json at all",
        "```json\n```",
        '{"subject": "", "isMath": true}',
        '{"subject": "Wiskunde", "isMath": "yes"}',
        '["Wiskunde", true]',
        "null",
    ],
)
async def test_detect_subject_falls_back_on_bad_reply(reply):
    result = await ContentGenerator(FakeBackend(reply)).detect_subject("", None)

    assert result == SubjectContext("Algemeen", False)


async def test_detect_subject_falls_back_on_remote_failure():
    backend = FakeBackend(error=RuntimeError("503 unavailable"))

    result = await ContentGenerator(backend).detect_subject("", None)

    assert result == SubjectContext("Algemeen", False)


async def test_detect_subject_propagates_configuration_error():
    backend = FakeBackend(error=ConfigurationError("API Key ontbreekt"))

    with pytest.raises(ConfigurationError):
        await ContentGenerator(backend).detect_subject("tafels")


async def test_detect_subject_missing_is_math_defaults_false():
    result = await ContentGenerator(FakeBackend('{"subject":"Muziek"}')).detect_subject("noten")

    assert result == SubjectContext("Muziek", False)


# ── generate_bingo_items ──────────────────────────────────────────────────────


async def test_generate_returns_items_in_order_with_sequential_ids():
    backend = FakeBackend(make_items_reply(5))

    items = await ContentGenerator(backend).generate_bingo_items(MATH, "optellen", 5)

    assert [i.id for i in items] == ["item-0", "item-1", "item-2", "item-3", "item-4"]
    assert items[0] == BingoItem("item-0", "0 + 1", "1")
    assert items[4] == BingoItem("item-4", "4 + 1", "5")


async def test_generate_passes_schema_and_system_instruction():
    backend = FakeBackend(make_items_reply(3))

    await ContentGenerator(backend).generate_bingo_items(MATH, "optellen", 3)

    parts, schema = backend.generate.call_args.args
    system = backend.generate.call_args.kwargs["system_instruction"]
    assert schema is ITEMS_SCHEMA
    assert "Wiskunde" in system
    assert "minimaal 3 unieke" in system
    assert 'Onderwerp: "optellen"' in parts[-1].text


async def test_generate_exact_mode_with_image():
    backend = FakeBackend(make_items_reply(2))

    await ContentGenerator(backend).generate_bingo_items(
        MATH, "", 2, "data:image/jpeg;base64,QUJD", GenerationMode.EXACT
    )

    parts, _ = backend.generate.call_args.args
    assert parts[0] == ImagePart("image/jpeg", "QUJD")
    assert "EXTRACTIE" in parts[1].text


async def test_generate_accepts_mode_as_string():
    backend = FakeBackend(make_items_reply(2))

    await ContentGenerator(backend).generate_bingo_items(
        MATH, "", 2, "data:image/jpeg;base64,QUJD", "similar"
    )

    parts, _ = backend.generate.call_args.args
    assert "NIEUWE" in parts[1].text


async def test_generate_fills_missing_fields_with_sentinel():
    reply = json.dumps({"items": [{"problem": "3 \\times 4"}, {"answer": "12"}, "junk", {"problem": "", "answer": None}]})

    items = await ContentGenerator(FakeBackend(reply)).generate_bingo_items(MATH, "", 4)

    assert items[0] == BingoItem("item-0", "3 \\times 4", "Fout")
    assert items[1] == BingoItem("item-1", "Fout", "12")
    assert items[2] == BingoItem("item-2", "Fout", "Fout")
    assert items[3] == BingoItem("item-3", "Fout", "Fout")


async def test_generate_stringifies_numeric_answers():
    reply = json.dumps({"items": [{"problem": "6 \\times 7", "answer": 42}]})

    items = await ContentGenerator(FakeBackend(reply)).generate_bingo_items(MATH, "", 1)

    assert items[0].answer == "42"


@pytest.mark.parametrize("reply", ["", "   ", "{not json", '{"items": []}', '{"other": 1}', "[]"])
async def test_generate_raises_generation_error_on_unusable_reply(reply):
    with pytest.raises(GenerationError, match="Kon geen items genereren"):
        await ContentGenerator(FakeBackend(reply)).generate_bingo_items(MATH, "x", 5)


async def test_generate_wraps_remote_failure():
    backend = FakeBackend(error=RuntimeError("connection reset"))

    with pytest.raises(GenerationError, match="connection reset") as info:
        await ContentGenerator(backend).generate_bingo_items(MATH, "x", 5)

    assert isinstance(info.value.__cause__, RuntimeError)


async def test_generate_propagates_configuration_error_verbatim():
    error = ConfigurationError("API Key ontbreekt of is ongeldig. Controleer GEMINI_API_KEY.")
    backend = FakeBackend(error=error)

    with pytest.raises(ConfigurationError) as info:
        await ContentGenerator(backend).generate_bingo_items(MATH, "x", 5)

    assert info.value is error


async def test_generate_rejects_non_positive_count_without_calling_backend():
    backend = FakeBackend(make_items_reply(1))

    with pytest.raises(ValueError):
        await ContentGenerator(backend).generate_bingo_items(MATH, "x", 0)

    backend.generate.assert_not_called()


# ── pure parsers ──────────────────────────────────────────────────────────────


def test_parse_subject_ignores_extra_keys():
    assert parse_subject('{"subject": "Frans", "isMath": false, "confidence": 0.9}') == SubjectContext(
        "Frans", False
    )


def test_parse_items_handles_fenced_reply():
    items = parse_items("```json\n" + make_items_reply(2) + "\n```")

    assert len(items) == 2


async def test_generate_count_error_message():
    with pytest.raises(ValueError, match="count must be positive, got -1"):
        await ContentGenerator(FakeBackend(make_items_reply(1))).generate_bingo_items(MATH, "x", -1)


def test_backend_default_key_variable_is_api_key():
    class KeylessBackend(FakeBackend):
        def __init__(self) -> None:
            GenerationBackend.__init__(self, None, "fake-model")

    with pytest.raises(ConfigurationError, match="Controleer API_KEY"):
        KeylessBackend()
