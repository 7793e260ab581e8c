"""Entry point — wires Config → backend → ContentGenerator and prints the item pool."""
import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from rich.text import Text

from bingogen.backends.factory import create_backend
from bingogen.config import Config
from bingogen.constants import MSG_ERR_CLI_COUNT, MSG_ERR_IMAGE_UNREADABLE, MSG_NEED_INPUT
from bingogen.errors import ConfigurationError, GenerationError
from bingogen.generator import ContentGenerator
from bingogen.models import BingoItem, GenerationMode, SubjectContext
from bingogen.parsing import encode_data_url

logger = logging.getLogger(__name__)

EXIT_GENERATION_ERROR = 1
EXIT_CONFIGURATION_ERROR = 2


def _setup_logging(level: str) -> None:
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    list(map(root.removeHandler, root.handlers[:]))
    root.addHandler(RichHandler(rich_tracebacks=True))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bingogen",
        description="Generate a question/answer pool for a classroom bingo game.",
    )
    parser.add_argument("--topic", default="", help="free-text topic, e.g. 'tafels van 7'")
    parser.add_argument("--image", type=Path, help="worksheet or example image to work from")
    parser.add_argument("--count", type=int, help="number of items (default: BINGO_ITEM_COUNT)")
    parser.add_argument(
        "--mode",
        choices=[m.value for m in GenerationMode],
        default=GenerationMode.SIMILAR.value,
        help="with --image: copy items exactly or generate similar ones",
    )
    parser.add_argument("--json", action="store_true", help="print JSON instead of a table")
    return parser


async def run(
    generator: ContentGenerator,
    topic: str,
    count: int,
    image: str | None,
    mode: GenerationMode,
) -> tuple[SubjectContext, list[BingoItem]]:
    context = await generator.detect_subject(topic, image)
    items = await generator.generate_bingo_items(context, topic, count, image, mode)
    return context, items


def render(context: SubjectContext, items: list[BingoItem], as_json: bool, console: Console) -> None:
    match as_json:
        case True:
            payload = {
                "context": context.to_dict(),
                "items": [{"id": i.id, "problem": i.problem, "answer": i.answer} for i in items],
            }
            console.print_json(json.dumps(payload, ensure_ascii=False))
        case False:
            table = Table(title=Text(f"{context.subject} — {len(items)} items"))
            table.add_column("id", style="dim")
            table.add_column("problem")
            table.add_column("answer", style="bold")
            for item in items:
                table.add_row(item.id, Text(item.problem), Text(item.answer))
            console.print(table)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.topic.strip() and args.image is None:
        parser.error(MSG_NEED_INPUT)
    if args.count is not None and args.count < 1:
        parser.error(MSG_ERR_CLI_COUNT % args.count)
    try:
        image = encode_data_url(args.image) if args.image is not None else None
    except OSError as exc:
        parser.error(MSG_ERR_IMAGE_UNREADABLE % exc)

    try:
        config = Config.from_env()
        _setup_logging(config.log_level)
        generator = ContentGenerator(create_backend(config))
    except ConfigurationError as exc:
        logger.error("%s", exc)
        return EXIT_CONFIGURATION_ERROR

    count = args.count or config.item_count
    try:
        context, items = asyncio.run(
            run(generator, args.topic, count, image, GenerationMode(args.mode))
        )
    except ConfigurationError as exc:
        logger.error("%s", exc)
        return EXIT_CONFIGURATION_ERROR
    except GenerationError as exc:
        logger.error("%s", exc)
        return EXIT_GENERATION_ERROR

    render(context, items, args.json, Console())
    return 0


if __name__ == "__main__":
    sys.exit(main())
