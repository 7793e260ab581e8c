"""Pure text helpers: code-fence cleanup and data-URL handling."""
import base64
import mimetypes
import re
from pathlib import Path

from bingogen.constants import DATA_URL_FALLBACK_MIME
from bingogen.models import ImagePart

_OPENING_FENCE = re.compile(r"^```(?:json)?\s*", re.IGNORECASE)
_CLOSING_FENCE = re.compile(r"\s*```$")
_DATA_URL = re.compile(r"^data:(.+);base64,(.+)$")
_IMAGE_PREFIX = re.compile(r"^data:image/\w+;base64,")


def strip_code_fences(text: str | None) -> str:
    """Remove a Markdown code fence (```json ... ``` or ``` ... ```) around a reply."""
    match text:
        case None | "":
            return ""
        case _:
            stripped = _OPENING_FENCE.sub("", text.strip(), count=1)
            return _CLOSING_FENCE.sub("", stripped, count=1).strip()


def parse_data_url(data_url: str) -> ImagePart:
    """Split ``data:<mime>;base64,<payload>``; anything else is treated as raw JPEG base64."""
    match _DATA_URL.match(data_url):
        case None:
            return ImagePart(
                mime_type=DATA_URL_FALLBACK_MIME,
                data=_IMAGE_PREFIX.sub("", data_url),
            )
        case m:
            return ImagePart(mime_type=m.group(1), data=m.group(2))


def encode_data_url(path: Path) -> str:
    """Read an image file into a data URL, guessing the mime type from its suffix."""
    mime_type, _ = mimetypes.guess_type(path.name)
    payload = base64.standard_b64encode(path.read_bytes()).decode()
    return f"data:{mime_type or DATA_URL_FALLBACK_MIME};base64,{payload}"
