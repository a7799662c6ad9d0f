"""
Inline image payload handling.

Clients submit photos as base64 text, usually as a data URI such as
``data:image/png;base64,iVBORw0...``. The MIME marker is stripped and
the remainder decoded to raw bytes.
"""
import base64
import binascii
import io
import re

from PIL import Image, UnidentifiedImageError

from .conf import blog_settings
from .exceptions import DecodeError

WHITESPACE = re.compile(r"\s+")


def _marker_pattern():
    subtypes = "|".join(re.escape(t) for t in blog_settings.ALLOWED_IMAGE_TYPES)
    return re.compile(rf"^data:image/({subtypes});base64,")


def decode_inline_image(payload):
    """
    Decode an inline image payload to bytes.

    Args:
        payload: base64 text, optionally prefixed with a data URI marker
            for one of the allowed image types.

    Returns:
        The decoded bytes.

    Raises:
        DecodeError: if the payload is not valid base64 or decodes to nothing.
    """
    if not isinstance(payload, str):
        raise DecodeError("Image payload must be a string")

    encoded = _marker_pattern().sub("", payload.strip(), count=1)
    if encoded.startswith("data:"):
        raise DecodeError("Unsupported image type")

    # MIME and CLI encoders wrap lines every 76 columns
    encoded = WHITESPACE.sub("", encoded)

    try:
        data = base64.b64decode(encoded, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise DecodeError(f"Malformed image payload: {exc}") from exc

    if not data:
        raise DecodeError("Image payload is empty")
    return data


def read_dimensions(data):
    """Return (width, height) of the image bytes, or (None, None)."""
    try:
        with Image.open(io.BytesIO(data)) as img:
            return img.size
    except (UnidentifiedImageError, OSError, ValueError):
        return None, None
