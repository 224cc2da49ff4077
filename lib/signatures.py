# =============================================================================
# lib/signatures.py - Signature Image Handling
# =============================================================================
# Drawn signatures arrive from a canvas as base64 data URLs. This module:
# - decodes and sanity-checks the data URL
# - opens it with Pillow (anything Pillow can't read is rejected)
# - detects blank canvases
# - flattens transparency onto white and downscales to a fixed box
# - re-encodes as a compact PNG data URL for storage and PDF embedding
#
# Typed signatures are plain text and only need trimming/length checks.
#
# Usage:
#   from lib.signatures import normalize_drawn_signature
#   png_data_url = normalize_drawn_signature(raw_data_url, max_width=400)
# =============================================================================

from __future__ import annotations

import base64
import binascii
import io
import logging
import re

from PIL import Image

from lib.formatting import format_timestamp
from lib.utils import ApplicationError

# Set up logging for this module
logger = logging.getLogger(__name__)

DATA_URL_RE = re.compile(
    r"^data:image/(?P<subtype>[a-zA-Z0-9.+-]+);base64,(?P<payload>[A-Za-z0-9+/=\s]+)$"
)

# Any pixel darker than this (0-255 grayscale) counts as ink
BLANK_THRESHOLD = 245

MAX_TYPED_SIGNATURE_LENGTH = 100

# Largest width or height accepted before decoding pixel data
MAX_SIGNATURE_DIMENSION = 4000


class SignatureError(ApplicationError):
    """Signature data could not be accepted."""

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault("code", "SIGNATURE_ERROR")
        super().__init__(message, **kwargs)


# =============================================================================
# Decoding
# =============================================================================

def decode_data_url(data_url: str, max_bytes: int | None = None) -> bytes:
    """
    Decode a base64 image data URL to raw bytes.

    Args:
        data_url: "data:image/png;base64,..." string
        max_bytes: Reject payloads that decode larger than this

    Raises:
        SignatureError: If the string is not an image data URL or too large
    """
    match = DATA_URL_RE.match(data_url.strip())
    if not match:
        raise SignatureError(
            message="Drawn signature must be an image data URL",
            suggestion="Send the canvas output of toDataURL('image/png')",
        )

    try:
        raw = base64.b64decode(match.group("payload"), validate=False)
    except (binascii.Error, ValueError) as e:
        raise SignatureError(message=f"Signature image is not valid base64: {e}")

    if max_bytes is not None and len(raw) > max_bytes:
        raise SignatureError(
            message="Signature image is too large",
            details={"size_bytes": len(raw), "max_bytes": max_bytes},
        )
    return raw


def open_signature_image(raw: bytes) -> Image.Image:
    """
    Open raw image bytes with Pillow and force a full decode.

    The header is checked against MAX_SIGNATURE_DIMENSION before any pixel
    data is decoded.

    Raises:
        SignatureError: If Pillow cannot read the image or it is too large
    """
    try:
        image = Image.open(io.BytesIO(raw))
        if max(image.size) > MAX_SIGNATURE_DIMENSION:
            raise SignatureError(
                message="Signature image is too large",
                details={"width": image.width, "height": image.height},
            )
        image.load()
    except (OSError, ValueError, Image.DecompressionBombError) as e:
        raise SignatureError(message=f"Signature image could not be decoded: {e}")

    if image.width == 0 or image.height == 0:
        raise SignatureError(message="Signature image has no pixels")
    return image


def load_signature_image(data_url: str, max_bytes: int | None = None) -> Image.Image:
    """Decode a data URL straight to a Pillow image."""
    return open_signature_image(decode_data_url(data_url, max_bytes=max_bytes))


# =============================================================================
# Normalisation
# =============================================================================

def flatten_on_white(image: Image.Image) -> Image.Image:
    """
    Composite an image onto a white background and return it as RGB.

    Canvas exports are usually transparent PNGs; without flattening,
    transparent areas turn black in some PDF viewers.
    """
    rgba = image.convert("RGBA")
    background = Image.new("RGBA", rgba.size, (255, 255, 255, 255))
    background.alpha_composite(rgba)
    return background.convert("RGB")


def is_blank(image: Image.Image, threshold: int = BLANK_THRESHOLD) -> bool:
    """
    True if the image has no ink once flattened on white.
    """
    darkest, _ = flatten_on_white(image).convert("L").getextrema()
    return darkest >= threshold


def fit_within(image: Image.Image, max_size: int) -> Image.Image:
    """
    Downscale so neither side exceeds max_size. Never upscales.
    """
    if image.width <= max_size and image.height <= max_size:
        return image
    resized = image.copy()
    resized.thumbnail((max_size, max_size), Image.Resampling.LANCZOS)
    return resized


def image_to_data_url(image: Image.Image) -> str:
    """Encode a Pillow image as an optimized PNG data URL."""
    buf = io.BytesIO()
    image.save(buf, format="PNG", optimize=True)
    return "data:image/png;base64," + base64.b64encode(buf.getvalue()).decode("ascii")


def normalize_drawn_signature(
    data_url: str,
    max_width: int = 400,
    max_bytes: int | None = None,
) -> str:
    """
    Validate and compact a drawn signature.

    Args:
        data_url: Raw canvas data URL from the client
        max_width: Box (px) the signature is scaled down to fit
        max_bytes: Upper bound on the decoded upload size

    Returns:
        PNG data URL, flattened on white and downscaled

    Raises:
        SignatureError: If the data is not an image or the canvas is blank
    """
    image = load_signature_image(data_url, max_bytes=max_bytes)

    if is_blank(image):
        raise SignatureError(
            message="Signature is empty",
            suggestion="Draw a signature before submitting",
        )

    normalized = fit_within(flatten_on_white(image), max_width)
    logger.debug(
        f"Normalized signature {image.width}x{image.height} -> "
        f"{normalized.width}x{normalized.height}"
    )
    return image_to_data_url(normalized)


def normalize_typed_signature(text: str) -> str:
    """
    Trim a typed signature and check it is usable.

    Raises:
        SignatureError: If the text is blank or too long
    """
    text = " ".join(text.split())
    if not text:
        raise SignatureError(message="Signature is empty", suggestion="Type your full name")
    if len(text) > MAX_TYPED_SIGNATURE_LENGTH:
        raise SignatureError(
            message=f"Typed signature must be at most {MAX_TYPED_SIGNATURE_LENGTH} characters",
        )
    return text


# =============================================================================
# Display
# =============================================================================

def format_signature_for_display(signature_type: str, data: str, timestamp: str) -> dict[str, str]:
    """
    Prepare a stored signature for display.

    Returns:
        Dict with type, displayData and a human timestamp
        ("Jun 14, 2025, 03:30 PM")
    """
    return {
        "type": signature_type,
        "displayData": data if signature_type == "drawn" else data.strip(),
        "timestamp": format_timestamp(timestamp),
    }
