"""Encoding detection and decoding of raw file bytes."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import chardet

from .errors import DecodeFailure

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DecodedText:
    """Decoded file contents plus the encoding they were decoded with."""

    text: str
    encoding: str
    confidence: float

    def __len__(self) -> int:
        return len(self.text)


def detect_encoding(raw: bytes) -> tuple[str | None, float]:
    """Guess the encoding of *raw*.

    Returns:
        ``(encoding, confidence)``. The encoding is ``None`` when no guess
        could be made.
    """
    if not raw:
        return "ascii", 1.0
    result = chardet.detect(raw)
    return result.get("encoding"), float(result.get("confidence") or 0.0)


def decode(
    raw: bytes,
    encoding: str,
    confidence: float = 1.0,
    path: str = "<bytes>",
) -> DecodedText:
    """Decode *raw* with *encoding*.

    Raises:
        DecodeFailure: If the codec is unknown or the bytes are invalid for it.
    """
    try:
        text = raw.decode(encoding)
    except LookupError:
        raise DecodeFailure(path, f"unknown encoding {encoding!r}") from None
    except UnicodeDecodeError as e:
        raise DecodeFailure(path, f"cannot decode as {encoding}: {e.reason}") from e
    return DecodedText(text=text, encoding=encoding, confidence=confidence)


def decode_bytes(raw: bytes, path: str = "<bytes>") -> DecodedText:
    """Detect the encoding of *raw* and decode it."""
    encoding, confidence = detect_encoding(raw)
    if encoding is None:
        raise DecodeFailure(path, "could not detect encoding")
    logger.debug("%s encoding %s (confidence %.2f)", path, encoding, confidence)
    return decode(raw, encoding, confidence=confidence, path=path)


def read_text(path: str | Path) -> DecodedText:
    """Read a file from disk and decode it.

    Raises:
        DecodeFailure: If the file cannot be read or decoded.
    """
    path_str = str(path)
    try:
        raw = Path(path).read_bytes()
    except OSError as e:
        raise DecodeFailure(path_str, e.strerror or str(e)) from e
    return decode_bytes(raw, path=path_str)
