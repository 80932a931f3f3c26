"""Tests for encoding detection and decoding."""

import pytest

from sibylline_spellcheck import decoding
from sibylline_spellcheck.decoding import (
    DecodedText,
    decode,
    decode_bytes,
    detect_encoding,
    read_text,
)
from sibylline_spellcheck.errors import DecodeFailure


class TestDetectEncoding:
    def test_empty_bytes(self):
        assert detect_encoding(b"") == ("ascii", 1.0)

    def test_ascii(self):
        encoding, confidence = detect_encoding(b"plain ascii text\n")
        assert encoding.lower() == "ascii"
        assert confidence > 0.9

    def test_utf8_bom(self):
        encoding, _ = detect_encoding(b"\xef\xbb\xbfhello world")
        assert encoding.lower() == "utf-8-sig"


class TestDecode:
    def test_decode_returns_text(self):
        decoded = decode(b"hello", "ascii")
        assert decoded == DecodedText(text="hello", encoding="ascii", confidence=1.0)
        assert len(decoded) == 5

    def test_invalid_bytes(self):
        with pytest.raises(DecodeFailure, match="cannot decode as utf-8"):
            decode(b"\xff\xfe\xfa", "utf-8", path="bad.txt")

    def test_unknown_codec(self):
        with pytest.raises(DecodeFailure, match="unknown encoding"):
            decode(b"abc", "no-such-codec")

    def test_bom_stripped(self):
        decoded = decode_bytes(b"\xef\xbb\xbfTeh quick fox")
        assert decoded.text == "Teh quick fox"

    def test_utf8_text(self):
        text = "naïve café résumé, déjà vu, façade. " * 4
        decoded = decode_bytes(text.encode("utf-8"))
        assert decoded.text == text

    def test_utf16_with_bom(self):
        text = "alpha\nbeta mistak\n"
        decoded = decode_bytes(text.encode("utf-16"))
        assert decoded.text == text

    def test_undetected_encoding(self, monkeypatch):
        monkeypatch.setattr(
            decoding.chardet, "detect", lambda raw: {"encoding": None, "confidence": 0.0}
        )
        with pytest.raises(DecodeFailure, match="could not detect encoding") as excinfo:
            decode_bytes(b"\x00\x01\x02", path="blob.bin")
        assert excinfo.value.path == "blob.bin"


class TestReadText:
    def test_reads_file(self, tmp_path):
        path = tmp_path / "a.txt"
        path.write_bytes(b"alpha\nbeta\n")
        decoded = read_text(path)
        assert decoded.text == "alpha\nbeta\n"

    def test_missing_file(self, tmp_path):
        with pytest.raises(DecodeFailure) as excinfo:
            read_text(tmp_path / "missing.txt")
        assert excinfo.value.path.endswith("missing.txt")
