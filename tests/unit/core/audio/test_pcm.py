"""Unit tests for PCM16 helpers."""

from __future__ import annotations

import base64
import binascii

import pytest

from core.audio import AudioBuffer, decode_pcm16, encode_pcm16, parse_sample_rate, pcm16_from_base64


@pytest.mark.parametrize(
    ("mime_type", "expected"),
    [
        ("audio/L16;codec=pcm;rate=48000", 48000),
        ("audio/L16;rate=16000", 16000),
        ("audio/L16", 24000),
        (None, 24000),
    ],
)
def test_parse_sample_rate(mime_type, expected):
    assert parse_sample_rate(mime_type) == expected


def test_decode_reads_little_endian_signed_samples():
    assert decode_pcm16(b"\x00\x00\xff\x7f\x00\x80\x64\x00") == (0, 32767, -32768, 100)


def test_decode_drops_trailing_odd_byte():
    assert decode_pcm16(b"\x01\x00\x02") == (1,)


def test_encode_is_inverse_of_decode():
    samples = (5, -5, 1234, -32768)

    assert decode_pcm16(encode_pcm16(samples)) == samples


def test_pcm16_from_base64_builds_buffer():
    encoded = base64.b64encode(encode_pcm16([1, 2, 3])).decode("ascii")

    buffer = pcm16_from_base64(encoded, 8000)

    assert buffer == AudioBuffer(samples=(1, 2, 3), sample_rate=8000)
    assert len(buffer) == 3
    assert buffer.duration_seconds == pytest.approx(3 / 8000)


def test_pcm16_from_base64_rejects_garbage():
    with pytest.raises(binascii.Error):
        pcm16_from_base64("not*base64!")
