"""PCM16 decoding and WAV container helpers."""

from .pcm import AudioBuffer, decode_pcm16, encode_pcm16, parse_sample_rate, pcm16_from_base64
from .wav import WAV_HEADER_SIZE, decode_wav, encode_wav

__all__ = [
    "AudioBuffer",
    "WAV_HEADER_SIZE",
    "decode_pcm16",
    "decode_wav",
    "encode_pcm16",
    "encode_wav",
    "parse_sample_rate",
    "pcm16_from_base64",
]
