"""
URL builder for online text-to-speech services.

This package exposes the building blocks used by the ``tts_urls`` entry point:

- Engine and language identifiers with their translation codes (`languages`).
- The text splitter that respects per-request length limits (`split_text`).
- The Google/Yandex TTS url builder (`tts`).
- Optional fetching and merging of the produced audio (`downloader`, `merger`).
- Playlist manifest helpers (`metadata`).
"""

from .languages import Engine, Language, language_code, language_from_code
from .split_text import get_split_index, split_by_index
from .tts import (
    Emotion,
    OnlineTts,
    TtsError,
    TtsResult,
    UnsupportedParameter,
    Voice,
    emotion_api_code,
    generate_urls,
    language_api_code,
    voice_api_code,
)
from .downloader import ChunkDownloader, DownloadConfig, DownloadedChunk, DownloadError
from .merger import merge_audio_chunks
from .metadata import ManifestBuilder, TtsRequest

__all__ = [
    "Engine",
    "Language",
    "language_code",
    "language_from_code",
    "get_split_index",
    "split_by_index",
    "Voice",
    "Emotion",
    "TtsError",
    "TtsResult",
    "UnsupportedParameter",
    "OnlineTts",
    "generate_urls",
    "language_api_code",
    "voice_api_code",
    "emotion_api_code",
    "ChunkDownloader",
    "DownloadConfig",
    "DownloadedChunk",
    "DownloadError",
    "merge_audio_chunks",
    "ManifestBuilder",
    "TtsRequest",
]
