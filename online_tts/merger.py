from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Sequence

from pydub import AudioSegment

from .downloader import DownloadedChunk

logger = logging.getLogger(__name__)

__all__ = ["merge_audio_chunks"]


def merge_audio_chunks(
    chunks: Sequence[DownloadedChunk],
    output_path: Path,
    *,
    silence_gap_ms: int = 0,
    output_format: str = "mp3",
) -> AudioSegment:
    """
    Join downloaded chunks, in index order, into the utterance they were cut from.

    Chunk files are decoded according to their suffix, so mp3 responses need
    ffmpeg to be available to pydub.
    """
    if not chunks:
        raise ValueError("No chunks provided for merging.")

    segments: List[AudioSegment] = [
        _load_chunk(chunk) for chunk in sorted(chunks, key=lambda chunk: chunk.index)
    ]

    merged = segments[0]
    for segment in segments[1:]:
        if silence_gap_ms > 0:
            merged += _silence_like(segment, silence_gap_ms)
        merged += segment

    output_path.parent.mkdir(parents=True, exist_ok=True)
    merged.export(output_path, format=output_format)
    logger.info("Merged %d chunks into %s (%d ms)", len(segments), output_path, len(merged))
    return merged


def _load_chunk(chunk: DownloadedChunk) -> AudioSegment:
    fmt = chunk.file_path.suffix.lstrip(".").lower() or None
    logger.debug("Decoding chunk %d from %s", chunk.index, chunk.file_path)
    return AudioSegment.from_file(chunk.file_path, format=fmt)


def _silence_like(segment: AudioSegment, duration_ms: int) -> AudioSegment:
    return (
        AudioSegment.silent(duration=duration_ms, frame_rate=segment.frame_rate)
        .set_channels(segment.channels)
        .set_sample_width(segment.sample_width)
    )
