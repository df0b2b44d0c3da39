import pytest
from pydub import AudioSegment

from online_tts.downloader import DownloadedChunk
from online_tts.merger import merge_audio_chunks


def test_merge_audio_chunks_inserts_silence(tmp_path):
    chunk_dir = tmp_path / "chunks"
    chunk_dir.mkdir()

    durations = [1000, 1500, 800]
    chunks = []

    for index, duration in enumerate(durations, start=1):
        segment = AudioSegment.silent(duration=duration, frame_rate=22050)
        file_path = chunk_dir / f"chunk_{index:03d}.wav"
        segment.export(file_path, format="wav")
        chunks.append(
            DownloadedChunk(
                index=index,
                url=f"http://example.test/{index}",
                file_path=file_path,
                size_bytes=file_path.stat().st_size,
                retries=0,
            )
        )

    output_path = tmp_path / "merged.wav"
    silence_gap = 200

    # Order on disk is restored from chunk indexes.
    merged = merge_audio_chunks(
        list(reversed(chunks)), output_path, silence_gap_ms=silence_gap, output_format="wav"
    )

    assert output_path.exists()
    expected_duration = sum(durations) + silence_gap * (len(durations) - 1)
    assert abs(len(merged) - expected_duration) <= 50


def test_merge_requires_chunks(tmp_path):
    with pytest.raises(ValueError):
        merge_audio_chunks([], tmp_path / "out.wav", output_format="wav")
