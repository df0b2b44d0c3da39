#!/usr/bin/env python3
from __future__ import annotations

import argparse
import enum
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence, Type, TypeVar

from online_tts.downloader import ChunkDownloader, DownloadConfig, DownloadedChunk
from online_tts.languages import Engine, Language
from online_tts.merger import merge_audio_chunks
from online_tts.metadata import ManifestBuilder, TtsRequest
from online_tts.tts import Emotion, Voice, generate_urls

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FATAL = 1
EXIT_TTS_ERROR = 2

E = TypeVar("E", bound=enum.Enum)


def _enum_parser(enum_type: Type[E]):
    def parse(value: str) -> E:
        key = value.strip().upper().replace("-", "_")
        try:
            return enum_type[key]
        except KeyError:
            choices = ", ".join(member.name.lower() for member in enum_type)
            raise argparse.ArgumentTypeError(f"invalid choice {value!r} (choose from {choices})")

    parse.__name__ = enum_type.__name__.lower()
    return parse


def parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Build request urls for online TTS services.")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--text", help="Text to speak.")
    source.add_argument("--input", help="Path of a text file to speak.")
    parser.add_argument("--input-encoding", default="utf-8", help="Encoding used for input file.")
    parser.add_argument("--engine", type=_enum_parser(Engine), default=Engine.GOOGLE, help="TTS engine (google, yandex).")
    parser.add_argument("--language", type=_enum_parser(Language), default=Language.ENGLISH, help="Language name, e.g. english or russian.")
    parser.add_argument("--voice", type=_enum_parser(Voice), default=Voice.NO_VOICE, help="Yandex voice (zahar, ermil, jane, oksana, alyss, omazh).")
    parser.add_argument("--emotion", type=_enum_parser(Emotion), default=Emotion.NO_EMOTION, help="Yandex emotion (neutral, good, evil).")
    parser.add_argument("--manifest-output", help="Optional path for a JSON manifest of the run.")
    parser.add_argument("--download", action="store_true", help="Fetch the generated urls and merge the audio.")
    parser.add_argument("--chunk-dir", default="./output/chunks", help="Directory to store downloaded chunk files.")
    parser.add_argument("--merge-output", default="./output/speech.mp3", help="Path for merged output audio.")
    parser.add_argument("--keep-chunks", action="store_true", help="Keep chunk files after merging.")
    parser.add_argument("--silence-gap-ms", type=int, default=0, help="Silence inserted between chunks in milliseconds.")
    parser.add_argument("--timeout", type=float, default=15.0, help="HTTP timeout per request in seconds.")
    parser.add_argument("--max-retries", type=int, default=3, help="Maximum download attempts per url.")
    parser.add_argument("--retry-initial-delay", type=float, default=0.5, help="Initial retry delay in seconds.")
    parser.add_argument("--retry-backoff", type=float, default=2.0, help="Multiplier for retry backoff.")
    parser.add_argument("--debug", action="store_true", help="Enable verbose logging.")
    return parser.parse_args(argv)


def configure_logging(debug: bool) -> None:
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
    )


def load_input_text(args: argparse.Namespace) -> str:
    if args.text is not None:
        return args.text
    path = Path(args.input)
    if not path.exists():
        raise FileNotFoundError(f"Input file does not exist: {path}")
    return path.read_text(encoding=args.input_encoding)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    configure_logging(args.debug)

    request = TtsRequest(
        text=load_input_text(args),
        engine=args.engine,
        language=args.language,
        voice=args.voice,
        emotion=args.emotion,
    )
    result = generate_urls(request.text, request.engine, request.language, request.voice, request.emotion)

    manifest_builder = ManifestBuilder(Path(args.manifest_output)) if args.manifest_output else None
    if not result.ok:
        logger.error("Unable to build TTS urls: %s", result.error_string)
        if manifest_builder:
            manifest_builder.write_manifest(manifest_builder.build_manifest(request, result))
        return EXIT_TTS_ERROR

    if not result.urls:
        logger.warning("Input text is empty. Nothing to speak.")

    for url in result.urls:
        print(url)

    chunks: list[DownloadedChunk] = []
    merge_output: Optional[Path] = None
    if args.download and result.urls:
        config = DownloadConfig(
            chunk_directory=Path(args.chunk_dir),
            timeout_seconds=args.timeout,
            max_retries=args.max_retries,
            initial_retry_delay=args.retry_initial_delay,
            retry_backoff_factor=args.retry_backoff,
        )
        chunks = ChunkDownloader(config).download(result.urls)
        merge_output = Path(args.merge_output)
        output_format = merge_output.suffix.lstrip(".").lower() or "mp3"
        merge_audio_chunks(
            chunks,
            merge_output,
            silence_gap_ms=args.silence_gap_ms,
            output_format=output_format,
        )
        if not args.keep_chunks:
            _cleanup_chunks(chunks)
        logger.info("Speech saved to %s", merge_output)

    if manifest_builder:
        manifest = manifest_builder.build_manifest(
            request, result, chunks=chunks, final_output=merge_output
        )
        manifest_builder.write_manifest(manifest)
        logger.info("Manifest written to %s", manifest_builder.output_path)

    return EXIT_OK


def _cleanup_chunks(chunks: Sequence[DownloadedChunk]) -> None:
    for chunk in chunks:
        try:
            chunk.file_path.unlink(missing_ok=True)
        except OSError as exc:  # pragma: no cover - best effort
            logger.warning("Failed to delete chunk %s: %s", chunk.file_path, exc)


def run() -> None:
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        logger.error("Interrupted by user.")
        sys.exit(EXIT_FATAL)
    except Exception as exc:
        logger.exception("Fatal error: %s", exc)
        sys.exit(EXIT_FATAL)


if __name__ == "__main__":
    run()
