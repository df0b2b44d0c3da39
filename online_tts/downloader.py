from __future__ import annotations

import logging
import os
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional

import requests

logger = logging.getLogger(__name__)

__all__ = ["DownloadConfig", "DownloadedChunk", "ChunkDownloader", "DownloadError"]

DEFAULT_USER_AGENT = "Mozilla/5.0 (X11; Linux x86_64) online-tts"


def _default_user_agent() -> str:
    return os.environ.get("ONLINE_TTS_USER_AGENT") or DEFAULT_USER_AGENT


class DownloadError(RuntimeError):
    def __init__(self, url: str, attempts: int, detail: str) -> None:
        super().__init__(f"Failed to download {url} after {attempts} attempt(s): {detail}")
        self.url = url
        self.attempts = attempts


@dataclass
class DownloadConfig:
    """
    Configuration describing where and how TTS audio is fetched.
    """

    chunk_directory: Path = Path("output/chunks")
    chunk_prefix: str = "chunk_"
    chunk_extension: str = ".mp3"
    timeout_seconds: float = 15.0
    user_agent: str = field(default_factory=_default_user_agent)
    max_retries: int = 3
    initial_retry_delay: float = 0.5
    retry_backoff_factor: float = 2.0

    def ensure_directories(self) -> None:
        self.chunk_directory.mkdir(parents=True, exist_ok=True)


@dataclass
class DownloadedChunk:
    index: int
    url: str
    file_path: Path
    size_bytes: int
    retries: int


class ChunkDownloader:
    """
    Fetches TTS urls one after another and stores each response as a chunk file.
    """

    def __init__(self, config: DownloadConfig, session: Optional[requests.Session] = None) -> None:
        self.config = config
        self.session = session or requests.Session()
        self.session.headers.update({"User-Agent": self.config.user_agent})

    def download(self, urls: Iterable[str]) -> List[DownloadedChunk]:
        urls = list(urls)
        if not urls:
            return []

        self.config.ensure_directories()
        chunks: List[DownloadedChunk] = []
        for index, url in enumerate(urls, start=1):
            audio_bytes, retries = self._fetch_with_retry(url)
            chunk_name = f"{self.config.chunk_prefix}{index:03d}{self.config.chunk_extension}"
            path = self.config.chunk_directory / chunk_name
            path.write_bytes(audio_bytes)
            logger.info("Saved chunk %s (%d bytes)", chunk_name, len(audio_bytes))
            chunks.append(
                DownloadedChunk(
                    index=index,
                    url=url,
                    file_path=path,
                    size_bytes=len(audio_bytes),
                    retries=retries,
                )
            )
        return chunks

    def _fetch(self, url: str) -> bytes:
        response = self.session.get(url, timeout=self.config.timeout_seconds)
        response.raise_for_status()
        content = bytes(response.content)
        if not content:
            raise requests.RequestException(f"Empty response body from {url}")
        return content

    def _fetch_with_retry(self, url: str) -> tuple[bytes, int]:
        delay = self.config.initial_retry_delay
        attempt = 0
        while True:
            try:
                return self._fetch(url), attempt
            except requests.RequestException as exc:
                attempt += 1
                if attempt >= self.config.max_retries:
                    logger.error("Download permanently failed after %d attempts: %s", attempt, url)
                    raise DownloadError(url, attempt, str(exc)) from exc
                logger.warning(
                    "Download failed (attempt %d/%d). Retrying in %.2fs.",
                    attempt,
                    self.config.max_retries,
                    delay,
                )
                time.sleep(delay)
                delay *= self.config.retry_backoff_factor
