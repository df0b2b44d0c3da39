from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, Optional, Sequence

from .downloader import DownloadedChunk
from .languages import Engine, Language
from .tts import Emotion, TtsResult, Voice

__all__ = ["ManifestBuilder", "TtsRequest"]


@dataclass(frozen=True)
class TtsRequest:
    text: str
    engine: Engine
    language: Language
    voice: Voice = Voice.NO_VOICE
    emotion: Emotion = Emotion.NO_EMOTION


@dataclass
class ManifestBuilder:
    """
    Builds the JSON playlist manifest describing one URL generation run.
    """

    output_path: Path

    def build_manifest(
        self,
        request: TtsRequest,
        result: TtsResult,
        *,
        chunks: Optional[Sequence[DownloadedChunk]] = None,
        final_output: Optional[Path] = None,
    ) -> Dict[str, object]:
        manifest: Dict[str, object] = {
            "created_at": datetime.now(timezone.utc).isoformat(),
            "engine": request.engine.label,
            "language": request.language.label,
            "voice": request.voice.name.lower(),
            "emotion": request.emotion.name.lower(),
            "characters": len(request.text),
            "urls": list(result.urls),
            "error": result.error.value,
            "error_string": result.error_string,
        }

        if chunks:
            manifest["chunks"] = [
                {
                    "index": chunk.index,
                    "file": chunk.file_path.name,
                    "bytes": chunk.size_bytes,
                    "retries": chunk.retries,
                }
                for chunk in chunks
            ]
            manifest["retries"] = sum(chunk.retries for chunk in chunks)
        if final_output is not None:
            manifest["final_output"] = str(final_output)

        return manifest

    def write_manifest(self, manifest: Dict[str, object]) -> None:
        self.output_path.parent.mkdir(parents=True, exist_ok=True)
        with self.output_path.open("w", encoding="utf-8") as f:
            json.dump(manifest, f, ensure_ascii=False, indent=2)
