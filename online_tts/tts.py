from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import List, Optional
from urllib.parse import quote, urlencode

from . import languages
from .languages import Engine, Language
from .split_text import split_by_index

logger = logging.getLogger(__name__)

__all__ = [
    "Voice",
    "Emotion",
    "TtsError",
    "TtsResult",
    "UnsupportedParameter",
    "OnlineTts",
    "VOICE_CODES",
    "EMOTION_CODES",
    "GOOGLE_TTS_URL",
    "YANDEX_TTS_URL",
    "GOOGLE_TTS_LIMIT",
    "YANDEX_TTS_LIMIT",
    "generate_urls",
    "language_api_code",
    "voice_api_code",
    "emotion_api_code",
    "voice_code",
    "emotion_code",
    "voice_from_code",
    "emotion_from_code",
]

GOOGLE_TTS_URL = "http://translate.googleapis.com/translate_tts"
YANDEX_TTS_URL = "https://tts.voicetech.yandex.net/tts"

# Maximum characters per request
GOOGLE_TTS_LIMIT = 200
YANDEX_TTS_LIMIT = 1400

# Indexed by Voice / Emotion ordinal, keep the order in sync with the enums.
VOICE_CODES = ("zahar", "ermil", "jane", "oksana", "alyss", "omazh")
EMOTION_CODES = ("neutral", "good", "evil")

YANDEX_LANGUAGE_CODES = {
    Language.RUSSIAN: "ru_RU",
    Language.TATAR: "tr_TR",
    Language.ENGLISH: "en_GB",
}


class Voice(enum.IntEnum):
    NO_VOICE = -1
    ZAHAR = 0
    ERMIL = 1
    JANE = 2
    OKSANA = 3
    ALYSS = 4
    OMAZH = 5


class Emotion(enum.IntEnum):
    NO_EMOTION = -1
    NEUTRAL = 0
    GOOD = 1
    EVIL = 2


class TtsError(enum.Enum):
    NO_ERROR = "NoError"
    UNSUPPORTED_ENGINE = "UnsupportedEngine"
    UNSUPPORTED_LANGUAGE = "UnsupportedLanguage"
    UNSUPPORTED_VOICE = "UnsupportedVoice"
    UNSUPPORTED_EMOTION = "UnsupportedEmotion"


class UnsupportedParameter(ValueError):
    """
    Raised by the code lookups when an engine cannot handle a parameter.
    """

    def __init__(self, error: TtsError, message: str) -> None:
        super().__init__(message)
        self.error = error
        self.message = message


@dataclass
class TtsResult:
    """
    Outcome of a single URL generation call.

    ``urls`` holds whatever was built before a failure, so check ``ok`` (or
    ``error``) rather than the emptiness of the list.
    """

    urls: List[str] = field(default_factory=list)
    error: TtsError = TtsError.NO_ERROR
    error_string: str = ""

    @property
    def ok(self) -> bool:
        return self.error is TtsError.NO_ERROR


def generate_urls(
    text: str,
    engine: Engine,
    language: Language,
    voice: Voice = Voice.NO_VOICE,
    emotion: Emotion = Emotion.NO_EMOTION,
) -> TtsResult:
    """
    Build the ordered list of TTS request URLs that together speak ``text``.

    Lookup failures never raise; they are reported through the returned
    :class:`TtsResult`.
    """
    result = TtsResult()
    try:
        if engine is Engine.GOOGLE:
            lang_code = language_api_code(engine, language)
            for chunk in split_by_index(text, GOOGLE_TTS_LIMIT):
                result.urls.append(
                    _build_url(
                        GOOGLE_TTS_URL,
                        [("ie", "UTF-8"), ("client", "gtx"), ("tl", lang_code), ("q", chunk)],
                    )
                )
        elif engine is Engine.YANDEX:
            lang_code = language_api_code(engine, language)
            speaker = voice_api_code(engine, voice)
            emotion_string = emotion_api_code(engine, emotion)
            for chunk in split_by_index(text, YANDEX_TTS_LIMIT):
                result.urls.append(
                    _build_url(
                        YANDEX_TTS_URL,
                        [
                            ("text", chunk),
                            ("lang", lang_code),
                            ("speaker", speaker),
                            ("emotion", emotion_string),
                            ("format", "mp3"),
                        ],
                    )
                )
        else:
            raise UnsupportedParameter(
                TtsError.UNSUPPORTED_ENGINE,
                f"{engine.label} engine does not support TTS",
            )
    except UnsupportedParameter as exc:
        logger.warning("%s", exc.message)
        result.error = exc.error
        result.error_string = exc.message
        return result

    logger.debug("Generated %d %s TTS url(s).", len(result.urls), engine.label)
    return result


def language_api_code(engine: Engine, language: Language) -> str:
    """
    Return the engine-specific language code used by the TTS endpoint.
    """
    code: Optional[str] = None
    if engine is Engine.GOOGLE:
        # Google TTS uses the translation codes, but cannot speak "auto".
        if language is not Language.AUTO:
            code = languages.language_code(engine, language)
    elif engine is Engine.YANDEX:
        code = YANDEX_LANGUAGE_CODES.get(language)

    if code is None:
        raise UnsupportedParameter(
            TtsError.UNSUPPORTED_LANGUAGE,
            f"Selected language {language.label} is not supported by: {engine.label}",
        )
    return code


def voice_api_code(engine: Engine, voice: Voice) -> str:
    """Return the Yandex speaker code for ``voice``."""
    if engine is Engine.YANDEX and voice != Voice.NO_VOICE:
        code = voice_code(voice)
        if code is not None:
            return code

    raise UnsupportedParameter(
        TtsError.UNSUPPORTED_VOICE,
        f"Selected voice {_enum_label(voice)} is not supported by: {engine.label}",
    )


def emotion_api_code(engine: Engine, emotion: Emotion) -> str:
    """Return the Yandex emotion code for ``emotion``."""
    if engine is Engine.YANDEX and emotion != Emotion.NO_EMOTION:
        code = emotion_code(emotion)
        if code is not None:
            return code

    raise UnsupportedParameter(
        TtsError.UNSUPPORTED_EMOTION,
        f"Selected emotion {_enum_label(emotion)} is not supported by: {engine.label}",
    )


def voice_code(voice: Voice) -> Optional[str]:
    if 0 <= voice < len(VOICE_CODES):
        return VOICE_CODES[voice]
    return None


def emotion_code(emotion: Emotion) -> Optional[str]:
    if 0 <= emotion < len(EMOTION_CODES):
        return EMOTION_CODES[emotion]
    return None


def voice_from_code(code: str) -> Voice:
    try:
        return Voice(VOICE_CODES.index(code))
    except ValueError:
        return Voice.NO_VOICE


def emotion_from_code(code: str) -> Emotion:
    try:
        return Emotion(EMOTION_CODES.index(code))
    except ValueError:
        return Emotion.NO_EMOTION


class OnlineTts:
    """
    Stateful convenience wrapper keeping the result of the last call.

    Every call to :meth:`generate_urls` replaces the previous result, errors
    included.
    """

    def __init__(self) -> None:
        self._result = TtsResult()

    def generate_urls(
        self,
        text: str,
        engine: Engine,
        language: Language,
        voice: Voice = Voice.NO_VOICE,
        emotion: Emotion = Emotion.NO_EMOTION,
    ) -> TtsResult:
        self._result = generate_urls(text, engine, language, voice, emotion)
        return self._result

    def media(self) -> List[str]:
        return list(self._result.urls)

    def error(self) -> TtsError:
        return self._result.error

    def error_string(self) -> str:
        return self._result.error_string


def _build_url(base: str, params) -> str:
    # quote() with safe="" leaves only unreserved characters as they are.
    # Lone surrogates cannot be UTF-8 encoded and become "?".
    query = urlencode(params, quote_via=quote, safe="", encoding="utf-8", errors="replace")
    return f"{base}?{query}"


def _enum_label(member: enum.Enum) -> str:
    return "".join(part.capitalize() for part in member.name.split("_"))
