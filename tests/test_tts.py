from urllib.parse import parse_qs, parse_qsl, urlsplit

import pytest

from online_tts.languages import Engine, Language
from online_tts.tts import (
    EMOTION_CODES,
    GOOGLE_TTS_URL,
    VOICE_CODES,
    YANDEX_TTS_URL,
    Emotion,
    OnlineTts,
    TtsError,
    UnsupportedParameter,
    Voice,
    emotion_api_code,
    emotion_code,
    emotion_from_code,
    generate_urls,
    language_api_code,
    voice_api_code,
    voice_code,
    voice_from_code,
)


def _param(url, name):
    return parse_qs(urlsplit(url).query, keep_blank_values=True)[name][0]


def test_google_chunks_reassemble_original_text():
    text = "The quick brown fox jumps over the lazy dog. " * 20 + "Done & dusted?"
    result = generate_urls(text, Engine.GOOGLE, Language.ENGLISH)

    assert result.ok
    assert len(result.urls) > 1
    chunks = [_param(url, "q") for url in result.urls]
    assert "".join(chunks) == text
    assert all(len(chunk) <= 200 for chunk in chunks)


def test_google_url_layout():
    result = generate_urls("Привет, мир", Engine.GOOGLE, Language.RUSSIAN)

    assert len(result.urls) == 1
    url = result.urls[0]
    assert url.startswith(GOOGLE_TTS_URL + "?")
    assert parse_qsl(urlsplit(url).query) == [
        ("ie", "UTF-8"),
        ("client", "gtx"),
        ("tl", "ru"),
        ("q", "Привет, мир"),
    ]


def test_percent_encoding_escapes_reserved_characters():
    result = generate_urls("a b&c=d/e+f~g_h.i-j", Engine.GOOGLE, Language.ENGLISH)
    query = urlsplit(result.urls[0]).query

    assert query.endswith("q=a%20b%26c%3Dd%2Fe%2Bf~g_h.i-j")


def test_hard_cut_without_whitespace():
    text = "x" * 250
    result = generate_urls(text, Engine.GOOGLE, Language.ENGLISH)

    assert len(result.urls) == 2
    assert [len(_param(url, "q")) for url in result.urls] == [200, 50]


def test_yandex_chunks_and_parameters():
    text = "Съешь же ещё этих мягких французских булок. " * 60
    result = generate_urls(text, Engine.YANDEX, Language.RUSSIAN, Voice.ALYSS, Emotion.GOOD)

    assert result.ok
    assert len(result.urls) > 1
    for url in result.urls:
        assert url.startswith(YANDEX_TTS_URL + "?")
        names = [name for name, _ in parse_qsl(urlsplit(url).query)]
        assert names == ["text", "lang", "speaker", "emotion", "format"]
        assert _param(url, "lang") == "ru_RU"
        assert _param(url, "speaker") == "alyss"
        assert _param(url, "emotion") == "good"
        assert _param(url, "format") == "mp3"
    chunks = [_param(url, "text") for url in result.urls]
    assert "".join(chunks) == text
    assert all(len(chunk) <= 1400 for chunk in chunks)


@pytest.mark.parametrize(
    "engine, language, voice, emotion",
    [
        (Engine.GOOGLE, Language.GERMAN, Voice.NO_VOICE, Emotion.NO_EMOTION),
        (Engine.YANDEX, Language.TATAR, Voice.OMAZH, Emotion.EVIL),
    ],
)
def test_empty_text_yields_no_urls_and_no_error(engine, language, voice, emotion):
    result = generate_urls("", engine, language, voice, emotion)

    assert result.urls == []
    assert result.error is TtsError.NO_ERROR
    assert result.ok


def test_bing_is_unsupported():
    result = generate_urls("hello", Engine.BING, Language.ENGLISH, Voice.JANE, Emotion.NEUTRAL)

    assert result.urls == []
    assert result.error is TtsError.UNSUPPORTED_ENGINE
    assert result.error_string == "Bing engine does not support TTS"


def test_google_rejects_auto_language():
    result = generate_urls("hello", Engine.GOOGLE, Language.AUTO)

    assert result.urls == []
    assert result.error is TtsError.UNSUPPORTED_LANGUAGE
    assert result.error_string == "Selected language Auto is not supported by: Google"


def test_google_rejects_language_without_code():
    result = generate_urls("hello", Engine.GOOGLE, Language.BASHKIR)

    assert result.error is TtsError.UNSUPPORTED_LANGUAGE


def test_yandex_requires_voice():
    result = generate_urls("hello", Engine.YANDEX, Language.ENGLISH, Voice.NO_VOICE, Emotion.GOOD)

    assert result.urls == []
    assert result.error is TtsError.UNSUPPORTED_VOICE
    assert result.error_string == "Selected voice NoVoice is not supported by: Yandex"


def test_yandex_requires_emotion():
    result = generate_urls("hello", Engine.YANDEX, Language.ENGLISH, Voice.JANE, Emotion.NO_EMOTION)

    assert result.urls == []
    assert result.error is TtsError.UNSUPPORTED_EMOTION


def test_yandex_checks_language_first():
    result = generate_urls("hello", Engine.YANDEX, Language.FRENCH, Voice.NO_VOICE, Emotion.NO_EMOTION)

    assert result.error is TtsError.UNSUPPORTED_LANGUAGE


def test_language_api_codes():
    assert language_api_code(Engine.GOOGLE, Language.SIMPLIFIED_CHINESE) == "zh-CN"
    assert language_api_code(Engine.YANDEX, Language.RUSSIAN) == "ru_RU"
    assert language_api_code(Engine.YANDEX, Language.TATAR) == "tr_TR"
    assert language_api_code(Engine.YANDEX, Language.ENGLISH) == "en_GB"
    with pytest.raises(UnsupportedParameter) as excinfo:
        language_api_code(Engine.BING, Language.ENGLISH)
    assert excinfo.value.error is TtsError.UNSUPPORTED_LANGUAGE


def test_voice_and_emotion_only_for_yandex():
    with pytest.raises(UnsupportedParameter) as excinfo:
        voice_api_code(Engine.GOOGLE, Voice.ZAHAR)
    assert excinfo.value.error is TtsError.UNSUPPORTED_VOICE

    with pytest.raises(UnsupportedParameter) as excinfo:
        emotion_api_code(Engine.GOOGLE, Emotion.EVIL)
    assert excinfo.value.error is TtsError.UNSUPPORTED_EMOTION


def test_api_codes_are_found_in_code_tables():
    for voice in Voice:
        if voice is Voice.NO_VOICE:
            continue
        code = voice_api_code(Engine.YANDEX, voice)
        assert VOICE_CODES[VOICE_CODES.index(code)] == code
        assert voice_from_code(code) is voice
        assert code == voice.name.lower()

    for emotion in Emotion:
        if emotion is Emotion.NO_EMOTION:
            continue
        code = emotion_api_code(Engine.YANDEX, emotion)
        assert EMOTION_CODES[EMOTION_CODES.index(code)] == code
        assert emotion_from_code(code) is emotion
        assert code == emotion.name.lower()


def test_sentinel_lookups():
    assert voice_code(Voice.NO_VOICE) is None
    assert emotion_code(Emotion.NO_EMOTION) is None
    assert voice_from_code("nobody") is Voice.NO_VOICE
    assert emotion_from_code("neutral") is Emotion.NEUTRAL
    assert emotion_from_code("sad") is Emotion.NO_EMOTION


def test_online_tts_replaces_previous_error():
    tts = OnlineTts()
    tts.generate_urls("hello", Engine.BING, Language.ENGLISH)
    assert tts.error() is TtsError.UNSUPPORTED_ENGINE
    assert tts.media() == []

    tts.generate_urls("hello", Engine.GOOGLE, Language.ENGLISH)
    assert tts.error() is TtsError.NO_ERROR
    assert tts.error_string() == ""
    assert len(tts.media()) == 1


def test_lone_surrogate_is_replaced_instead_of_raising():
    result = generate_urls("abc\ud800def", Engine.GOOGLE, Language.ENGLISH)

    assert result.ok
    assert len(result.urls) == 1
    assert _param(result.urls[0], "q") == "abc?def"


def test_code_lookups_are_documented():
    for lookup in (language_api_code, voice_api_code, emotion_api_code):
        assert lookup.__doc__ and lookup.__doc__.strip()
