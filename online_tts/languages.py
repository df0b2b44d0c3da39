from __future__ import annotations

import enum
from typing import Dict, Optional

__all__ = [
    "Engine",
    "Language",
    "GOOGLE_LANGUAGE_CODES",
    "language_code",
    "language_from_code",
]


class Engine(enum.Enum):
    """
    Online translation providers. Only some of them expose a TTS endpoint.
    """

    GOOGLE = "Google"
    YANDEX = "Yandex"
    BING = "Bing"

    @property
    def label(self) -> str:
        return self.value


class Language(enum.Enum):
    """
    Abstract language identifiers shared by every engine.

    ``AUTO`` is a sentinel meaning "detect the source language".
    """

    AUTO = "Auto"
    AFRIKAANS = "Afrikaans"
    ALBANIAN = "Albanian"
    AMHARIC = "Amharic"
    ARABIC = "Arabic"
    ARMENIAN = "Armenian"
    AZERBAIJANI = "Azerbaijani"
    BASHKIR = "Bashkir"
    BASQUE = "Basque"
    BELARUSIAN = "Belarusian"
    BENGALI = "Bengali"
    BOSNIAN = "Bosnian"
    BULGARIAN = "Bulgarian"
    CATALAN = "Catalan"
    CEBUANO = "Cebuano"
    CHICHEWA = "Chichewa"
    SIMPLIFIED_CHINESE = "SimplifiedChinese"
    TRADITIONAL_CHINESE = "TraditionalChinese"
    CORSICAN = "Corsican"
    CROATIAN = "Croatian"
    CZECH = "Czech"
    DANISH = "Danish"
    DUTCH = "Dutch"
    ENGLISH = "English"
    ESPERANTO = "Esperanto"
    ESTONIAN = "Estonian"
    FILIPINO = "Filipino"
    FINNISH = "Finnish"
    FRENCH = "French"
    FRISIAN = "Frisian"
    GALICIAN = "Galician"
    GEORGIAN = "Georgian"
    GERMAN = "German"
    GREEK = "Greek"
    GUJARATI = "Gujarati"
    HAITIAN_CREOLE = "HaitianCreole"
    HAUSA = "Hausa"
    HAWAIIAN = "Hawaiian"
    HEBREW = "Hebrew"
    HILL_MARI = "HillMari"
    HINDI = "Hindi"
    HMONG = "Hmong"
    HUNGARIAN = "Hungarian"
    ICELANDIC = "Icelandic"
    IGBO = "Igbo"
    INDONESIAN = "Indonesian"
    IRISH = "Irish"
    ITALIAN = "Italian"
    JAPANESE = "Japanese"
    JAVANESE = "Javanese"
    KANNADA = "Kannada"
    KAZAKH = "Kazakh"
    KHMER = "Khmer"
    KOREAN = "Korean"
    KURDISH = "Kurdish"
    KYRGYZ = "Kyrgyz"
    LAO = "Lao"
    LATIN = "Latin"
    LATVIAN = "Latvian"
    LITHUANIAN = "Lithuanian"
    LUXEMBOURGISH = "Luxembourgish"
    MACEDONIAN = "Macedonian"
    MALAGASY = "Malagasy"
    MALAY = "Malay"
    MALAYALAM = "Malayalam"
    MALTESE = "Maltese"
    MAORI = "Maori"
    MARATHI = "Marathi"
    MARI = "Mari"
    MONGOLIAN = "Mongolian"
    MYANMAR = "Myanmar"
    NEPALI = "Nepali"
    NORWEGIAN = "Norwegian"
    PAPIAMENTO = "Papiamento"
    PASHTO = "Pashto"
    PERSIAN = "Persian"
    POLISH = "Polish"
    PORTUGUESE = "Portuguese"
    PUNJABI = "Punjabi"
    ROMANIAN = "Romanian"
    RUSSIAN = "Russian"
    SAMOAN = "Samoan"
    SCOTS_GAELIC = "ScotsGaelic"
    SERBIAN = "Serbian"
    SESOTHO = "Sesotho"
    SHONA = "Shona"
    SINDHI = "Sindhi"
    SINHALA = "Sinhala"
    SLOVAK = "Slovak"
    SLOVENIAN = "Slovenian"
    SOMALI = "Somali"
    SPANISH = "Spanish"
    SUNDANESE = "Sundanese"
    SWAHILI = "Swahili"
    SWEDISH = "Swedish"
    TAJIK = "Tajik"
    TAMIL = "Tamil"
    TATAR = "Tatar"
    TELUGU = "Telugu"
    THAI = "Thai"
    TURKISH = "Turkish"
    UDMURT = "Udmurt"
    UKRAINIAN = "Ukrainian"
    URDU = "Urdu"
    UZBEK = "Uzbek"
    VIETNAMESE = "Vietnamese"
    WELSH = "Welsh"
    XHOSA = "Xhosa"
    YAKUT = "Yakut"
    YIDDISH = "Yiddish"
    YORUBA = "Yoruba"
    ZULU = "Zulu"

    @property
    def label(self) -> str:
        return self.value


# Languages missing here (Bashkir, Mari, Tatar, ...) are Yandex-only.
GOOGLE_LANGUAGE_CODES: Dict[Language, str] = {
    Language.AUTO: "auto",
    Language.AFRIKAANS: "af",
    Language.ALBANIAN: "sq",
    Language.AMHARIC: "am",
    Language.ARABIC: "ar",
    Language.ARMENIAN: "hy",
    Language.AZERBAIJANI: "az",
    Language.BASQUE: "eu",
    Language.BELARUSIAN: "be",
    Language.BENGALI: "bn",
    Language.BOSNIAN: "bs",
    Language.BULGARIAN: "bg",
    Language.CATALAN: "ca",
    Language.CEBUANO: "ceb",
    Language.CHICHEWA: "ny",
    Language.SIMPLIFIED_CHINESE: "zh-CN",
    Language.TRADITIONAL_CHINESE: "zh-TW",
    Language.CORSICAN: "co",
    Language.CROATIAN: "hr",
    Language.CZECH: "cs",
    Language.DANISH: "da",
    Language.DUTCH: "nl",
    Language.ENGLISH: "en",
    Language.ESPERANTO: "eo",
    Language.ESTONIAN: "et",
    Language.FILIPINO: "tl",
    Language.FINNISH: "fi",
    Language.FRENCH: "fr",
    Language.FRISIAN: "fy",
    Language.GALICIAN: "gl",
    Language.GEORGIAN: "ka",
    Language.GERMAN: "de",
    Language.GREEK: "el",
    Language.GUJARATI: "gu",
    Language.HAITIAN_CREOLE: "ht",
    Language.HAUSA: "ha",
    Language.HAWAIIAN: "haw",
    Language.HEBREW: "iw",
    Language.HINDI: "hi",
    Language.HMONG: "hmn",
    Language.HUNGARIAN: "hu",
    Language.ICELANDIC: "is",
    Language.IGBO: "ig",
    Language.INDONESIAN: "id",
    Language.IRISH: "ga",
    Language.ITALIAN: "it",
    Language.JAPANESE: "ja",
    Language.JAVANESE: "jw",
    Language.KANNADA: "kn",
    Language.KAZAKH: "kk",
    Language.KHMER: "km",
    Language.KOREAN: "ko",
    Language.KURDISH: "ku",
    Language.KYRGYZ: "ky",
    Language.LAO: "lo",
    Language.LATIN: "la",
    Language.LATVIAN: "lv",
    Language.LITHUANIAN: "lt",
    Language.LUXEMBOURGISH: "lb",
    Language.MACEDONIAN: "mk",
    Language.MALAGASY: "mg",
    Language.MALAY: "ms",
    Language.MALAYALAM: "ml",
    Language.MALTESE: "mt",
    Language.MAORI: "mi",
    Language.MARATHI: "mr",
    Language.MONGOLIAN: "mn",
    Language.MYANMAR: "my",
    Language.NEPALI: "ne",
    Language.NORWEGIAN: "no",
    Language.PASHTO: "ps",
    Language.PERSIAN: "fa",
    Language.POLISH: "pl",
    Language.PORTUGUESE: "pt",
    Language.PUNJABI: "pa",
    Language.ROMANIAN: "ro",
    Language.RUSSIAN: "ru",
    Language.SAMOAN: "sm",
    Language.SCOTS_GAELIC: "gd",
    Language.SERBIAN: "sr",
    Language.SESOTHO: "st",
    Language.SHONA: "sn",
    Language.SINDHI: "sd",
    Language.SINHALA: "si",
    Language.SLOVAK: "sk",
    Language.SLOVENIAN: "sl",
    Language.SOMALI: "so",
    Language.SPANISH: "es",
    Language.SUNDANESE: "su",
    Language.SWAHILI: "sw",
    Language.SWEDISH: "sv",
    Language.TAJIK: "tg",
    Language.TAMIL: "ta",
    Language.TELUGU: "te",
    Language.THAI: "th",
    Language.TURKISH: "tr",
    Language.UKRAINIAN: "uk",
    Language.URDU: "ur",
    Language.UZBEK: "uz",
    Language.VIETNAMESE: "vi",
    Language.WELSH: "cy",
    Language.XHOSA: "xh",
    Language.YIDDISH: "yi",
    Language.YORUBA: "yo",
    Language.ZULU: "zu",
}

_CODE_TABLES: Dict[Engine, Dict[Language, str]] = {
    Engine.GOOGLE: GOOGLE_LANGUAGE_CODES,
}


def language_code(engine: Engine, language: Language) -> Optional[str]:
    """
    Return the translation API code of ``language`` for ``engine``.

    ``None`` means the engine has no code for that language.
    """
    return _CODE_TABLES.get(engine, {}).get(language)


def language_from_code(engine: Engine, code: str) -> Optional[Language]:
    for language, candidate in _CODE_TABLES.get(engine, {}).items():
        if candidate == code:
            return language
    return None
