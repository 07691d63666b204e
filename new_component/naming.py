"""Name resolution helpers.

Two pure functions used by the placeholder table:

* ``resolve_classes_name`` turns a component name into the key used for its
  root style class (``UserCard`` -> ``userCard``).
* ``resolve_language_name`` turns a language code into a readable label
  (``en-en`` -> ``English``) and never fails on unknown codes.
"""

from __future__ import annotations

import re

# ISO 639-1 language codes (2-letter)
# Source: https://en.wikipedia.org/wiki/List_of_ISO_639-1_codes
LANGUAGE_NAMES: dict[str, str] = {
    "af": "Afrikaans",
    "ar": "Arabic",
    "az": "Azerbaijani",
    "bg": "Bulgarian",
    "bn": "Bengali",
    "bs": "Bosnian",
    "ca": "Catalan",
    "cs": "Czech",
    "cy": "Welsh",
    "da": "Danish",
    "de": "German",
    "el": "Greek",
    "en": "English",
    "es": "Spanish",
    "et": "Estonian",
    "eu": "Basque",
    "fa": "Persian",
    "fi": "Finnish",
    "fr": "French",
    "ga": "Irish",
    "gl": "Galician",
    "gu": "Gujarati",
    "he": "Hebrew",
    "hi": "Hindi",
    "hr": "Croatian",
    "hu": "Hungarian",
    "hy": "Armenian",
    "id": "Indonesian",
    "is": "Icelandic",
    "it": "Italian",
    "ja": "Japanese",
    "ka": "Georgian",
    "kk": "Kazakh",
    "km": "Khmer",
    "kn": "Kannada",
    "ko": "Korean",
    "lb": "Luxembourgish",
    "lt": "Lithuanian",
    "lv": "Latvian",
    "mk": "Macedonian",
    "ml": "Malayalam",
    "mn": "Mongolian",
    "mr": "Marathi",
    "ms": "Malay",
    "mt": "Maltese",
    "nb": "Norwegian Bokmal",
    "ne": "Nepali",
    "nl": "Dutch",
    "no": "Norwegian",
    "pa": "Punjabi",
    "pl": "Polish",
    "pt": "Portuguese",
    "ro": "Romanian",
    "ru": "Russian",
    "sk": "Slovak",
    "sl": "Slovenian",
    "sq": "Albanian",
    "sr": "Serbian",
    "sv": "Swedish",
    "sw": "Swahili",
    "ta": "Tamil",
    "te": "Telugu",
    "th": "Thai",
    "tl": "Tagalog",
    "tr": "Turkish",
    "uk": "Ukrainian",
    "ur": "Urdu",
    "uz": "Uzbek",
    "vi": "Vietnamese",
    "zh": "Chinese",
    "zu": "Zulu",
}

UNKNOWN_LANGUAGE = "Unknown"

_SEPARATORS = re.compile(r"[^0-9A-Za-z]+")


def resolve_classes_name(component_name: str) -> str:
    """Return the camelCase style-class key for *component_name*.

    Separator runs are collapsed and each following word is capitalised;
    the first character is lower-cased while the rest of each word keeps its
    original casing.

    Examples::

        resolve_classes_name("Avatar")      -> "avatar"
        resolve_classes_name("UserCard")    -> "userCard"
        resolve_classes_name("user-card")   -> "userCard"
        resolve_classes_name("Nav Bar 2")   -> "navBar2"
    """
    parts = [part for part in _SEPARATORS.split(component_name) if part]
    if not parts:
        return "root"
    joined = parts[0] + "".join(part[0].upper() + part[1:] for part in parts[1:])
    return joined[0].lower() + joined[1:]


def resolve_language_name(language_code: str) -> str:
    """Return a human-readable name for *language_code*.

    Only the primary subtag is considered (``en-en``, ``en_GB`` and ``EN``
    all resolve to ``English``).  Unrecognised codes come back unchanged, and
    an empty code yields ``"Unknown"``.
    """
    code = language_code.strip()
    if not code:
        return UNKNOWN_LANGUAGE
    primary = re.split(r"[-_]", code, maxsplit=1)[0].lower()
    return LANGUAGE_NAMES.get(primary, code)
