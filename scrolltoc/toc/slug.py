"""URL-safe slug generation for heading identifiers."""

import re
import unicodedata

# Latin characters with diacritics mapped to their ASCII base letter.
_TRANSLITERATION = str.maketrans(
    {
        **dict.fromkeys("ãàáäâå", "a"),
        **dict.fromkeys("ẽèéëê", "e"),
        **dict.fromkeys("ìíïî", "i"),
        **dict.fromkeys("õòóöô", "o"),
        **dict.fromkeys("ùúüû", "u"),
        **dict.fromkeys("ýÿ", "y"),
        "ñ": "n",
        "ç": "c",
    }
)

_DISALLOWED_RUN = re.compile(r"[^a-z0-9\-_]+")
_DASH_RUN = re.compile(r"-{2,}")


def to_slug(text: str) -> str:
    """Convert arbitrary text into a lowercase, ASCII, URL-safe token.

    Characters with diacritics are replaced by their base letter, every run
    of characters outside ``[a-z0-9-_]`` becomes a single dash, repeated
    dashes are collapsed and leading/trailing dashes are trimmed.

    Args:
        text: The text to convert.

    Returns:
        The slug. Empty when the text has no usable characters.
    """
    slug = unicodedata.normalize("NFC", text).lower().translate(_TRANSLITERATION)
    slug = _DISALLOWED_RUN.sub("-", slug)
    slug = _DASH_RUN.sub("-", slug)
    return slug.strip("-")
