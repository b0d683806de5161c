"""Video title cleanup."""

import re

MAX_VIDEO_TITLE_LENGTH = 70

_BRACKETED = re.compile(r"\[[^\]]+\]|\([^)]*\)|\{[^}]*\}")
_TAG_TRAILER = re.compile(r"[#@].+$")
_SEPARATORS = re.compile(r"[-–—_.]+")
_PROMO_PHRASES = re.compile(
    r"official video|full tutorial|easy recipe|\brecipe\b|how to (?:make|cook)\b",
    re.IGNORECASE,
)
_SUPERLATIVES = re.compile(
    r"\b(?:best|easy|ultimate|perfect|quick|simple|homemade|authentic)\b",
    re.IGNORECASE,
)
_TRAILING_SUFFIX = re.compile(r"(?:^|\s+)(?:recipe|video|tutorial)$", re.IGNORECASE)
_WHITESPACE = re.compile(r"\s+")


def _collapse(text: str) -> str:
    return _WHITESPACE.sub(" ", text).strip()


def _strip_promotions(text: str) -> str:
    # Removing one phrase can join the words around it into another
    while True:
        stripped = _collapse(_SUPERLATIVES.sub("", _PROMO_PHRASES.sub("", text)))
        if stripped == text:
            return text
        text = stripped


def _capitalize(word: str) -> str:
    # The first character may upper-case to several ("ﬁ" -> "FI")
    head = word[:1].upper()
    return head[:1] + head[1:].lower() + word[1:].lower()


def _title_case(text: str) -> str:
    return " ".join(_capitalize(word) for word in text.split(" "))


def clean_video_title(raw: str) -> str:
    """
    Turn a YouTube video title into a concise dish name.

    "BEST Creamy Tomato Pasta (Easy!) - Official Video #shorts" becomes
    "Creamy Tomato Pasta". Returns the raw title if nothing is left.
    Applying it to its own output is a no-op.
    """
    if not raw:
        return ""

    text = _BRACKETED.sub("", raw)
    text = _TAG_TRAILER.sub("", text)
    text = _collapse(_SEPARATORS.sub(" ", text))
    text = _strip_promotions(text)
    text = _title_case(text)

    while True:
        stripped = _TRAILING_SUFFIX.sub("", text).strip()
        if stripped == text:
            break
        text = stripped

    return text or raw


def usable_video_title(raw: str) -> str:
    """Cleaned title if it is short enough to replace the model's title, else ""."""
    cleaned = clean_video_title(raw)
    if cleaned and len(cleaned) <= MAX_VIDEO_TITLE_LENGTH:
        return cleaned
    return ""
