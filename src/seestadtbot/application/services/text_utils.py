"""Helpers for composing speakable German text."""

import re

from markupsafe import escape

_TRAILING_TRANSIT_SUFFIX = re.compile(r" S?U$")
_MARKETING_KARLSPLATZ = re.compile(r"ÖFFIS +NÜTZEN,|KLIMA +SCHÜTZEN")
_TRAILING_MINUTES = re.compile(r" MIN$")
_WHITESPACE = re.compile(r"\s+")

# All-caps marketing texts that appear in the "towards" field of the real-time API.
_CANONICAL_SPELLINGS = (
    ("KARLSPLATZ", "Karlsplatz"),
    ("SEESTADT", "Seestadt"),
    ("NÄCHSTER ZUG", "Nächster Zug"),
)


def improve_towards(towards: str) -> str:
    """Clean up a destination text from the real-time API.

    Strips trailing transit type suffixes ("U", "SU"), rewrites all-caps
    marketing phrases, lower-cases a trailing "MIN" and collapses whitespace.
    See https://twitter.com/botic/status/1133286469630668801
    """
    text = _TRAILING_TRANSIT_SUFFIX.sub("", towards)
    text = _MARKETING_KARLSPLATZ.sub("Karlsplatz", text)
    for shouted, canonical in _CANONICAL_SPELLINGS:
        text = text.replace(shouted, canonical)
    text = _TRAILING_MINUTES.sub(" min", text)
    return _WHITESPACE.sub(" ", text).strip()


def escape_ssml(unsafe: str) -> str:
    """Escape < > & ' " so the text can be embedded into SSML."""
    return str(escape(unsafe))


def countdown_phrase(countdown: int) -> str:
    """Phrase a departure countdown with German grammatical number."""
    if countdown == 0:
        return "jetzt"
    if countdown == 1:
        return "in einer Minute"
    return f"in {countdown} Minuten"
