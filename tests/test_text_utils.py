"""Tests for text helpers."""

import pytest

from seestadtbot.application.services.text_utils import (
    countdown_phrase,
    escape_ssml,
    improve_towards,
)


@pytest.mark.parametrize(
    ("countdown", "expected"),
    [(0, "jetzt"), (1, "in einer Minute"), (2, "in 2 Minuten"), (5, "in 5 Minuten")],
)
def test_countdown_phrase(countdown: int, expected: str) -> None:
    """Given a countdown, when phrasing it, then German grammatical number is used."""
    assert countdown_phrase(countdown) == expected


@pytest.mark.parametrize(
    ("towards", "expected"),
    [
        ("Karlsplatz U", "Karlsplatz"),
        ("Heiligenstadt SU", "Heiligenstadt"),
        ("SEESTADT", "Seestadt"),
        ("KLIMA SCHÜTZEN", "Karlsplatz"),
        ("ÖFFIS  NÜTZEN,", "Karlsplatz"),
        ("NÄCHSTER ZUG 3 MIN", "Nächster Zug 3 min"),
        ("Hausfeldstraße   U", "Hausfeldstraße"),
        ("Aspern Nord", "Aspern Nord"),
    ],
)
def test_improve_towards(towards: str, expected: str) -> None:
    """Given a raw destination text, when improving it, then it is readable."""
    assert improve_towards(towards) == expected


def test_escape_ssml_escapes_markup_characters() -> None:
    """Given markup characters, when escaping, then all five are replaced."""
    escaped = escape_ssml("""Tom & Jerry <'x'> "y\"""")

    assert escaped == "Tom &amp; Jerry &lt;&#39;x&#39;&gt; &#34;y&#34;"


def test_escape_ssml_keeps_umlauts() -> None:
    """Given German text, when escaping, then it is unchanged."""
    assert escape_ssml("Straßenbahn Größe") == "Straßenbahn Größe"
