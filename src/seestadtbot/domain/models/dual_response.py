"""Dual response domain model: spoken text plus a visual card."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Card:
    """A simple card with a title and plain-text content."""

    title: str
    content: str


@dataclass(frozen=True)
class DualResponse:
    """Spoken (SSML-safe) text and an independently composed card."""

    text: str
    card: Card
