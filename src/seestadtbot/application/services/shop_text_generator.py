"""Speakable texts for shop information and opening hours."""

import re
from collections.abc import Callable
from datetime import UTC, datetime

from seestadtbot.application.services.text_utils import escape_ssml
from seestadtbot.domain.models.dual_response import Card, DualResponse
from seestadtbot.domain.models.shop_entry import ShopEntry
from seestadtbot.domain.ports.opening_hours import (
    FoldOptions,
    OpeningHours,
    OpeningHoursFactory,
    WeekdayFormat,
)

NOT_FOUND_TEXT = "Leider konnte ich nichts dazu finden."

FOLD_OPTIONS = FoldOptions(
    locale="de-AT",
    closed_placeholder="geschlossen",
    holiday_prefix="Feiertags",
    hyphen=" bis ",
    day_delimiter=" und ",
    time_frame_delimiter=" und ",
    time_frame_format="von {start} bis {end}",
    weekday_format=WeekdayFormat.LONG,
)

_STREET_ADDRESS = re.compile(r"(Stra(ss|ß)e|Gasse)", re.IGNORECASE)
_SQUARE_ADDRESS = re.compile(r"(Platz|Eck)", re.IGNORECASE)

Quote = Callable[[str], str]


def address_preposition(address: str) -> str:
    """Pick the German preposition for an address: "in der", "am" or "bei"."""
    if _STREET_ADDRESS.search(address):
        return "in der"
    if _SQUARE_ADDRESS.search(address):
        return "am"
    return "bei"


def fold_to_sentences(folded: str) -> str:
    """Turn a folded schedule into running text: drop label colons, newlines become sentences."""
    return folded.strip().replace(": ", " ").replace("\n", ". ")


class ShopTextGenerator:
    """Generates shop and opening hours answers from directory entries."""

    def __init__(self, opening_hours_factory: OpeningHoursFactory, timezone: str) -> None:
        """Initialize the generator.

        Args:
            opening_hours_factory: Creates OpeningHours from an entry's schedule.
            timezone: IANA time zone of the shops, e.g. "Europe/Vienna".
        """
        self._opening_hours_factory = opening_hours_factory
        self._timezone = timezone

    def opening_hours(self, entry: ShopEntry, now: datetime | None = None) -> DualResponse:
        """Describe whether a shop is open now and its weekly opening hours."""
        hours = self._opening_hours_factory(entry.hours, self._timezone)
        now = now or datetime.now(UTC)

        text = " ".join(self._hours_sentences(entry.name, entry, hours, now, escape_ssml))
        content = " ".join(self._hours_sentences(entry.name, entry, hours, now, str))
        return DualResponse(text=text, card=Card(title="Öffnungszeiten", content=content))

    def shop_information(self, entry: ShopEntry, now: datetime | None = None) -> DualResponse:
        """Describe a shop: description, address and opening hours."""
        hours = self._opening_hours_factory(entry.hours, self._timezone)
        now = now or datetime.now(UTC)

        text = " ".join(self._shop_sentences(entry, hours, now, escape_ssml))
        content = " ".join(self._shop_sentences(entry, hours, now, str))
        return DualResponse(text=text, card=Card(title=entry.display_name, content=content))

    @staticmethod
    def not_found(title: str = "Öffnungszeiten") -> DualResponse:
        return DualResponse(text=NOT_FOUND_TEXT, card=Card(title=title, content=NOT_FOUND_TEXT))

    def _shop_sentences(
        self, entry: ShopEntry, hours: OpeningHours, now: datetime, quote: Quote
    ) -> list[str]:
        sentences = []
        if entry.description:
            sentences.append(f"{quote(entry.name)}: {quote(entry.description)}.")

        preposition = address_preposition(entry.address)
        sentences.append(
            f"{quote(entry.display_name)} befindet sich {preposition} {quote(entry.address)}."
        )
        sentences.extend(self._hours_sentences(entry.display_name, entry, hours, now, quote))
        return sentences

    @staticmethod
    def _hours_sentences(
        subject: str, entry: ShopEntry, hours: OpeningHours, now: datetime, quote: Quote
    ) -> list[str]:
        name = quote(subject)
        remark = entry.hours_remark.strip()

        if hours.is_unknown():
            if remark:
                return [f"{name} hat folgenden Hinweis zu den Öffnungszeiten: {quote(remark)}"]
            return [f"Es sind keine Öffnungszeiten für {name} hinterlegt."]

        state = "geöffnet" if hours.is_open_at(now) else "geschlossen"
        folded = fold_to_sentences(hours.fold(FOLD_OPTIONS))
        sentences = [
            f"{name} ist derzeit {state}.",
            f"Die weiteren Öffnungszeiten sind: {quote(folded)}.",
        ]
        if remark:
            sentences.append(f"Hinweis: {quote(remark)}")
        return sentences
