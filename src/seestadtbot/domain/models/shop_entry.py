"""Shop entry domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ShopEntry:
    """A shop or venue from the city directory."""

    id: str
    name: str
    address: str
    description: str = ""
    hours: str | None = None
    hours_remark: str = ""
    label: str = ""

    @property
    def display_name(self) -> str:
        """The label if one is set, otherwise the name."""
        return self.label or self.name
