"""Voice platform slot domain model."""

from dataclasses import dataclass, field
from typing import Any

ER_SUCCESS_MATCH = "ER_SUCCESS_MATCH"


@dataclass(frozen=True)
class SlotResolution:
    """Entity resolution of one authority: a status code and the resolved value ids."""

    status_code: str
    value_ids: tuple[str, ...] = ()

    @property
    def is_unique_match(self) -> bool:
        """True when the authority matched exactly one value."""
        return self.status_code == ER_SUCCESS_MATCH and len(self.value_ids) == 1


@dataclass(frozen=True)
class Slot:
    """A filled intent slot: the raw spoken value plus optional resolutions."""

    name: str
    value: str | None = None
    resolutions: tuple[SlotResolution, ...] = field(default_factory=tuple)

    def unique_resolution_id(self) -> str | None:
        """Return the resolved id of the first authority with exactly one match."""
        for resolution in self.resolutions:
            if resolution.is_unique_match:
                return resolution.value_ids[0]
        return None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Slot":
        """Build a slot from the platform's JSON representation.

        Expected shape::

            {"name": "stopName", "value": "seestadt",
             "resolutions": {"resolutionsPerAuthority": [
                 {"status": {"code": "ER_SUCCESS_MATCH"},
                  "values": [{"value": {"id": "SEE", "name": "Seestadt"}}]}]}}
        """
        resolutions = []
        authorities = (data.get("resolutions") or {}).get("resolutionsPerAuthority") or []
        for authority in authorities:
            if not isinstance(authority, dict):
                continue
            code = (authority.get("status") or {}).get("code", "")
            value_ids = tuple(
                str(v["value"]["id"])
                for v in authority.get("values") or []
                if isinstance(v, dict) and (v.get("value") or {}).get("id")
            )
            resolutions.append(SlotResolution(status_code=code, value_ids=value_ids))

        return cls(name=data.get("name", ""), value=data.get("value"), resolutions=tuple(resolutions))

    @classmethod
    def spoken(cls, name: str, value: str) -> "Slot":
        """Build a slot carrying only a spoken value."""
        return cls(name=name, value=value)
