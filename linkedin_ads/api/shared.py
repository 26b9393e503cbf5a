"""Value types and URN helpers shared by the API resource modules."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any
from urllib.parse import quote_plus


class UrnKind(str, Enum):
    """Entity types that appear in LinkedIn URNs (urn:li:<kind>:<id>)."""

    ACCOUNT = "sponsoredAccount"
    CAMPAIGN = "sponsoredCampaign"
    CAMPAIGN_GROUP = "sponsoredCampaignGroup"
    CREATIVE = "sponsoredCreative"
    ORGANIZATION = "organization"


def wrap_urn(kind: UrnKind, value: str) -> str:
    """Return the URN for a bare id; a value that already is that URN is kept."""
    prefix = f"urn:li:{kind.value}:"
    if value.startswith(prefix):
        return value
    return prefix + value


def encode_urn_for_list(value: str) -> str:
    """Percent-encode a URN for use inside a Rest.li List(...) parameter.

    Colons become %3A while the surrounding parentheses stay raw.
    """
    return quote_plus(value, safe="")


@dataclass(frozen=True)
class Money:
    """LinkedIn money envelope; the amount is a decimal string such as "12.34"."""

    amount: str = ""
    currency_code: str = ""

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> Money:
        return cls(
            amount=data.get("amount") or "",
            currency_code=data.get("currencyCode") or "",
        )

    def to_json(self) -> dict[str, Any]:
        return {"amount": self.amount, "currencyCode": self.currency_code}


@dataclass(frozen=True)
class DateRange:
    """An epoch-millis interval; either bound may be left unset (zero)."""

    start: int = 0
    end: int = 0

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> DateRange:
        return cls(start=int(data.get("start") or 0), end=int(data.get("end") or 0))

    def to_json(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.start:
            out["start"] = self.start
        if self.end:
            out["end"] = self.end
        return out


@dataclass(frozen=True)
class Locale:
    """Language/country pair used by campaigns and lead-gen forms."""

    country: str = ""
    language: str = ""

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> Locale:
        return cls(country=data.get("country") or "", language=data.get("language") or "")

    def to_json(self) -> dict[str, Any]:
        return {"country": self.country, "language": self.language}