"""Conversion definitions, offline conversion events and conversion performance."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any

from linkedin_ads.api.analytics import format_date_range
from linkedin_ads.api.shared import Money, UrnKind, encode_urn_for_list, wrap_urn
from linkedin_ads.client import Client
from linkedin_ads.pagination import paginate_start_count

CONVERSION_PERFORMANCE_FIELDS = (
    "externalWebsiteConversions,externalWebsitePostClickConversions,"
    "costInUsd,conversionValueInLocalCurrency,externalWebsitePostViewConversions,"
    "pivotValues,dateRange"
)


@dataclass(frozen=True)
class Conversion:
    """A conversion definition of an ad account."""

    id: int = 0
    name: str = ""
    type: str = ""
    enabled: bool = False
    attribution_type: str = ""
    post_click_attribution_window: int = 0
    view_through_attribution_window: int = 0
    value: Money | None = None
    account: str = ""

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> Conversion:
        value = data.get("value")
        return cls(
            id=int(data.get("id") or 0),
            name=data.get("name") or "",
            type=data.get("type") or "",
            enabled=bool(data.get("enabled")),
            attribution_type=data.get("attributionType") or "",
            post_click_attribution_window=int(data.get("postClickAttributionWindowSize") or 0),
            view_through_attribution_window=int(data.get("viewThroughAttributionWindowSize") or 0),
            value=Money.from_json(value) if isinstance(value, dict) else None,
            account=data.get("account") or "",
        )


@dataclass(frozen=True)
class ConversionPerformanceRow:
    """An /adAnalytics row pivoted by conversion, rolled up over the date range."""

    conversion: str = ""
    impressions: int = 0
    clicks: int = 0
    conversions: int = 0
    cost_in_usd: str = ""

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> ConversionPerformanceRow:
        return cls(
            conversion=data.get("pivotValue") or "",
            impressions=int(data.get("impressions") or 0),
            clicks=int(data.get("clicks") or 0),
            conversions=int(data.get("externalWebsiteConversions") or 0),
            cost_in_usd=data.get("costInUsd") or "",
        )


@dataclass(frozen=True)
class ConversionUserID:
    """One user identifier of a conversion event, e.g. SHA256_EMAIL."""

    id_type: str
    id_value: str


@dataclass(frozen=True)
class ConversionEventValue:
    """Optional cash value attached to a conversion event."""

    currency_code: str
    amount: str


@dataclass(frozen=True)
class ConversionEventInput:
    """Body of a single offline conversion event.

    ``conversion_happened_at`` is in epoch milliseconds; ``event_id`` makes
    the upload idempotent.
    """

    conversion: str
    conversion_happened_at: int
    user_ids: list[ConversionUserID] = field(default_factory=list)
    conversion_value: ConversionEventValue | None = None
    event_id: str = ""

    def to_json(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "conversion": self.conversion,
            "conversionHappenedAt": self.conversion_happened_at,
            "user": {
                "userIds": [
                    {"idType": user.id_type, "idValue": user.id_value} for user in self.user_ids
                ]
            },
        }
        if self.conversion_value is not None:
            out["conversionValue"] = {
                "currencyCode": self.conversion_value.currency_code,
                "amount": self.conversion_value.amount,
            }
        if self.event_id:
            out["eventId"] = self.event_id
        return out


def list_conversions(client: Client, account_id: str, limit: int = 0) -> list[Conversion]:
    """Return the conversion definitions of an account given by bare id."""
    query = {"q": "account", "account": wrap_urn(UrnKind.ACCOUNT, account_id)}
    elements = paginate_start_count(client, "/conversions", query, 500, limit)
    return [Conversion.from_json(element) for element in elements]


def post_conversion_event(client: Client, event: ConversionEventInput) -> str:
    """Upload one offline conversion event and return its new id, if any.

    The token needs the Conversions API product; without it LinkedIn answers 403.
    """
    return client.post_json("/conversionEvents", event.to_json()).resource_id


def get_conversion_performance(
    client: Client, account_id: str, start: date, end: date
) -> list[ConversionPerformanceRow]:
    """Per-conversion performance of an account over a date range."""
    accounts = encode_urn_for_list(wrap_urn(UrnKind.ACCOUNT, account_id))
    raw_query = (
        f"q=analytics&pivot=CONVERSION&timeGranularity=ALL"
        f"&dateRange={format_date_range(start, end)}&accounts=List({accounts})"
        f"&fields={CONVERSION_PERFORMANCE_FIELDS}"
    )
    page = client.get_json_raw_query("/adAnalytics", raw_query)
    elements = page.get("elements") if isinstance(page, dict) else None
    return [ConversionPerformanceRow.from_json(element) for element in elements or []]