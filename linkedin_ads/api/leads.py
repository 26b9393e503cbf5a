"""Lead generation forms and lead-gen performance."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any

from linkedin_ads.api.analytics import format_date_range
from linkedin_ads.api.shared import Locale, UrnKind, encode_urn_for_list, wrap_urn
from linkedin_ads.client import Client

LEAD_PERFORMANCE_FIELDS = (
    "oneClickLeads,oneClickLeadFormOpens,qualifiedLeads,"
    "costInUsd,impressions,clicks,pivotValues,dateRange"
)

_PAGE_SIZE = 500


@dataclass(frozen=True)
class LeadForm:
    """A lead generation form; LinkedIn names its status field "state"."""

    id: int = 0
    name: str = ""
    state: str = ""
    owner: dict[str, Any] | None = None
    creation_locale: Locale | None = None
    version_id: int = 0
    created: int = 0
    last_modified: int = 0

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> LeadForm:
        owner = data.get("owner")
        locale = data.get("creationLocale")
        return cls(
            id=int(data.get("id") or 0),
            name=data.get("name") or "",
            state=data.get("state") or "",
            owner=owner if isinstance(owner, dict) else None,
            creation_locale=Locale.from_json(locale) if isinstance(locale, dict) else None,
            version_id=int(data.get("versionId") or 0),
            created=int(data.get("created") or 0),
            last_modified=int(data.get("lastModified") or 0),
        )


@dataclass(frozen=True)
class LeadPerformanceRow:
    """An /adAnalytics row carrying lead-gen metrics."""

    form: str = ""
    impressions: int = 0
    clicks: int = 0
    lead_gen_form_opens: int = 0
    lead_submissions: int = 0
    cost_in_usd: str = ""

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> LeadPerformanceRow:
        return cls(
            form=data.get("pivotValue") or "",
            impressions=int(data.get("impressions") or 0),
            clicks=int(data.get("clicks") or 0),
            lead_gen_form_opens=int(data.get("leadGenFormOpens") or 0),
            lead_submissions=int(data.get("oneClickLeads") or 0),
            cost_in_usd=data.get("costInUsd") or "",
        )


def list_lead_forms(client: Client, account_id: str, limit: int = 0) -> list[LeadForm]:
    """Return the lead-gen forms owned by an account given by bare id."""
    # Compound owner: parentheses stay raw, the URN's colons are encoded.
    owner_query = f"q=owner&owner=(sponsoredAccount:urn%3Ali%3AsponsoredAccount%3A{account_id})"
    items: list[Any] = []
    start = 0
    while True:
        page = client.get_json_raw_query(
            "/leadForms", f"{owner_query}&start={start}&count={_PAGE_SIZE}"
        )
        elements = page.get("elements") if isinstance(page, dict) else None
        elements = elements if isinstance(elements, list) else []
        items.extend(elements)
        if limit > 0 and len(items) >= limit:
            items = items[:limit]
            break
        if len(elements) < _PAGE_SIZE:
            break
        start += _PAGE_SIZE
    return [LeadForm.from_json(item) for item in items]


def get_lead_performance(
    client: Client, account_id: str, form_id: str, start: date, end: date
) -> list[LeadPerformanceRow]:
    """Lead-gen metrics of an account over a date range, pivoted by campaign.

    LinkedIn offers no per-form pivot here, so form_id does not narrow the query.
    """
    del form_id
    accounts = encode_urn_for_list(wrap_urn(UrnKind.ACCOUNT, account_id))
    raw_query = "&".join(
        [
            "q=analytics",
            "pivot=CAMPAIGN",
            "timeGranularity=ALL",
            f"dateRange={format_date_range(start, end)}",
            f"accounts=List({accounts})",
            f"fields={LEAD_PERFORMANCE_FIELDS}",
        ]
    )
    page = client.get_json_raw_query("/adAnalytics", raw_query)
    elements = page.get("elements") if isinstance(page, dict) else None
    return [LeadPerformanceRow.from_json(element) for element in elements or []]