"""Ad analytics (/adAnalytics) queries and derived metrics."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any

from linkedin_ads.api.shared import UrnKind, encode_urn_for_list, wrap_urn
from linkedin_ads.client import Client

# Without an explicit fields parameter LinkedIn omits costInUsd and more.
DEFAULT_ANALYTICS_FIELDS = (
    "impressions,clicks,costInUsd,costInLocalCurrency,"
    "externalWebsiteConversions,oneClickLeads,approximateUniqueImpressions,"
    "pivotValues,dateRange,videoViews,videoStarts,videoCompletions,"
    "videoFirstQuartileCompletions,videoMidpointCompletions,videoThirdQuartileCompletions"
)

REACH_ANALYTICS_FIELDS = "approximateMemberReach,impressions,audiencePenetration,pivotValues,dateRange"


@dataclass(frozen=True)
class AnalyticsRow:
    """One /adAnalytics row; cost stays a decimal string as LinkedIn sends it."""

    date_range: dict[str, Any] | None = None
    pivot: str = ""
    pivot_value: str = ""
    pivot_values: list[str] = field(default_factory=list)
    impressions: int = 0
    clicks: int = 0
    cost_in_usd: str = ""
    cost_in_local_currency: str = ""
    conversions: int = 0
    one_click_leads: int = 0
    reach: int = 0
    member_reach: int = 0
    audience_penetration: float = 0.0
    video_views: int = 0
    video_starts: int = 0
    video_completions: int = 0
    video_q1: int = 0
    video_midpoint: int = 0
    video_q3: int = 0

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> AnalyticsRow:
        def count(key: str) -> int:
            return int(data.get(key) or 0)

        date_range = data.get("dateRange")
        return cls(
            date_range=date_range if isinstance(date_range, dict) else None,
            pivot=data.get("pivot") or "",
            pivot_value=data.get("pivotValue") or "",
            pivot_values=list(data.get("pivotValues") or []),
            impressions=count("impressions"),
            clicks=count("clicks"),
            cost_in_usd=data.get("costInUsd") or "",
            cost_in_local_currency=data.get("costInLocalCurrency") or "",
            conversions=count("externalWebsiteConversions"),
            one_click_leads=count("oneClickLeads"),
            reach=count("approximateUniqueImpressions"),
            member_reach=count("approximateMemberReach"),
            audience_penetration=float(data.get("audiencePenetration") or 0.0),
            video_views=count("videoViews"),
            video_starts=count("videoStarts"),
            video_completions=count("videoCompletions"),
            video_q1=count("videoFirstQuartileCompletions"),
            video_midpoint=count("videoMidpointCompletions"),
            video_q3=count("videoThirdQuartileCompletions"),
        )

    def derived_metrics(self) -> dict[str, float]:
        """Compute ctr, cpc, cpm, cpl and conversionRate; division by zero gives 0."""
        metrics = {"ctr": 0.0, "cpc": 0.0, "cpm": 0.0, "cpl": 0.0, "conversionRate": 0.0}
        try:
            cost = float(self.cost_in_usd)
        except ValueError:
            cost = 0.0
        if self.impressions > 0:
            metrics["ctr"] = self.clicks / self.impressions
            metrics["cpm"] = cost / self.impressions * 1000
        if self.clicks > 0:
            metrics["cpc"] = cost / self.clicks
            metrics["conversionRate"] = self.conversions / self.clicks
        total_leads = self.one_click_leads + self.conversions
        if total_leads > 0:
            metrics["cpl"] = cost / total_leads
        return metrics


def format_date_range(start: date, end: date) -> str:
    """Render a Rest.li dateRange tuple; it must be sent without escaping."""
    return (
        f"(start:(year:{start.year},month:{start.month},day:{start.day}),"
        f"end:(year:{end.year},month:{end.month},day:{end.day}))"
    )


def _list_of(kind: UrnKind, value: str) -> str:
    return f"List({encode_urn_for_list(wrap_urn(kind, value))})"


def get_campaign_analytics(
    client: Client, account_id: str, start: date, end: date, granularity: str = "ALL"
) -> list[AnalyticsRow]:
    """Rows pivoted by CAMPAIGN for an account; granularity is DAILY, MONTHLY or ALL."""
    granularity = granularity or "ALL"
    raw = (
        f"q=analytics&pivot=CAMPAIGN&timeGranularity={granularity}"
        f"&dateRange={format_date_range(start, end)}&accounts={_list_of(UrnKind.ACCOUNT, account_id)}"
    )
    return _fetch(client, raw)


def get_creative_analytics(
    client: Client, campaign_id: str, start: date, end: date, granularity: str = "ALL"
) -> list[AnalyticsRow]:
    """Rows pivoted by CREATIVE for a single campaign."""
    granularity = granularity or "ALL"
    raw = (
        f"q=analytics&pivot=CREATIVE&timeGranularity={granularity}"
        f"&dateRange={format_date_range(start, end)}&campaigns={_list_of(UrnKind.CAMPAIGN, campaign_id)}"
    )
    return _fetch(client, raw)


def get_demographics_analytics(
    client: Client, campaign_id: str, pivot: str, start: date, end: date
) -> list[AnalyticsRow]:
    """Rows pivoted by a demographic dimension such as JOB_FUNCTION, rolled up over the range."""
    raw = (
        f"q=analytics&pivot={pivot}&timeGranularity=ALL"
        f"&dateRange={format_date_range(start, end)}&campaigns={_list_of(UrnKind.CAMPAIGN, campaign_id)}"
    )
    return _fetch(client, raw)


def get_single_campaign_analytics(
    client: Client, campaign_id: str, start: date, end: date
) -> list[AnalyticsRow]:
    """Rolled-up analytics for one campaign."""
    raw = (
        f"q=analytics&pivot=CAMPAIGN&timeGranularity=ALL"
        f"&dateRange={format_date_range(start, end)}&campaigns={_list_of(UrnKind.CAMPAIGN, campaign_id)}"
    )
    return _fetch(client, raw)


def get_single_campaign_group_analytics(
    client: Client, group_id: str, start: date, end: date
) -> list[AnalyticsRow]:
    """Rolled-up analytics for one campaign group."""
    raw = (
        f"q=analytics&pivot=CAMPAIGN_GROUP&timeGranularity=ALL"
        f"&dateRange={format_date_range(start, end)}"
        f"&campaignGroups={_list_of(UrnKind.CAMPAIGN_GROUP, group_id)}"
    )
    return _fetch(client, raw)


def get_reach_analytics(client: Client, campaign_id: str, start: date, end: date) -> list[AnalyticsRow]:
    """Reach and frequency metrics for one campaign."""
    raw = (
        f"q=analytics&pivot=CAMPAIGN&timeGranularity=ALL"
        f"&dateRange={format_date_range(start, end)}&campaigns={_list_of(UrnKind.CAMPAIGN, campaign_id)}"
    )
    return _fetch(client, raw, REACH_ANALYTICS_FIELDS)


def get_daily_trends_analytics(
    client: Client, account_id: str, campaign_id: str, start: date, end: date
) -> list[AnalyticsRow]:
    """DAILY rows scoped to a campaign, or else to an account.

    The campaign wins when both are given; giving neither raises ValueError.
    """
    if campaign_id:
        scope = f"campaigns={_list_of(UrnKind.CAMPAIGN, campaign_id)}"
    elif account_id:
        scope = f"accounts={_list_of(UrnKind.ACCOUNT, account_id)}"
    else:
        raise ValueError("daily trends needs an account id or a campaign id")
    raw = (
        f"q=analytics&pivot=CAMPAIGN&timeGranularity=DAILY"
        f"&dateRange={format_date_range(start, end)}&{scope}"
    )
    return _fetch(client, raw)


def _fetch(client: Client, raw_query: str, fields: str = DEFAULT_ANALYTICS_FIELDS) -> list[AnalyticsRow]:
    page = client.get_json_raw_query("/adAnalytics", f"{raw_query}&fields={fields}")
    elements = page.get("elements") if isinstance(page, dict) else None
    return [AnalyticsRow.from_json(element) for element in elements or []]