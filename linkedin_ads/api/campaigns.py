"""Campaigns under /adAccounts/{id}/adCampaigns."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any

from linkedin_ads.api.shared import DateRange, Locale, Money, UrnKind, wrap_urn
from linkedin_ads.client import Client
from linkedin_ads.pagination import paginate_token


def _optional(kind: Any, value: Any) -> Any:
    return kind.from_json(value) if isinstance(value, dict) else None


def _facet_map(value: Any) -> dict[str, list[str]]:
    if not isinstance(value, dict):
        return {}
    return {facet: list(values or []) for facet, values in value.items()}


@dataclass(frozen=True)
class TargetingCriteria:
    """Targeting: include is an AND of OR-clauses, exclude a single OR-clause.

    Each clause maps a facet URN to its values.
    """

    include: list[dict[str, list[str]]] | None = None
    exclude: dict[str, list[str]] | None = None

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> TargetingCriteria:
        include = None
        raw_include = data.get("include")
        if isinstance(raw_include, dict):
            include = [
                _facet_map(clause.get("or"))
                for clause in raw_include.get("and") or []
                if isinstance(clause, dict)
            ]
        exclude = None
        raw_exclude = data.get("exclude")
        if isinstance(raw_exclude, dict):
            exclude = _facet_map(raw_exclude.get("or"))
        return cls(include=include, exclude=exclude)

    def included_facets(self) -> dict[str, list[str]]:
        """Flatten every include clause into one facet-to-values map."""
        out: dict[str, list[str]] = {}
        for clause in self.include or []:
            for facet, values in clause.items():
                out.setdefault(facet, []).extend(values)
        return out

    def excluded_facets(self) -> dict[str, list[str]]:
        """Return the exclude clause as a facet-to-values map."""
        return {facet: list(values) for facet, values in (self.exclude or {}).items()}


@dataclass(frozen=True)
class Campaign:
    """A LinkedIn ad campaign."""

    id: int = 0
    name: str = ""
    status: str = ""
    account: str = ""
    campaign_group: str = ""
    type: str = ""
    objective: str = ""
    locale: Locale | None = None
    daily_budget: Money | None = None
    total_budget: Money | None = None
    run_schedule: DateRange | None = None
    cost_type: str = ""
    unit_cost: Money | None = None
    targeting_criteria: TargetingCriteria | None = None
    optimization_target: str = ""
    serving_statuses: list[str] = field(default_factory=list)
    format: str = ""

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> Campaign:
        return cls(
            id=int(data.get("id") or 0),
            name=data.get("name") or "",
            status=data.get("status") or "",
            account=data.get("account") or "",
            campaign_group=data.get("campaignGroup") or "",
            type=data.get("type") or "",
            objective=data.get("objectiveType") or "",
            locale=_optional(Locale, data.get("locale")),
            daily_budget=_optional(Money, data.get("dailyBudget")),
            total_budget=_optional(Money, data.get("totalBudget")),
            run_schedule=_optional(DateRange, data.get("runSchedule")),
            cost_type=data.get("costType") or "",
            unit_cost=_optional(Money, data.get("unitCost")),
            targeting_criteria=_optional(TargetingCriteria, data.get("targetingCriteria")),
            optimization_target=data.get("optimizationTargetType") or "",
            serving_statuses=list(data.get("servingStatuses") or []),
            format=data.get("format") or "",
        )


@dataclass(frozen=True)
class CreateCampaignInput:
    """Body for creating a campaign; account and campaign group must be full URNs."""

    account: str
    campaign_group: str
    name: str
    status: str = ""
    type: str = ""
    objective_type: str = ""
    cost_type: str = ""
    locale: Locale | None = None
    daily_budget: Money | None = None
    total_budget: Money | None = None
    unit_cost: Money | None = None
    run_schedule: DateRange | None = None

    def to_json(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "account": self.account,
            "campaignGroup": self.campaign_group,
            "name": self.name,
            "status": self.status,
            "type": self.type,
            "objectiveType": self.objective_type,
            "costType": self.cost_type,
        }
        optional = {
            "locale": self.locale,
            "dailyBudget": self.daily_budget,
            "totalBudget": self.total_budget,
            "unitCost": self.unit_cost,
            "runSchedule": self.run_schedule,
        }
        out.update({key: value.to_json() for key, value in optional.items() if value is not None})
        return out


@dataclass(frozen=True)
class UpdateCampaignInput:
    """Partial update of status, name, daily budget or bid; None fields are not sent."""

    status: str | None = None
    name: str | None = None
    daily_budget: Money | None = None
    unit_cost: Money | None = None

    def to_json(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.status is not None:
            out["status"] = self.status
        if self.name is not None:
            out["name"] = self.name
        if self.daily_budget is not None:
            out["dailyBudget"] = self.daily_budget.to_json()
        if self.unit_cost is not None:
            out["unitCost"] = self.unit_cost.to_json()
        return out


def _path(account_id: str, campaign_id: str = "") -> str:
    path = f"/adAccounts/{account_id}/adCampaigns"
    return f"{path}/{campaign_id}" if campaign_id else path


def list_campaigns(client: Client, account_id: str, group_id: str = "", limit: int = 0) -> list[Campaign]:
    """Return the campaigns of an account, optionally only those of one group."""
    query = {"q": "search"}
    if group_id:
        query["search.campaignGroup.values[0]"] = wrap_urn(UrnKind.CAMPAIGN_GROUP, group_id)
    elements = paginate_token(client, _path(account_id), query, limit)
    return [Campaign.from_json(element) for element in elements]


def get_campaign(client: Client, account_id: str, campaign_id: str) -> Campaign:
    """Fetch a single campaign."""
    return Campaign.from_json(client.get_json(_path(account_id, campaign_id)))


def create_campaign(client: Client, account_id: str, data: CreateCampaignInput) -> str:
    """Create a campaign and return its new id; status defaults to DRAFT, cost type to CPM."""
    data = replace(data, status=data.status or "DRAFT", cost_type=data.cost_type or "CPM")
    return client.post_json(_path(account_id), data.to_json()).resource_id


def update_campaign(client: Client, account_id: str, campaign_id: str, data: UpdateCampaignInput) -> None:
    """Apply a Rest.li partial update to a campaign."""
    client.partial_update(_path(account_id, campaign_id), {"patch": {"$set": data.to_json()}})


def delete_campaign(client: Client, account_id: str, campaign_id: str) -> None:
    """Hard-delete a campaign; LinkedIn only allows this for DRAFT campaigns."""
    client.delete(_path(account_id, campaign_id))