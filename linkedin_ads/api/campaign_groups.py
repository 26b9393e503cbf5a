"""Campaign groups under /adAccounts/{id}/adCampaignGroups."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any

from linkedin_ads.api.shared import DateRange, Money
from linkedin_ads.client import Client
from linkedin_ads.pagination import paginate_token


def _money(value: Any) -> Money | None:
    return Money.from_json(value) if isinstance(value, dict) else None


def _date_range(value: Any) -> DateRange | None:
    return DateRange.from_json(value) if isinstance(value, dict) else None


@dataclass(frozen=True)
class CampaignGroup:
    """A LinkedIn ad campaign group."""

    id: int = 0
    name: str = ""
    status: str = ""
    account: str = ""
    total_budget: Money | None = None
    run_schedule: DateRange | None = None
    serving_statuses: list[str] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> CampaignGroup:
        return cls(
            id=int(data.get("id") or 0),
            name=data.get("name") or "",
            status=data.get("status") or "",
            account=data.get("account") or "",
            total_budget=_money(data.get("totalBudget")),
            run_schedule=_date_range(data.get("runSchedule")),
            serving_statuses=list(data.get("servingStatuses") or []),
        )


@dataclass(frozen=True)
class CreateCampaignGroupInput:
    """Body for creating a campaign group; account must be a full URN."""

    account: str
    name: str
    status: str = ""
    total_budget: Money | None = None
    run_schedule: DateRange | None = None

    def to_json(self) -> dict[str, Any]:
        out: dict[str, Any] = {"account": self.account, "name": self.name, "status": self.status}
        if self.total_budget is not None:
            out["totalBudget"] = self.total_budget.to_json()
        if self.run_schedule is not None:
            out["runSchedule"] = self.run_schedule.to_json()
        return out


@dataclass(frozen=True)
class UpdateCampaignGroupInput:
    """Partial update; fields left as None are not sent and stay untouched."""

    status: str | None = None
    name: str | None = None
    total_budget: Money | None = None
    run_schedule: DateRange | None = None

    def to_json(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.status is not None:
            out["status"] = self.status
        if self.name is not None:
            out["name"] = self.name
        if self.total_budget is not None:
            out["totalBudget"] = self.total_budget.to_json()
        if self.run_schedule is not None:
            out["runSchedule"] = self.run_schedule.to_json()
        return out


def _path(account_id: str, group_id: str = "") -> str:
    path = f"/adAccounts/{account_id}/adCampaignGroups"
    return f"{path}/{group_id}" if group_id else path


def list_campaign_groups(client: Client, account_id: str, limit: int = 0) -> list[CampaignGroup]:
    """Return the campaign groups of an account, at most limit when positive."""
    elements = paginate_token(client, _path(account_id), {"q": "search"}, limit)
    return [CampaignGroup.from_json(element) for element in elements]


def get_campaign_group(client: Client, account_id: str, group_id: str) -> CampaignGroup:
    """Fetch a single campaign group."""
    return CampaignGroup.from_json(client.get_json(_path(account_id, group_id)))


def create_campaign_group(client: Client, account_id: str, data: CreateCampaignGroupInput) -> str:
    """Create a campaign group and return its new id; status defaults to DRAFT."""
    if not data.status:
        data = replace(data, status="DRAFT")
    return client.post_json(_path(account_id), data.to_json()).resource_id


def update_campaign_group(
    client: Client, account_id: str, group_id: str, data: UpdateCampaignGroupInput
) -> None:
    """Apply a Rest.li partial update to a campaign group."""
    client.partial_update(_path(account_id, group_id), {"patch": {"$set": data.to_json()}})


def delete_campaign_group(client: Client, account_id: str, group_id: str) -> None:
    """Hard-delete a campaign group; LinkedIn only allows this for DRAFT groups."""
    client.delete(_path(account_id, group_id))