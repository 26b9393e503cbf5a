"""Sponsored ad accounts (/adAccounts)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from linkedin_ads.client import Client
from linkedin_ads.pagination import paginate_start_count


@dataclass(frozen=True)
class Account:
    """A LinkedIn sponsored ad account."""

    id: int = 0
    name: str = ""
    status: str = ""
    type: str = ""
    currency: str = ""

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> Account:
        return cls(
            id=int(data.get("id") or 0),
            name=data.get("name") or "",
            status=data.get("status") or "",
            type=data.get("type") or "",
            currency=data.get("currency") or "",
        )


def list_accounts(client: Client, limit: int = 0) -> list[Account]:
    """Return the ad accounts the token can access, at most limit when positive."""
    elements = paginate_start_count(client, "/adAccounts", {"q": "search"}, 500, limit)
    return [Account.from_json(element) for element in elements]


def get_account(client: Client, account_id: str) -> Account:
    """Fetch a single ad account by id."""
    return Account.from_json(client.get_json(f"/adAccounts/{account_id}"))