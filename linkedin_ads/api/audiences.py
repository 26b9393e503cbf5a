"""DMP segments (/dmpSegments)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from linkedin_ads.api.shared import UrnKind, wrap_urn
from linkedin_ads.client import Client
from linkedin_ads.pagination import paginate_start_count


@dataclass(frozen=True)
class Audience:
    """A matched or lookalike audience segment."""

    id: int = 0
    name: str = ""
    type: str = ""
    source_platform: str = ""
    status: str = ""
    audience_count: int = 0
    matched_count: int = 0
    description: str = ""

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> Audience:
        return cls(
            id=int(data.get("id") or 0),
            name=data.get("name") or "",
            type=data.get("type") or "",
            source_platform=data.get("sourcePlatform") or "",
            status=data.get("status") or "",
            audience_count=int(data.get("audienceCount") or 0),
            matched_count=int(data.get("matchedCount") or 0),
            description=data.get("description") or "",
        )


def list_audiences(client: Client, account_id: str, limit: int = 0) -> list[Audience]:
    """Return the DMP segments of an account given by bare id."""
    query = {"q": "account", "account": wrap_urn(UrnKind.ACCOUNT, account_id)}
    elements = paginate_start_count(client, "/dmpSegments", query, 500, limit)
    return [Audience.from_json(element) for element in elements]