"""Ad creatives under /adAccounts/{id}/creatives."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from linkedin_ads.api.shared import UrnKind, encode_urn_for_list, wrap_urn
from linkedin_ads.client import Client


@dataclass(frozen=True)
class Creative:
    """A LinkedIn ad creative; its id is a URN such as urn:li:sponsoredCreative:1."""

    id: str = ""
    status: str = ""
    intended_status: str = ""
    campaign: str = ""
    review: dict[str, Any] | None = None
    created_at: int = 0
    last_modified_at: int = 0

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> Creative:
        review = data.get("review")
        return cls(
            id=data.get("id") or "",
            status=data.get("status") or "",
            intended_status=data.get("intendedStatus") or "",
            campaign=data.get("campaign") or "",
            review=review if isinstance(review, dict) else None,
            created_at=int(data.get("createdAt") or 0),
            last_modified_at=int(data.get("lastModifiedAt") or 0),
        )

    def review_status(self) -> str:
        """The review status, or "" when the creative carries no review."""
        if self.review is None:
            return ""
        return self.review.get("status") or ""


@dataclass(frozen=True)
class CreateCreativeInput:
    """Body for a creative that references an existing post or share."""

    campaign: str
    intended_status: str
    reference: str = ""
    name: str = ""

    def to_json(self) -> dict[str, Any]:
        out: dict[str, Any] = {"campaign": self.campaign, "intendedStatus": self.intended_status}
        if self.reference:
            out["content"] = {"reference": self.reference}
        if self.name:
            out["name"] = self.name
        return out


@dataclass(frozen=True)
class CreateInlineCreativeInput:
    """Fields of a creative whose post content is created inline."""

    campaign: str
    org_id: str
    intended_status: str
    commentary: str = ""
    account_id: str = ""
    name: str = ""
    image_urn: str = ""
    image_title: str = ""
    landing_page_url: str = ""
    cta_label: str = ""


def build_inline_creative_body(account_id: str, data: CreateInlineCreativeInput) -> dict[str, Any]:
    """Build the nested createInline request body (also usable as a dry-run preview)."""
    post: dict[str, Any] = {
        "adContext": {
            "dscAdAccount": wrap_urn(UrnKind.ACCOUNT, account_id),
            "dscStatus": "ACTIVE",
        },
        "author": wrap_urn(UrnKind.ORGANIZATION, data.org_id),
        "commentary": data.commentary,
        "visibility": "PUBLIC",
        "lifecycleState": "PUBLISHED",
        "isReshareDisabledByAuthor": False,
    }
    if data.image_urn:
        post["content"] = {"media": {"id": data.image_urn, "title": data.image_title}}
    if data.landing_page_url:
        post["contentLandingPage"] = data.landing_page_url
    if data.cta_label:
        post["contentCallToActionLabel"] = data.cta_label
    creative: dict[str, Any] = {
        "campaign": wrap_urn(UrnKind.CAMPAIGN, data.campaign),
        "intendedStatus": data.intended_status,
        "inlineContent": {"post": post},
    }
    if data.name:
        creative["name"] = data.name
    return {"creative": creative}


def list_creatives(
    client: Client, account_id: str, campaign_id: str = "", limit: int = 0
) -> list[Creative]:
    """Return the creatives of an account, optionally of one campaign only.

    Pages are followed through metadata.nextPageToken; with a positive limit
    at most that many creatives are returned.
    """
    path = f"/adAccounts/{account_id}/creatives"
    # Raw query: List() parentheses must reach the server unescaped.
    base_query = "q=criteria"
    if campaign_id:
        campaign = encode_urn_for_list(wrap_urn(UrnKind.CAMPAIGN, campaign_id))
        base_query += f"&campaigns=List({campaign})"

    items: list[Any] = []
    token = ""
    while True:
        raw_query = base_query
        if token:
            raw_query += f"&pageToken={encode_urn_for_list(token)}"
        page = client.get_json_raw_query(path, raw_query)
        items.extend(_elements(page))
        if limit > 0 and len(items) >= limit:
            items = items[:limit]
            break
        token = _next_token(page)
        if not token:
            break
    return [Creative.from_json(item) for item in items]


def create_creative(client: Client, account_id: str, data: CreateCreativeInput) -> str:
    """Create a creative and return its new id."""
    return client.post_json(f"/adAccounts/{account_id}/creatives", data.to_json()).resource_id


def create_inline_creative(client: Client, account_id: str, data: CreateInlineCreativeInput) -> str:
    """Create a creative with inline post content and return its new id."""
    body = build_inline_creative_body(account_id, data)
    return client.post_json(
        f"/adAccounts/{account_id}/creatives?action=createInline", body
    ).resource_id


def update_creative_status(client: Client, account_id: str, creative_urn: str, status: str) -> None:
    """Change a creative's intendedStatus; creative_urn may be a URN or a bare id."""
    encoded = encode_urn_for_list(wrap_urn(UrnKind.CREATIVE, creative_urn))
    body = {"patch": {"$set": {"intendedStatus": status}}}
    client.partial_update(f"/adAccounts/{account_id}/creatives/{encoded}", body)


def get_creative(client: Client, account_id: str, creative_id: str) -> Creative:
    """Fetch a single creative by its bare numeric id."""
    encoded = encode_urn_for_list(wrap_urn(UrnKind.CREATIVE, creative_id))
    return Creative.from_json(client.get_json(f"/adAccounts/{account_id}/creatives/{encoded}"))


def _elements(page: Any) -> list[Any]:
    if not isinstance(page, dict):
        return []
    elements = page.get("elements")
    return elements if isinstance(elements, list) else []


def _next_token(page: Any) -> str:
    metadata = page.get("metadata") if isinstance(page, dict) else None
    if not isinstance(metadata, dict):
        return ""
    token = metadata.get("nextPageToken")
    return token if isinstance(token, str) else ""