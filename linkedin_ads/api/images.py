"""Two-step image upload (initialize, then PUT the bytes)."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from linkedin_ads.api.shared import UrnKind, wrap_urn
from linkedin_ads.client import Client

_MIME_TYPES = {
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".gif": "image/gif",
}


@dataclass(frozen=True)
class UploadImageResult:
    """The URN assigned to an uploaded image and the URL it was sent to."""

    image_urn: str
    upload_url: str


def detect_mime(path: str | Path) -> str:
    """Content type for a file, judged by its extension."""
    return _MIME_TYPES.get(Path(path).suffix.lower(), "application/octet-stream")


def upload_image(
    client: Client,
    file_path: str | Path,
    owner_urn: str,
    account_id: str = "",
    asset_name: str = "",
) -> UploadImageResult:
    """Upload an image file and return its URN.

    When both account_id and asset_name are given the image is also filed in
    the account's media library.
    """
    request: dict[str, Any] = {"owner": owner_urn}
    if account_id and asset_name:
        request["mediaLibraryMetadata"] = {
            "associatedAccount": wrap_urn(UrnKind.ACCOUNT, account_id),
            "assetName": asset_name,
        }
    reply = client.post_json(
        "/images?action=initializeUpload", {"initializeUploadRequest": request}
    ).json()
    value = reply.get("value") if isinstance(reply, dict) else None
    if not isinstance(value, dict):
        value = {}
    upload_url = value.get("uploadUrl") or ""
    image_urn = value.get("image") or ""

    data = Path(file_path).read_bytes()
    client.put_binary(upload_url, data, detect_mime(file_path))
    return UploadImageResult(image_urn=image_urn, upload_url=upload_url)