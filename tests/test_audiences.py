from urllib.parse import parse_qs, urlsplit

import pytest
import responses

from linkedin_ads.api.audiences import list_audiences
from linkedin_ads.client import Client

BASE = "https://api.example.com"


@pytest.fixture
def rsps():
    with responses.RequestsMock(assert_all_requests_are_fired=False) as mock:
        yield mock


def test_list_audiences(rsps):
    rsps.add(
        responses.GET,
        BASE + "/dmpSegments",
        json={
            "elements": [
                {
                    "id": 1,
                    "name": "Lookalike A",
                    "type": "LOOKALIKE",
                    "sourcePlatform": "LINKEDIN",
                    "status": "READY",
                    "audienceCount": 10000,
                    "matchedCount": 8000,
                    "description": "test",
                }
            ],
            "paging": {"start": 0, "count": 1, "total": 1},
        },
    )
    client = Client(BASE, token="token", api_version="202601")
    audiences = list_audiences(client, "12345", 0)
    split = urlsplit(rsps.calls[0].request.url)
    query = parse_qs(split.query)
    assert split.path == "/dmpSegments"
    assert query["q"] == ["account"]
    assert query["account"] == ["urn:li:sponsoredAccount:12345"]
    assert len(audiences) == 1
    audience = audiences[0]
    assert (audience.id, audience.name, audience.status) == (1, "Lookalike A", "READY")
    assert (audience.audience_count, audience.matched_count) == (10000, 8000)
    assert audience.source_platform == "LINKEDIN"