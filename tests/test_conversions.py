import json
import re
from datetime import date
from urllib.parse import parse_qs, urlsplit

import pytest
import responses

from linkedin_ads.api.conversions import (
    ConversionEventInput,
    ConversionEventValue,
    ConversionUserID,
    get_conversion_performance,
    list_conversions,
    post_conversion_event,
)
from linkedin_ads.api.shared import Money
from linkedin_ads.client import Client

BASE = "https://api.test/rest"


def _url(path):
    return re.compile(re.escape(BASE + path) + r"(\?.*)?$")


@pytest.fixture
def mocked():
    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        yield rsps


@pytest.fixture
def client():
    return Client(BASE, token="token", api_version="202601")


def test_list_conversions(mocked, client):
    mocked.add(
        responses.GET,
        _url("/conversions"),
        json={
            "elements": [
                {
                    "id": 1,
                    "name": "Signup",
                    "type": "LANDING",
                    "enabled": True,
                    "attributionType": "LAST_TOUCH_BY_CAMPAIGN",
                    "postClickAttributionWindowSize": 30,
                    "viewThroughAttributionWindowSize": 7,
                    "value": {"amount": "10.00", "currencyCode": "USD"},
                    "account": "urn:li:sponsoredAccount:12345",
                }
            ],
            "paging": {"start": 0, "count": 1, "total": 1},
        },
    )
    convs = list_conversions(client, "12345")
    url = urlsplit(mocked.calls[0].request.url)
    params = parse_qs(url.query)
    assert url.path == "/rest/conversions"
    assert params["q"] == ["account"]
    assert params["account"] == ["urn:li:sponsoredAccount:12345"]
    assert len(convs) == 1
    cv = convs[0]
    assert (cv.id, cv.name, cv.enabled) == (1, "Signup", True)
    assert cv.post_click_attribution_window == 30
    assert cv.view_through_attribution_window == 7
    assert cv.value == Money(amount="10.00", currency_code="USD")


def test_list_conversions_limit(mocked, client):
    mocked.add(
        responses.GET,
        _url("/conversions"),
        json={"elements": [{"id": 1}, {"id": 2}, {"id": 3}], "paging": {"total": 3}},
    )
    convs = list_conversions(client, "12345", limit=2)
    assert [c.id for c in convs] == [1, 2]


def test_get_conversion_performance(mocked, client):
    mocked.add(
        responses.GET,
        _url("/adAnalytics"),
        json={
            "elements": [
                {
                    "pivotValue": "urn:li:lmsConversion:1",
                    "impressions": 1000,
                    "clicks": 50,
                    "externalWebsiteConversions": 7,
                    "costInUsd": "12.34",
                },
                {
                    "pivotValue": "urn:li:lmsConversion:2",
                    "impressions": 500,
                    "clicks": 20,
                    "externalWebsiteConversions": 3,
                    "costInUsd": "5.00",
                },
            ]
        },
    )
    rows = get_conversion_performance(client, "12345", date(2026, 3, 1), date(2026, 3, 31))
    raw = urlsplit(mocked.calls[0].request.url).query
    assert "q=analytics" in raw
    assert "pivot=CONVERSION" in raw
    assert "accounts=List(urn%3Ali%3AsponsoredAccount%3A12345)" in raw
    assert "dateRange=(start:(year:2026,month:3,day:1),end:(year:2026,month:3,day:31))" in raw
    assert "fields=" in raw
    assert "externalWebsiteConversions" in raw
    assert len(rows) == 2
    assert rows[0].conversion == "urn:li:lmsConversion:1"
    assert rows[0].impressions == 1000
    assert rows[0].conversions == 7
    assert rows[1].cost_in_usd == "5.00"


def test_get_conversion_performance_empty(mocked, client):
    mocked.add(responses.GET, _url("/adAnalytics"), json={})
    assert get_conversion_performance(client, "1", date(2026, 1, 1), date(2026, 1, 2)) == []


def test_post_conversion_event(mocked, client):
    mocked.add(
        responses.POST,
        _url("/conversionEvents"),
        status=201,
        headers={"X-RestLi-Id": "evt-1"},
    )
    event = ConversionEventInput(
        conversion="urn:lla:llaPartnerConversion:5",
        conversion_happened_at=1700000000000,
        user_ids=[ConversionUserID("SHA256_EMAIL", "abc123")],
        conversion_value=ConversionEventValue(currency_code="USD", amount="9.99"),
        event_id="e-1",
    )
    new_id = post_conversion_event(client, event)
    assert new_id == "evt-1"
    body = json.loads(mocked.calls[0].request.body)
    assert body == {
        "conversion": "urn:lla:llaPartnerConversion:5",
        "conversionHappenedAt": 1700000000000,
        "user": {"userIds": [{"idType": "SHA256_EMAIL", "idValue": "abc123"}]},
        "conversionValue": {"currencyCode": "USD", "amount": "9.99"},
        "eventId": "e-1",
    }


def test_conversion_event_omits_optional_fields():
    event = ConversionEventInput(conversion="urn:x:1", conversion_happened_at=5)
    assert event.to_json() == {
        "conversion": "urn:x:1",
        "conversionHappenedAt": 5,
        "user": {"userIds": []},
    }