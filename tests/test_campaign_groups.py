import json
from urllib.parse import urlsplit

import pytest
import responses

from linkedin_ads.api.campaign_groups import (
    CreateCampaignGroupInput,
    UpdateCampaignGroupInput,
    create_campaign_group,
    delete_campaign_group,
    get_campaign_group,
    list_campaign_groups,
    update_campaign_group,
)
from linkedin_ads.api.shared import DateRange, Money
from linkedin_ads.client import Client

BASE = "https://api.example.com"


@pytest.fixture
def rsps():
    with responses.RequestsMock(assert_all_requests_are_fired=False) as mock:
        yield mock


@pytest.fixture
def client():
    return Client(BASE, token="token", api_version="202601")


def test_list_campaign_groups(rsps, client):
    rsps.add(
        responses.GET,
        BASE + "/adAccounts/12345/adCampaignGroups",
        json={
            "elements": [
                {
                    "id": 111,
                    "name": "Q1 Brand",
                    "status": "ACTIVE",
                    "account": "urn:li:sponsoredAccount:12345",
                    "totalBudget": {"amount": "5000.00", "currencyCode": "USD"},
                    "runSchedule": {"start": 1700000000000, "end": 1710000000000},
                    "servingStatuses": ["RUNNABLE"],
                },
                {"id": 222, "name": "Q2 Brand", "status": "DRAFT", "account": "urn:li:sponsoredAccount:12345"},
            ],
            "metadata": {},
        },
    )
    groups = list_campaign_groups(client, "12345", 0)
    split = urlsplit(rsps.calls[0].request.url)
    assert split.path == "/adAccounts/12345/adCampaignGroups"
    assert "q=search" in split.query
    assert "search." not in split.query
    assert len(groups) == 2
    group = groups[0]
    assert (group.id, group.name, group.status) == (111, "Q1 Brand", "ACTIVE")
    assert group.account == "urn:li:sponsoredAccount:12345"
    assert group.total_budget == Money("5000.00", "USD")
    assert group.run_schedule is not None and group.run_schedule.start == 1700000000000
    assert group.serving_statuses == ["RUNNABLE"]
    assert groups[1].total_budget is None


def test_create_campaign_group(rsps, client):
    rsps.add(responses.POST, BASE + "/adAccounts/12345/adCampaignGroups", status=201, headers={"X-LinkedIn-Id": "555"})
    data = CreateCampaignGroupInput(
        account="urn:li:sponsoredAccount:12345",
        name="Q2 Brand",
        total_budget=Money(amount="5000", currency_code="USD"),
        run_schedule=DateRange(start=1745000000000),
    )
    new_id = create_campaign_group(client, "12345", data)
    request = rsps.calls[0].request
    body = json.loads(request.body)
    assert request.method == "POST"
    assert urlsplit(request.url).path == "/adAccounts/12345/adCampaignGroups"
    assert new_id == "555"
    assert body["account"] == "urn:li:sponsoredAccount:12345"
    assert body["name"] == "Q2 Brand"
    assert body["status"] == "DRAFT"
    assert body["totalBudget"] == {"amount": "5000", "currencyCode": "USD"}
    assert body["runSchedule"]["start"] == 1745000000000


def test_update_campaign_group_only_status(rsps, client):
    rsps.add(responses.POST, BASE + "/adAccounts/12345/adCampaignGroups/111", status=204)
    result = update_campaign_group(client, "12345", "111", UpdateCampaignGroupInput(status="ACTIVE"))
    assert result is None
    assert len(rsps.calls) == 1
    request = rsps.calls[0].request
    assert request.method == "POST"
    assert urlsplit(request.url).path == "/adAccounts/12345/adCampaignGroups/111"
    assert request.headers["X-RestLi-Method"] == "PARTIAL_UPDATE"
    assert request.body.decode().strip() == '{"patch":{"$set":{"status":"ACTIVE"}}}'


def test_delete_campaign_group(rsps, client):
    rsps.add(responses.DELETE, BASE + "/adAccounts/12345/adCampaignGroups/111", status=204)
    result = delete_campaign_group(client, "12345", "111")
    assert result is None
    assert len(rsps.calls) == 1
    request = rsps.calls[0].request
    assert request.method == "DELETE"
    assert urlsplit(request.url).path == "/adAccounts/12345/adCampaignGroups/111"


def test_get_campaign_group(rsps, client):
    rsps.add(
        responses.GET,
        BASE + "/adAccounts/12345/adCampaignGroups/111",
        json={"id": 111, "name": "Q1", "status": "ACTIVE", "account": "urn:li:sponsoredAccount:12345"},
    )
    group = get_campaign_group(client, "12345", "111")
    assert (group.id, group.name) == (111, "Q1")