import pytest
import requests
import responses

from linkedin_ads.client import Client
from linkedin_ads.errors import APIError, ClientError
from linkedin_ads.retry import MAX_ATTEMPTS, retry_delay, should_retry

BASE = "https://api.example.com"


@pytest.fixture
def mock_api():
    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        yield rsps


@pytest.fixture
def client():
    return Client(BASE, token="token", api_version="202601")


def _response_with(headers):
    response = requests.Response()
    response.status_code = 429
    response.headers.update(headers)
    return response


def test_retry_on_429_then_success(mock_api, client):
    calls = []

    def callback(request):
        calls.append(request)
        if len(calls) < 3:
            return 429, {"Retry-After": "0"}, ""
        return 200, {}, '{"ok":"yes"}'

    mock_api.add_callback(responses.GET, f"{BASE}/x", callback=callback)
    out = client.get_json("/x")
    assert len(calls) == 3
    assert out == {"ok": "yes"}


def test_retry_gives_up_after_max_attempts(mock_api, client):
    calls = []

    def callback(request):
        calls.append(request)
        return 503, {"Retry-After": "0"}, ""

    mock_api.add_callback(responses.GET, f"{BASE}/x", callback=callback)
    with pytest.raises(ClientError):
        client.get_json("/x")
    assert len(calls) == 3
    assert MAX_ATTEMPTS == 3


def test_no_retry_on_400(mock_api, client):
    calls = []

    def callback(request):
        calls.append(request)
        return 400, {}, '{"status":400,"code":"BAD","message":"nope"}'

    mock_api.add_callback(responses.GET, f"{BASE}/x", callback=callback)
    with pytest.raises(APIError) as info:
        client.get_json("/x")
    assert info.value.status == 400
    assert len(calls) == 1


@pytest.mark.parametrize("status", [429, 502, 503, 504])
def test_should_retry_transient(status):
    assert should_retry(status) is True


@pytest.mark.parametrize("status", [200, 400, 401, 403, 404, 500])
def test_should_not_retry_other(status):
    assert should_retry(status) is False


@pytest.mark.parametrize(("attempt", "expected"), [(0, 0.2), (1, 0.4), (2, 0.8)])
def test_retry_delay_backoff(attempt, expected):
    assert retry_delay(None, attempt) == pytest.approx(expected)


def test_retry_delay_honours_retry_after():
    assert retry_delay(_response_with({"Retry-After": "5"}), 0) == pytest.approx(5.0)


def test_retry_delay_ignores_non_integer_retry_after():
    response = _response_with({"Retry-After": "Wed, 21 Oct 2015 07:28:00 GMT"})
    assert retry_delay(response, 1) == pytest.approx(retry_delay(None, 1))


def test_retry_delay_without_header_backs_off():
    assert retry_delay(_response_with({}), 2) == pytest.approx(retry_delay(None, 2))