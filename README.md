# linkedin-ads

A small, typed Python client for the LinkedIn Marketing API. It takes care of
the parts that are easy to get wrong: the `Linkedin-Version` and Rest.li
protocol headers, retries on rate limits and transient gateway errors, Rest.li
query syntax that must not be percent-escaped, and the start/count, next-link
and page-token pagination styles the API uses.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Creating a client

```python
from linkedin_ads.client import Client

client = Client(
    base_url="https://api.linkedin.com/rest",
    token="token",
    api_version="202601",
)
```

Other keyword arguments:

- `session`: a `requests.Session` to send requests with (a new one by default).
- `timeout`: per-request timeout in seconds (30 by default).
- `verbose` and `logger`: with `verbose=True`, one line per request
  (method, URL, status, duration in ms and response size) is written to
  `logger`, which defaults to `sys.stderr`. The bearer token is never written.

The client also offers the lower-level calls the resource helpers are built on:
`get_json`, `get_json_raw_query` (query string forwarded verbatim),
`post_json` (returns a `PostResult` with `resource_id` taken from
`X-RestLi-Id` or `X-LinkedIn-Id`, and a `json()` method for the body),
`partial_update`, `delete` and `put_binary`.

## Listing and reading resources

```python
from linkedin_ads.api.accounts import get_account, list_accounts
from linkedin_ads.api.audiences import list_audiences
from linkedin_ads.api.campaign_groups import list_campaign_groups
from linkedin_ads.api.campaigns import get_campaign, list_campaigns
from linkedin_ads.api.conversions import list_conversions
from linkedin_ads.api.creatives import get_creative, list_creatives
from linkedin_ads.api.leads import list_lead_forms

for account in list_accounts(client, limit=10):
    print(account.id, account.name, account.currency)

account = get_account(client, "12345")
groups = list_campaign_groups(client, "12345")
campaigns = list_campaigns(client, "12345", group_id="111")
campaign = get_campaign(client, "12345", "10")
creatives = list_creatives(client, "12345", campaign_id="42")
creative = get_creative(client, "12345", "1")
audiences = list_audiences(client, "12345")
conversions = list_conversions(client, "12345")
forms = list_lead_forms(client, "12345")
```

Account, campaign and group ids are bare numeric ids; the helpers build the
URNs (`urn:li:sponsoredAccount:12345` and so on). Results are frozen
dataclasses such as `Account`, `Campaign`, `CampaignGroup`, `Creative`,
`Audience`, `Conversion` and `LeadForm`.

A `limit` of 0 fetches every page; a positive limit stops once that many items
have been collected.

Campaign targeting is exposed as `TargetingCriteria`, whose
`included_facets()` merges every include clause into one facet-to-values map
and `excluded_facets()` returns the exclude clause. `Creative.review_status()`
returns the review status, or `""` when there is none.

## Analytics

```python
import datetime

from linkedin_ads.api.analytics import get_campaign_analytics

rows = get_campaign_analytics(
    client,
    "12345",
    datetime.date(2026, 1, 1),
    datetime.date(2026, 1, 31),
    "ALL",
)
for row in rows:
    metrics = row.derived_metrics()
    print(row.impressions, row.clicks, row.cost_in_usd, metrics["ctr"], metrics["cpc"])
```

`derived_metrics()` returns `ctr`, `cpc`, `cpm`, `cpl` and `conversionRate`;
any ratio with a zero denominator is reported as 0.

Other reports in `linkedin_ads.api.analytics`:

- `get_creative_analytics(client, campaign_id, start, end, granularity)`
- `get_demographics_analytics(client, campaign_id, pivot, start, end)`, e.g.
  with `pivot="JOB_FUNCTION"`
- `get_single_campaign_analytics(client, campaign_id, start, end)`
- `get_single_campaign_group_analytics(client, group_id, start, end)`
- `get_reach_analytics(client, campaign_id, start, end)`, which requests reach
  fields (`member_reach`, `audience_penetration`)
- `get_daily_trends_analytics(client, account_id, campaign_id, start, end)`:
  daily rows for the campaign if one is given, otherwise for the account;
  `ValueError` if neither is given

Also `get_conversion_performance(client, account_id, start, end)` in
`linkedin_ads.api.conversions` and
`get_lead_performance(client, account_id, form_id, start, end)` in
`linkedin_ads.api.leads`. The lead report is pivoted by campaign; `form_id`
does not narrow it.

## Creating, updating and deleting

```python
from linkedin_ads.api.campaign_groups import (
    CreateCampaignGroupInput,
    UpdateCampaignGroupInput,
    create_campaign_group,
    delete_campaign_group,
    update_campaign_group,
)
from linkedin_ads.api.shared import Money

group_id = create_campaign_group(
    client,
    "12345",
    CreateCampaignGroupInput(
        account="urn:li:sponsoredAccount:12345",
        name="Q2 Brand",
        total_budget=Money(amount="5000", currency_code="USD"),
    ),
)

update_campaign_group(client, "12345", group_id, UpdateCampaignGroupInput(status="ACTIVE"))
delete_campaign_group(client, "12345", group_id)
```

Campaigns work the same way with `CreateCampaignInput`, `UpdateCampaignInput`,
`create_campaign`, `update_campaign` and `delete_campaign` in
`linkedin_ads.api.campaigns`. New campaign groups and campaigns default to
`DRAFT` status, and campaigns to the `CPM` cost type. Updates send only the
fields that are set, as a Rest.li partial update. LinkedIn only accepts hard
deletes of `DRAFT` groups and campaigns.

## Creatives and images

```python
from linkedin_ads.api.creatives import (
    CreateInlineCreativeInput,
    build_inline_creative_body,
    create_inline_creative,
    update_creative_status,
)
from linkedin_ads.api.images import upload_image

image = upload_image(
    client, "banner.png", "urn:li:organization:789", account_id="12345", asset_name="banner"
)

creative = CreateInlineCreativeInput(
    campaign="42",
    org_id="789",
    intended_status="ACTIVE",
    commentary="Check out our product!",
    image_urn=image.image_urn,
    landing_page_url="https://example.com",
    cta_label="LEARN_MORE",
)
preview = build_inline_creative_body("12345", creative)  # the request body, not sent
creative_id = create_inline_creative(client, "12345", creative)
update_creative_status(client, "12345", creative_id, "PAUSED")
```

`upload_image` initialises the upload, then PUTs the file bytes with a content
type chosen from the extension by `detect_mime` (`.png`, `.jpg`/`.jpeg`,
`.gif`, otherwise `application/octet-stream`). Creatives that reference an
existing post are made with `CreateCreativeInput` and `create_creative`.

## Offline conversion events

```python
from linkedin_ads.api.conversions import (
    ConversionEventInput,
    ConversionEventValue,
    ConversionUserID,
    post_conversion_event,
)

event_id = post_conversion_event(
    client,
    ConversionEventInput(
        conversion="urn:lla:llaPartnerConversion:1",
        conversion_happened_at=1767225600000,
        user_ids=[ConversionUserID(id_type="SHA256_EMAIL", id_value="0" * 64)],
        conversion_value=ConversionEventValue(currency_code="USD", amount="10.00"),
        event_id="order-1",
    ),
)
```

The token needs LinkedIn's Conversions API product; without it LinkedIn
answers 403.

## Pagination helpers

`linkedin_ads.pagination` provides `paginate_start_count`,
`paginate_start_count_raw` and `paginate_token`, which return the collected
`elements` of every page as plain JSON values. The start/count helpers follow
`paging.links[rel=next]` when the server gives one on the same host.

## Errors and retries

API failures raise exceptions from `linkedin_ads.errors`. When the response
carries LinkedIn's error envelope you get an `APIError` with `status`, `code`,
`message`, `service_error_code` and `retry_after` (seconds, set on 429). Its
message adds a hint to log in again on 401, the missing scope (or a generic
scope hint) on 403, and the advertised `Retry-After` on 429. Responses without
the envelope raise `HTTPStatusError` with `status` and `body`. Transport
failures and undecodable bodies raise `ClientError`, the base of both.

```python
from linkedin_ads.errors import APIError

try:
    get_account(client, "12345")
except APIError as exc:
    print(exc.status, exc)
```

Requests answered with 429, 502, 503 or 504 are retried, up to three attempts
in total, honouring an integer `Retry-After` header and otherwise backing off
exponentially from 200 ms. `put_binary` is not retried.

## Other helpers

`linkedin_ads.text.truncate(s, n)` shortens a string to at most `n`
characters, ending with `…` when it was cut.

## What it does not do

This is a library only. It has no command-line tool, does not obtain, refresh
or store access tokens, and keeps no configuration such as a default account:
you pass the token and account ids to each call.