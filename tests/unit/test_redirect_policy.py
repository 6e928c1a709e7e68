# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

from httpping.http.models import HttpRequest, HttpResponse
from httpping.http.redirects import DEFAULT_MAX_REDIRECTS, RedirectState, is_redirect


def _redirect(location: str, status: int = 302, url: str = "https://a.test/start") -> HttpResponse:
    return HttpResponse(ok=True, status_code=status, headers={"location": location}, url=url)


def test_is_redirect_requires_status_and_location():
    assert is_redirect(_redirect("/next"))
    assert not is_redirect(HttpResponse(ok=True, status_code=302, headers={}))
    assert not is_redirect(HttpResponse(ok=True, status_code=200, headers={"location": "/x"}))
    assert not is_redirect(HttpResponse(ok=False, status_code=None))


def test_next_request_forces_original_method_even_for_303():
    state = RedirectState("HEAD")
    request = HttpRequest(url="https://a.test/start", method="HEAD", max_body_bytes=0)
    nxt = state.next_request(_redirect("/other", status=303), request)
    assert nxt is not None
    assert nxt.method == "HEAD"
    assert nxt.url == "https://a.test/other"
    assert state.count == 1
    assert request.url == "https://a.test/start"


def test_next_request_refuses_once_limit_is_reached():
    state = RedirectState("GET", max_redirects=2)
    request = HttpRequest(url="https://a.test/start", method="GET")
    assert state.next_request(_redirect("/1"), request) is not None
    assert state.next_request(_redirect("/2"), request) is not None
    assert state.exhausted
    assert state.next_request(_redirect("/3"), request) is None
    assert state.count == 2


def test_default_limit_and_fresh_state_per_attempt():
    first = RedirectState("HEAD")
    second = RedirectState("HEAD")
    first.next_request(_redirect("/x"), HttpRequest(url="https://a.test/"))
    assert first.max_redirects == DEFAULT_MAX_REDIRECTS == 10
    assert second.count == 0
