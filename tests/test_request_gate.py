from __future__ import annotations

from fakes import FakeRequest, FakeResponse, FakeRoute

from RequestGate import SUPPRESSED_HEADER, SUPPRESSED_VALUE, RequestGate

FILES_ROUTE = "route=common/filemanager/files"


def route_listing(gate: RequestGate, payload: str) -> FakeRoute:
    route = FakeRoute(FakeRequest(post_data=payload))
    gate.handle_route(route)
    return route


def test_disarmed_gate_suppresses_listings() -> None:
    gate = RequestGate(FILES_ROUTE)

    route = route_listing(gate, "directory=2024")

    assert route.outcome == "fulfill"
    assert route.fulfilled["status"] == 200
    assert route.fulfilled["headers"] == {SUPPRESSED_HEADER: SUPPRESSED_VALUE}


def test_allowed_payload_is_forwarded_once() -> None:
    gate = RequestGate(FILES_ROUTE)
    gate.allow("directory=2024%2Fspring")

    first = route_listing(gate, "directory=2024%2Fspring")
    second = route_listing(gate, "directory=2024%2Fspring")

    assert first.outcome == "continue"
    assert second.outcome == "fulfill"


def test_other_payloads_are_suppressed_while_armed() -> None:
    gate = RequestGate(FILES_ROUTE)
    gate.allow("directory=2024%2Fspring")

    assert route_listing(gate, "directory=2024").outcome == "fulfill"
    assert route_listing(gate, "directory=2024%2Fspring").outcome == "continue"


def test_duplicates_pass_without_blocking() -> None:
    gate = RequestGate(FILES_ROUTE)
    gate.allow("directory=a", block_duplicates=False)

    assert route_listing(gate, "directory=a").outcome == "continue"
    assert route_listing(gate, "directory=a").outcome == "continue"


def test_permit_and_suppress_repeat() -> None:
    gate = RequestGate(FILES_ROUTE)
    gate.allow("directory=a")
    route_listing(gate, "directory=a")

    gate.permit_repeat()
    assert route_listing(gate, "directory=a").outcome == "continue"

    gate.suppress_repeat()
    assert route_listing(gate, "directory=a").outcome == "continue"
    assert route_listing(gate, "directory=a").outcome == "fulfill"


def test_disallow_forwards_nothing() -> None:
    gate = RequestGate(FILES_ROUTE)
    gate.allow("directory=a")
    gate.disallow()

    assert route_listing(gate, "directory=a").outcome == "fulfill"
    assert gate.allowed_payload is None


def test_every_tracked_request_is_recorded() -> None:
    gate = RequestGate(FILES_ROUTE)
    gate.allow("directory=a")

    route_listing(gate, "directory=b")

    assert gate.last_seen_payload == "directory=b"
    assert route_listing(gate, "directory=a").outcome == "continue"


def test_reset_disarms() -> None:
    gate = RequestGate(FILES_ROUTE)
    gate.allow("directory=a")
    route_listing(gate, "directory=a")

    gate.reset()

    assert (gate.allowed_payload, gate.block_duplicates, gate.last_seen_payload) == (None, False, None)


def test_untracked_requests() -> None:
    gate = RequestGate(FILES_ROUTE)

    page_route = FakeRoute(FakeRequest(url="https://shop.test/admin/index.php?route=catalog/product", method="GET", resource_type="document"))
    image_route = FakeRoute(FakeRequest(url="https://shop.test/image/logo.png", method="GET", resource_type="image"))
    get_listing_route = FakeRoute(FakeRequest(method="GET"))
    for route in (page_route, image_route, get_listing_route):
        gate.handle_route(route)

    assert page_route.outcome == "continue"
    assert image_route.outcome == "abort"
    assert get_listing_route.outcome == "continue"
    assert gate.last_seen_payload is None


def test_assets_pass_when_not_blocked() -> None:
    gate = RequestGate(FILES_ROUTE, block_assets=False)
    route = FakeRoute(FakeRequest(url="https://shop.test/style.css", method="GET", resource_type="stylesheet"))

    gate.handle_route(route)

    assert route.outcome == "continue"


def test_allowed_response_skips_synthetic_answers() -> None:
    gate = RequestGate(FILES_ROUTE)
    gate.allow("directory=a")
    request = FakeRequest(post_data="directory=a")

    assert gate.is_allowed_response(FakeResponse(request))
    assert not gate.is_allowed_response(FakeResponse(request, headers={SUPPRESSED_HEADER: SUPPRESSED_VALUE}))
    assert not gate.is_allowed_response(FakeResponse(FakeRequest(post_data="directory=b")))

    gate.disallow()
    assert not gate.is_allowed_response(FakeResponse(request))
