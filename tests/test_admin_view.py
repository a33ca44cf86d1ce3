import pytest

from raeesa_tours.client.admin_view import AdminDashboard, AdminTab
from raeesa_tours.client.api_client import ApiResult

BASE = "http://api.test"


def page_body(ids, page=1, pages=1, total=None):
    return {
        "success": True,
        "data": [{"_id": i} for i in ids],
        "pagination": {"total": len(ids) if total is None else total, "page": page, "pages": pages},
    }


@pytest.fixture
def dash(stub_session):
    return AdminDashboard(token="tok-123", base_url=BASE, session=stub_session)


def test_fetch_sends_credential_and_filters(dash, stub_session):
    stub_session.reply("GET", "/api/registrations", 200, page_body(["a", "b"], pages=3, total=22))
    dash.destination = "gulm"
    dash.start_date = "01/06/2026"
    dash.fetch()

    call = stub_session.calls[0]
    assert call["headers"]["Authorization"] == "Bearer tok-123"
    assert call["params"] == {"page": 1, "destination": "gulm", "startDate": "01/06/2026"}
    assert [i["_id"] for i in dash.items] == ["a", "b"]
    assert dash.total_pages == 3
    assert dash.total == 22
    assert dash.error is None
    assert dash.loading is False


def test_fetch_failure_keeps_last_good_items(dash, stub_session, connection_error):
    stub_session.reply("GET", "/api/registrations", 200, page_body(["a"]))
    dash.fetch()
    stub_session.replies.clear()
    stub_session.reply("GET", "/api/registrations", exc=connection_error)
    dash.fetch()
    assert [i["_id"] for i in dash.items] == ["a"]
    assert dash.error == "Failed to fetch registrations"


def test_server_error_message_surfaces(dash, stub_session):
    stub_session.reply("GET", "/api/registrations", 401, {"success": False, "message": "Invalid token"})
    dash.fetch()
    assert dash.error == "Invalid token"


def test_stale_response_is_dropped(dash):
    older = dash.begin_fetch()
    newer = dash.begin_fetch()
    assert dash.apply_result(newer, ApiResult(ok=True, status_code=200, body=page_body(["fresh"])))
    assert not dash.apply_result(older, ApiResult(ok=True, status_code=200, body=page_body(["stale"])))
    assert [i["_id"] for i in dash.items] == ["fresh"]


def test_delete_requires_confirmation(dash, stub_session):
    assert dash.confirm_delete() is False
    dash.request_delete("a")
    dash.cancel_delete()
    assert dash.confirm_delete() is False
    assert stub_session.calls == []


def test_deleting_sole_item_on_later_page_steps_back(dash, stub_session):
    stub_session.reply("GET", "/api/registrations", 200, page_body(["k"], page=3, pages=3, total=21))
    dash.set_page(3)
    assert dash.current_page == 3

    stub_session.reply("DELETE", "/api/registrations/k", 200, {"success": True})
    stub_session.replies[("GET", "/api/registrations")] = [(200, page_body(["i", "j"], page=2, pages=2, total=20), None, None)]
    dash.request_delete("k")
    assert dash.confirm_delete() is True

    assert dash.current_page == 2
    assert stub_session.calls[-1]["method"] == "GET"
    assert stub_session.calls[-1]["params"]["page"] == 2
    assert [i["_id"] for i in dash.items] == ["i", "j"]


def test_deleting_with_items_left_refetches_same_page(dash, stub_session):
    stub_session.reply("GET", "/api/registrations", 200, page_body(["a", "b"], page=2, pages=2, total=12))
    dash.set_page(2)
    stub_session.reply("DELETE", "/api/registrations/a", 200, {"success": True})
    dash.request_delete("a")
    dash.confirm_delete()
    assert dash.current_page == 2
    last = stub_session.calls[-1]
    assert (last["method"], last["params"]["page"]) == ("GET", 2)


def test_deleting_sole_item_on_first_page_stays(dash, stub_session):
    stub_session.reply("GET", "/api/registrations", 200, page_body(["a"]))
    dash.fetch()
    stub_session.reply("DELETE", "/api/registrations/a", 200, {"success": True})
    stub_session.replies[("GET", "/api/registrations")] = [(200, page_body([], pages=0), None, None)]
    dash.request_delete("a")
    dash.confirm_delete()
    assert dash.current_page == 1
    assert dash.items == []
    assert dash.total_pages == 1


def test_failed_delete_leaves_list(dash, stub_session):
    stub_session.reply("GET", "/api/registrations", 200, page_body(["a", "b"]))
    dash.fetch()
    stub_session.reply("DELETE", "/api/registrations/a", 404, {"success": False, "message": "Registration not found"})
    dash.request_delete("a")
    assert dash.confirm_delete() is False
    assert [i["_id"] for i in dash.items] == ["a", "b"]
    assert dash.error == "Registration not found"
    assert dash.pending_delete is None


def test_tabs_are_exclusive(dash, stub_session):
    stub_session.reply("GET", "/api/registrations", 200, page_body(["r1"]))
    dash.fetch()
    stub_session.reply("GET", "/api/contact", 200, page_body(["c1", "c2"]))
    dash.switch_tab(AdminTab.CONTACTS)
    assert dash.active_tab == AdminTab.CONTACTS
    assert [i["_id"] for i in dash.items] == ["c1", "c2"]
    assert [c["path"] for c in stub_session.calls] == ["/api/registrations", "/api/contact"]

    dash.switch_tab("contacts")
    assert len(stub_session.calls) == 2


def test_filter_change_goes_back_to_first_page(dash, stub_session):
    stub_session.reply("GET", "/api/registrations", 200, page_body(["a"], page=2, pages=2))
    dash.set_page(2)
    dash.set_destination_filter("  Dal ")
    assert dash.current_page == 1
    assert stub_session.calls[-1]["params"] == {"page": 1, "destination": "Dal"}


def test_contact_status_update(dash, stub_session):
    stub_session.reply("GET", "/api/contact", 200, page_body(["c1"]))
    dash.switch_tab(AdminTab.CONTACTS)
    stub_session.reply("PATCH", "/api/contact/c1", 200, {"success": True, "data": {}})
    assert dash.update_contact_status("c1", "replied", "Called back")
    patch = [c for c in stub_session.calls if c["method"] == "PATCH"][0]
    assert patch["json"] == {"status": "replied", "adminNotes": "Called back"}
    assert stub_session.calls[-1]["method"] == "GET"


def test_contact_status_update_only_on_contacts_tab(dash):
    with pytest.raises(RuntimeError):
        dash.update_contact_status("c1", "read")


def test_out_of_range_page_falls_back_to_last_page(dash, stub_session):
    stub_session.reply("GET", "/api/registrations", 200, page_body([], page=9, pages=1, total=3))
    stub_session.reply("GET", "/api/registrations", 200, page_body(["a", "b", "c"], page=1, pages=1))
    dash.set_page(9)
    assert dash.current_page == 1
    assert [i["_id"] for i in dash.items] == ["a", "b", "c"]
    assert [c["params"]["page"] for c in stub_session.calls] == [9, 1]


def test_set_page_is_clamped_once_pages_are_known(dash, stub_session):
    stub_session.reply("GET", "/api/registrations", 200, page_body(["a"], pages=2, total=11))
    dash.fetch()
    dash.set_page(7)
    assert dash.current_page == 2
    assert stub_session.calls[-1]["params"]["page"] == 2


def test_page_emptied_elsewhere_steps_back(dash, stub_session):
    stub_session.reply("GET", "/api/registrations", 200, page_body(["k"], page=3, pages=3, total=21))
    dash.set_page(3)
    stub_session.replies[("GET", "/api/registrations")] = [
        (200, page_body([], page=3, pages=2, total=20), None, None),
        (200, page_body(["i", "j"], page=2, pages=2, total=20), None, None),
    ]
    dash.fetch()
    assert dash.current_page == 2
    assert [i["_id"] for i in dash.items] == ["i", "j"]
