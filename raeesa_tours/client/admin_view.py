import enum
import logging
from typing import Any, Optional

from raeesa_tours.client.api_client import ApiClient, ApiResult

logger = logging.getLogger(__name__)


class AdminTab(str, enum.Enum):
    REGISTRATIONS = "registrations"
    CONTACTS = "contacts"


FETCH_ERRORS = {
    AdminTab.REGISTRATIONS: "Failed to fetch registrations",
    AdminTab.CONTACTS: "Failed to fetch contact messages",
}
DELETE_ERRORS = {
    AdminTab.REGISTRATIONS: "Failed to delete registration",
    AdminTab.CONTACTS: "Failed to delete contact message",
}


class AdminDashboard:
    """Paginated, filterable admin listing of registrations or contact messages.

    Only the active tab's dataset is held. Each fetch takes a generation
    number; a response whose generation is no longer the latest is dropped, so
    a slow stale page can never overwrite a newer one.
    """

    def __init__(self, token: str, base_url: str | None = None, timeout: float | None = None,
                 session: Any = None, tab: AdminTab = AdminTab.REGISTRATIONS):
        self.client = ApiClient(base_url=base_url, token=token, timeout=timeout, session=session)
        self.active_tab = tab

        self.items: list[dict] = []
        self.current_page = 1
        self.total_pages = 1
        self.total = 0
        self.loading = False
        self.pages_known = False
        self.error: Optional[str] = None

        self.destination = ""
        self.start_date = ""
        self.end_date = ""
        self.status_filter = ""

        self.pending_delete: Optional[str] = None
        self._generation = 0

    # fetching

    def begin_fetch(self) -> int:
        self._generation += 1
        self.loading = True
        return self._generation

    def _call_list(self) -> ApiResult:
        if self.active_tab == AdminTab.REGISTRATIONS:
            return self.client.list_registrations(
                page=self.current_page,
                destination=self.destination or None,
                start_date=self.start_date or None,
                end_date=self.end_date or None,
            )
        return self.client.list_contacts(page=self.current_page, status=self.status_filter or None)

    def apply_result(self, generation: int, res: ApiResult) -> bool:
        """Apply a list response. Returns False when it was stale and dropped."""
        if generation != self._generation:
            logger.debug("dropping stale list response (gen %s, latest %s)", generation, self._generation)
            return False
        self.loading = False
        if not res.ok:
            # keep last known good items on screen
            self.error = res.message or FETCH_ERRORS[self.active_tab]
            return True
        self.items = list(res.data or [])
        pagination = res.body.get("pagination") or {}
        self.total = int(pagination.get("total", len(self.items)))
        self.total_pages = max(int(pagination.get("pages", 1) or 1), 1)
        self.pages_known = True
        self.error = None

        # rows vanished under us (another admin deleted, or a stale page number)
        if not self.items and self.current_page > self.total_pages:
            self.current_page = self.total_pages
            self.fetch()
        return True

    def fetch(self) -> bool:
        gen = self.begin_fetch()
        return self.apply_result(gen, self._call_list())

    # navigation and filters

    def switch_tab(self, tab: AdminTab) -> None:
        tab = AdminTab(tab)
        if tab == self.active_tab:
            return
        self.active_tab = tab
        self.items = []
        self.current_page = 1
        self.total_pages = 1
        self.total = 0
        self.error = None
        self.pending_delete = None
        self.pages_known = False
        self.fetch()

    def set_page(self, page: int) -> None:
        if self.pages_known:
            page = min(page, self.total_pages)
        self.current_page = max(1, page)
        self.fetch()

    def set_destination_filter(self, destination: str) -> None:
        self.destination = destination.strip()
        self.current_page = 1
        self.fetch()

    def set_date_range(self, start_date: str = "", end_date: str = "") -> None:
        self.start_date = start_date.strip()
        self.end_date = end_date.strip()
        self.current_page = 1
        self.fetch()

    def set_status_filter(self, status: str = "") -> None:
        self.status_filter = status
        self.current_page = 1
        self.fetch()

    # deletion (two steps: request, then confirm)

    def request_delete(self, item_id: str) -> None:
        self.pending_delete = item_id

    def cancel_delete(self) -> None:
        self.pending_delete = None

    def confirm_delete(self) -> bool:
        item_id = self.pending_delete
        if item_id is None:
            return False
        self.pending_delete = None

        if self.active_tab == AdminTab.REGISTRATIONS:
            res = self.client.delete_registration(item_id)
        else:
            res = self.client.delete_contact(item_id)

        if not res.ok:
            self.error = res.message or DELETE_ERRORS[self.active_tab]
            return False

        was_sole_item = len(self.items) == 1
        self.items = [i for i in self.items if i.get("_id") != item_id]
        self.total = max(self.total - 1, 0)

        if was_sole_item and self.current_page > 1:
            self.current_page -= 1
        self.fetch()
        return True

    # contact messages

    def update_contact_status(self, contact_id: str, status: str, admin_notes: str = "") -> bool:
        if self.active_tab != AdminTab.CONTACTS:
            raise RuntimeError("contact status can only be changed from the contacts tab")
        res = self.client.update_contact(contact_id, status=status, admin_notes=admin_notes)
        if not res.ok:
            self.error = res.message or "Failed to update message status"
            return False
        self.fetch()
        return True
