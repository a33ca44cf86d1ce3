"""validate -> send -> interpret, for the booking and contact forms."""
import abc
import enum
import logging
from typing import Callable, Optional

from raeesa_tours.client.api_client import TRANSPORT_ERROR_MESSAGE, ApiClient, ApiResult
from raeesa_tours.client.form_state import BookingFormState, ContactFormState, FormState

logger = logging.getLogger(__name__)

CORRECT_ERRORS_MESSAGE = "Please correct the errors in the form"
ACCEPT_TERMS_MESSAGE = "Please accept the terms and conditions"


class SubmitState(str, enum.Enum):
    IDLE = "idle"
    VALIDATING = "validating"
    SUBMITTING = "submitting"


class SubmitOutcome(str, enum.Enum):
    IGNORED = "ignored"
    INVALID = "invalid"
    SUCCESS = "success"
    FAILURE = "failure"


class SubmissionPipeline(abc.ABC):
    """Shared submit flow; subclasses say where the payload goes."""

    success_default = ""
    failure_default = ""
    requires_terms = False

    def __init__(self, form: FormState, client: ApiClient,
                 scroll_to_top: Optional[Callable[[], None]] = None):
        self.form = form
        self.client = client
        self.state = SubmitState.IDLE
        self._scroll_to_top = scroll_to_top

    @property
    def can_submit(self) -> bool:
        """False while a submission is in flight (the trigger is disabled)."""
        return self.state != SubmitState.SUBMITTING

    @abc.abstractmethod
    def send(self, payload: dict) -> ApiResult:
        ...

    def _terms_accepted(self) -> bool:
        return True

    def submit(self) -> SubmitOutcome:
        if not self.can_submit:
            return SubmitOutcome.IGNORED

        self.form.clear_messages()
        self.state = SubmitState.VALIDATING

        if not self.form.validate():
            self.form.set_error(CORRECT_ERRORS_MESSAGE)
            self.state = SubmitState.IDLE
            return SubmitOutcome.INVALID

        if self.requires_terms and not self._terms_accepted():
            self.form.set_error(ACCEPT_TERMS_MESSAGE)
            self.state = SubmitState.IDLE
            return SubmitOutcome.INVALID

        self.state = SubmitState.SUBMITTING
        try:
            res = self.send(self.form.payload())
        finally:
            self.state = SubmitState.IDLE

        if res.ok:
            self.form.reset()
            self.form.set_success(res.message or self.success_default)
            outcome = SubmitOutcome.SUCCESS
        else:
            if res.transport_error:
                msg = TRANSPORT_ERROR_MESSAGE
            else:
                msg = res.message or self.failure_default
            logger.info("submission rejected (status=%s): %s", res.status_code, msg)
            self.form.set_error(msg)
            outcome = SubmitOutcome.FAILURE

        if self._scroll_to_top:
            self._scroll_to_top()
        return outcome


class BookingSubmission(SubmissionPipeline):
    success_default = "Thank you for your booking! We will contact you shortly."
    failure_default = "Registration failed"
    requires_terms = True

    form: BookingFormState

    def _terms_accepted(self) -> bool:
        return bool(self.form.draft.termsAccepted)

    def send(self, payload: dict) -> ApiResult:
        return self.client.create_registration(payload)


class ContactSubmission(SubmissionPipeline):
    success_default = "Message sent successfully!"
    failure_default = "Failed to send message. Please try again."

    form: ContactFormState

    def send(self, payload: dict) -> ApiResult:
        return self.client.create_contact(payload)
