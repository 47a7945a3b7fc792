"""Submission state machine for the signup form.

One controller drives one form. A submit attempt validates the current
values, awaits a single persistence call and maps its outcome to a toast
notification plus the text of the form's live status region.

The guard flag is set before the first ``await`` and cleared only in the
completion path, so concurrent submit triggers on the same event loop
produce exactly one persistence call.
"""
import enum
import logging
from typing import Optional, Protocol

from .forms import validate_signup
from .state import FieldStateStore

logger = logging.getLogger(__name__)

SUCCESS_NOTIFICATION = 'You have successfully signed up for our newsletter!'
FAILURE_NOTIFICATION = 'Failed to submit form'
SUCCESS_STATUS = 'Success! You have successfully signed up for our newsletter.'
FAILURE_STATUS = 'Error: Failed to submit form. Please try again.'

SUBMIT_LABEL = 'Submit'
SUBMITTING_LABEL = 'Submitting...'
SUBMIT_ARIA_LABEL = 'Submit newsletter signup form'
SUBMITTING_ARIA_LABEL = 'Submitting form, please wait'


class SubmissionState(enum.Enum):
    IDLE = 'idle'
    SUBMITTING = 'submitting'
    SUCCEEDED = 'succeeded'
    FAILED = 'failed'


class PersistenceGateway(Protocol):
    async def submit_signup(self, name: str, email: str, phone: str, message: str): ...


class NotificationSink(Protocol):
    def notify_success(self, message: str) -> None: ...

    def notify_failure(self, message: str) -> None: ...


class SubmissionController:
    """Drives validate → submit → notify for a :class:`FieldStateStore`."""

    def __init__(self, store: FieldStateStore, gateway: PersistenceGateway,
                 notifier: NotificationSink):
        self.store = store
        self.gateway = gateway
        self.notifier = notifier

        self.state = SubmissionState.IDLE
        # Outcome of the last finished attempt, kept after relaxing to IDLE
        self.outcome: Optional[SubmissionState] = None
        self.failure_reason: Optional[str] = None
        self.errors = {}
        self.status_text = ''

        self._submitting = False
        self._attempt = 0
        self._submit_attempted = False
        self._closed = False

    @property
    def is_disabled(self) -> bool:
        return self._submitting

    @property
    def submit_label(self) -> str:
        return SUBMITTING_LABEL if self._submitting else SUBMIT_LABEL

    @property
    def submit_aria_label(self) -> str:
        return SUBMITTING_ARIA_LABEL if self._submitting else SUBMIT_ARIA_LABEL

    @property
    def character_count(self) -> str:
        return self.store.character_count

    @property
    def values(self) -> dict:
        return self.store.snapshot().as_dict()

    def set_field(self, name: str, value: str) -> None:
        """Update a field; after a submit attempt its error follows the edit."""
        self.store.set_field(name, value)
        if not self._submit_attempted:
            return

        errors = dict(self.errors)
        error = validate_signup(self.store.snapshot()).get(name)
        if error:
            errors[name] = error
        else:
            errors.pop(name, None)
        self.errors = errors

    def touch(self, name: str) -> None:
        self.store.touch(name)

    async def submit(self) -> SubmissionState:
        """Run one submit attempt and return the resulting state."""
        if self._closed:
            return self.state
        if self._submitting:
            logger.debug('Submit ignored, a signup is already in flight')
            return self.state

        self._submit_attempted = True
        snapshot = self.store.snapshot()
        errors = validate_signup(snapshot)
        if errors:
            self.errors = errors
            return self.state

        self._submitting = True
        self._attempt += 1
        attempt = self._attempt
        self.state = SubmissionState.SUBMITTING
        self.errors = {}
        self.status_text = ''
        self.outcome = None
        self.failure_reason = None

        try:
            await self.gateway.submit_signup(
                snapshot.name, snapshot.email, snapshot.phone, snapshot.message
            )
        except Exception as e:
            logger.exception('Signup submission failed')
            self._complete(attempt, SubmissionState.FAILED, str(e) or type(e).__name__)
        else:
            self._complete(attempt, SubmissionState.SUCCEEDED)
        return self.state

    def _complete(self, attempt: int, outcome: SubmissionState,
                  reason: Optional[str] = None) -> None:
        if self._closed:
            logger.info('Dropping signup result that arrived after teardown')
            return

        try:
            if attempt != self._attempt:
                logger.info('Dropping result of an abandoned signup attempt')
                return

            self.state = outcome
            self.outcome = outcome
            if outcome is SubmissionState.SUCCEEDED:
                self.notifier.notify_success(SUCCESS_NOTIFICATION)
                self.status_text = SUCCESS_STATUS
                self.store.reset()
                self._submit_attempted = False
            else:
                self.failure_reason = reason
                self.notifier.notify_failure(FAILURE_NOTIFICATION)
                self.status_text = FAILURE_STATUS
        finally:
            self._submitting = False
            self.state = SubmissionState.IDLE

    def reset(self) -> None:
        """Clear values, errors and status text.

        An attempt still in flight is abandoned: its result is dropped when
        it arrives, but the guard stays set until then.
        """
        if self._submitting:
            self._attempt += 1
        self.store.reset()
        self.errors = {}
        self.status_text = ''
        self.outcome = None
        self.failure_reason = None
        self._submit_attempted = False

    def close(self) -> None:
        """Tear down; later completions and submits change nothing."""
        self._closed = True
