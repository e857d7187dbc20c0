"""
Review cycle state machine.

One ReviewSession backs one UI instance. A submit moves through
``IDLE -> SUBMITTING -> SUCCEEDED | FAILED -> IDLE``; the loading flag set on
submit is cleared on every exit path, including exceptions nobody expected.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Protocol

from client.clipboard import Clipboard
from client.errors import ExtractionEmpty, NothingToCopy, ReviewClientError
from client.fences import extract_code_blocks, join_code_blocks
from client.gateway import ReviewResult


class ReviewState(str, Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class Level(str, Enum):
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


@dataclass
class Notification:
    level: Level
    message: str


class ReviewService(Protocol):
    async def review(self, code: str) -> ReviewResult:
        ...


Notifier = Callable[[Notification], None]
StateListener = Callable[[ReviewState], None]

EMPTY_INPUT_MESSAGE = "Please write some code to review."
SUCCESS_MESSAGE = "Code reviewed successfully!"
FAILURE_MESSAGE = "Failed to review code"
NOTHING_TO_COPY_MESSAGE = "Nothing to copy"
NO_CODE_MESSAGE = "No code found in review!"


class ReviewSession:
    """Holds the code being edited, the last review and the loading flag."""

    def __init__(
        self,
        service: ReviewService,
        clipboard: Clipboard,
        notify: Optional[Notifier] = None,
        on_state_change: Optional[StateListener] = None,
    ):
        self._service = service
        self._clipboard = clipboard
        self._notify_cb = notify
        self._on_state_change = on_state_change

        self.code = ""
        self.review: Optional[str] = None
        self.loading = False
        self.state = ReviewState.IDLE
        self.notifications: List[Notification] = []

    @property
    def can_submit(self) -> bool:
        return not self.loading and bool(self.code.strip())

    @property
    def submit_label(self) -> str:
        return "Reviewing..." if self.loading else "Review Code"

    def _notify(self, level: Level, message: str) -> None:
        notification = Notification(level, message)
        self.notifications.append(notification)
        if self._notify_cb:
            self._notify_cb(notification)

    def _transition(self, state: ReviewState) -> None:
        self.state = state
        if self._on_state_change:
            self._on_state_change(state)

    async def submit(self) -> bool:
        """
        Send the current code for review.

        Returns True when a new review was stored. Empty input and a submit
        while another one is in flight are no-ops.
        """
        if self.loading:
            return False

        if not self.code.strip():
            self._notify(Level.WARNING, EMPTY_INPUT_MESSAGE)
            return False

        self.loading = True
        self._transition(ReviewState.SUBMITTING)
        try:
            result = await self._service.review(self.code)
            self.review = result.text
            self.code = ""
            self._transition(ReviewState.SUCCEEDED)
            self._notify(Level.SUCCESS, result.message or SUCCESS_MESSAGE)
            return True
        except ReviewClientError as e:
            logging.error(f"Review failed: {e.message}")
            self._transition(ReviewState.FAILED)
            self._notify(Level.ERROR, FAILURE_MESSAGE)
            return False
        except Exception:
            logging.exception("Unexpected error during review")
            self._transition(ReviewState.FAILED)
            self._notify(Level.ERROR, FAILURE_MESSAGE)
            return False
        finally:
            self.loading = False
            self._transition(ReviewState.IDLE)

    def review_text(self) -> str:
        if not self.review:
            raise NothingToCopy(NOTHING_TO_COPY_MESSAGE)
        return self.review

    def code_text(self) -> str:
        """All fenced blocks of the review, trimmed and blank-line separated."""
        blocks = extract_code_blocks(self.review_text())
        if not blocks:
            raise ExtractionEmpty(NO_CODE_MESSAGE)
        return join_code_blocks(blocks)

    def _copy(self, produce: Callable[[], str], success_message: str) -> bool:
        try:
            self._clipboard.copy(produce())
        except ReviewClientError as e:
            self._notify(Level.ERROR, e.message)
            return False
        self._notify(Level.SUCCESS, success_message)
        return True

    def copy_all(self) -> bool:
        return self._copy(self.review_text, "Full review copied!")

    def copy_code(self) -> bool:
        return self._copy(self.code_text, "Code snippets copied!")
