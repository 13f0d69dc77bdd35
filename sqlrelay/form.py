# sqlrelay/form.py
import logging
import time
from typing import Callable

import requests
from .client import RelayResult, call_relay

logger = logging.getLogger(__name__)

COPIED_RESET_SECONDS = 2.0

EMPTY_INPUT_MESSAGE = "Please enter a query"
SUCCESS_MESSAGE = "Query converted successfully!"
COPIED_MESSAGE = "SQL copied to clipboard!"
GENERIC_ERROR_MESSAGE = "Failed to convert query"
TRANSPORT_ERROR_MESSAGE = "An error occurred"

ERROR_MESSAGES = {
    "rate_limited": "Rate limit exceeded. Please wait a moment.",
    "quota_exhausted": "AI credits depleted. Please add credits.",
}
# used when the relay answered without a structured code
STATUS_CODES = {429: "rate_limited", 402: "quota_exhausted"}

def error_message(status_code: int | None, code: str | None) -> str:
    category = code or STATUS_CODES.get(status_code)
    return ERROR_MESSAGES.get(category, GENERIC_ERROR_MESSAGE)


class ConverterForm:
    """
    State behind the question form: input, output, loading and copied flags,
    plus the toasts waiting to be shown. Nothing survives a page reload.
    """

    def __init__(
        self,
        clipboard: Callable[[str], None],
        relay: Callable[[str], RelayResult] = call_relay,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.relay = relay
        self.clipboard = clipboard
        self.clock = clock
        self.input = ""
        self.output = ""
        self.loading = False
        self.notifications: list[tuple[str, str]] = []
        self._copied_at: float | None = None

    @property
    def copied(self) -> bool:
        return self.copied_remaining() > 0

    def copied_remaining(self) -> float:
        """Seconds until the copied indicator switches back off."""
        if self._copied_at is None:
            return 0.0
        return max(0.0, COPIED_RESET_SECONDS - (self.clock() - self._copied_at))

    def notify(self, level: str, message: str) -> None:
        self.notifications.append((level, message))

    def pop_notifications(self) -> list[tuple[str, str]]:
        pending, self.notifications = self.notifications, []
        return pending

    def use_example(self, text: str) -> None:
        self.input = text

    def submit(self) -> bool:
        """Convert the current input. Returns True when new SQL was received."""
        if not self.input.strip():
            self.notify("error", EMPTY_INPUT_MESSAGE)
            return False

        self.loading = True
        self.output = ""
        try:
            result = self.relay(self.input)
            if not result.ok:
                logger.error("Relay error %s (%s): %s", result.status_code, result.code, result.error)
                self.notify("error", error_message(result.status_code, result.code))
                return False

            self.output = result.sql
            self.notify("success", SUCCESS_MESSAGE)
            return True
        except (requests.exceptions.RequestException, ValueError) as e:
            logger.error("Conversion error: %s", e)
            self.notify("error", TRANSPORT_ERROR_MESSAGE)
            return False
        finally:
            self.loading = False

    def copy(self) -> bool:
        if not self.output:
            return False
        self.clipboard(self.output)
        self._copied_at = self.clock()
        self.notify("success", COPIED_MESSAGE)
        return True
