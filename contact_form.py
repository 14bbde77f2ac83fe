import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

import httpx

logger = logging.getLogger(__name__)

CONTACT_PATH = "/api/contact"
SENDING_TEXT = "Sending..."


class Outcome(Enum):
    SUCCESS = "success"
    FAILURE = "failure"


@dataclass(frozen=True)
class Idle:
    text: str = ""


@dataclass(frozen=True)
class Sending:
    text: str = SENDING_TEXT


@dataclass(frozen=True)
class Done:
    server_message: str
    outcome: Outcome

    @property
    def text(self) -> str:
        return self.server_message

    @property
    def succeeded(self) -> bool:
        return self.outcome is Outcome.SUCCESS


SubmissionStatus = Union[Idle, Sending, Done]


class ContactForm:
    """Client-side state of the contact form: two fields and a status.

    Each call to `submit` posts the current fields once to the relay and
    replaces the status with the relay's own `message` text. Overlapping
    submits are not coordinated unless `single_flight` is set, in which case
    a submit issued while another is pending is ignored.

    `clear_on_failure` keeps the historical behaviour of wiping both fields
    whatever the outcome; set it to False to keep the typed text after a
    failed send.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        client: Optional[httpx.AsyncClient] = None,
        clear_on_failure: bool = True,
        single_flight: bool = False,
    ):
        if client is None:
            if not base_url:
                raise ValueError("ContactForm needs a base_url or an httpx.AsyncClient")
            client = httpx.AsyncClient(base_url=base_url, timeout=None)
        self.client = client
        self.clear_on_failure = clear_on_failure
        self.single_flight = single_flight

        self.email = ""
        self.message = ""
        self.status: SubmissionStatus = Idle()
        self._in_flight = 0

    @property
    def is_sending(self) -> bool:
        return self._in_flight > 0

    @property
    def can_submit(self) -> bool:
        return not (self.single_flight and self.is_sending)

    def set_email(self, value: str) -> None:
        self.email = value

    def set_message(self, value: str) -> None:
        self.message = value

    async def submit(self) -> Optional[Done]:
        """Send the form. Returns the final status, or None if suppressed."""
        if not self.can_submit:
            logger.info("Submit ignored, a message is already being sent")
            return None

        payload = {"email": self.email, "message": self.message}
        self.status = Sending()
        self._in_flight += 1
        try:
            response = await self.client.post(CONTACT_PATH, json=payload)
            result = response.json()
        finally:
            self._in_flight -= 1

        outcome = Outcome.SUCCESS if response.is_success else Outcome.FAILURE
        # Only a JSON object carries a status text
        server_message = result.get("message", "") if isinstance(result, dict) else ""
        self.status = Done(server_message=server_message, outcome=outcome)

        if outcome is Outcome.SUCCESS or self.clear_on_failure:
            self.email = ""
            self.message = ""
        return self.status

    async def aclose(self) -> None:
        await self.client.aclose()

    async def __aenter__(self) -> "ContactForm":
        return self

    async def __aexit__(self, *exc) -> None:
        await self.aclose()
