"""In-memory notification services that record every call."""

import logging
from dataclasses import dataclass
from typing import List, Optional

from smart_building.services.base import EmailService, WebService

logger = logging.getLogger(__name__)


@dataclass
class SentEmail:
    """An email captured by RecordingEmailService."""

    email_address: str
    subject: str
    message: str


class RecordingWebService(WebService):
    """
    Web service that keeps its log in memory.

    Set ``fail_with`` to an exception to make log_fire_alarm raise it,
    simulating an unreachable logging endpoint.
    """

    def __init__(self, fail_with: Optional[Exception] = None) -> None:
        self.fire_alarms: List[str] = []
        self.engineer_requests: List[str] = []
        self.fail_with = fail_with

    def log_fire_alarm(self, alarm_description: str) -> None:
        if self.fail_with is not None:
            raise self.fail_with
        self.fire_alarms.append(alarm_description)
        logger.info(f"Fire alarm logged: {alarm_description}")

    def log_engineer_required(self, log_details: str) -> None:
        self.engineer_requests.append(log_details)
        logger.info(f"Engineer required: {log_details}")


class RecordingEmailService(EmailService):
    """Email service that keeps sent messages in memory."""

    def __init__(self) -> None:
        self.sent: List[SentEmail] = []

    def send_email(self, email_address: str, subject: str, message: str) -> None:
        self.sent.append(SentEmail(email_address, subject, message))
        logger.info(f"Email to {email_address}: {subject}")
