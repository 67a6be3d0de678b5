"""Notification services used by the building controller."""

from smart_building.services.base import WebService, EmailService
from smart_building.services.memory import (
    RecordingWebService,
    RecordingEmailService,
    SentEmail,
)

__all__ = [
    "WebService",
    "EmailService",
    "RecordingWebService",
    "RecordingEmailService",
    "SentEmail",
]
