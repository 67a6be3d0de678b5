"""
Base classes for notification services.

Both services are fire-and-forget from the controller's point of view.
"""

from abc import ABC, abstractmethod


class WebService(ABC):
    """Web logging service that records building incidents."""

    @abstractmethod
    def log_fire_alarm(self, alarm_description: str) -> None:
        """
        Log a fire alarm event.

        Args:
            alarm_description: Name of the mode that raised the alarm

        Raises:
            Exception: Implementations may raise if the log cannot be written
        """
        pass

    @abstractmethod
    def log_engineer_required(self, log_details: str) -> None:
        """
        Report that one or more managers need an engineer.

        Args:
            log_details: Faulty manager name, or comma-joined names with a
                trailing comma when there are several
        """
        pass


class EmailService(ABC):
    """Email service used to reach the building operator."""

    @abstractmethod
    def send_email(self, email_address: str, subject: str, message: str) -> None:
        pass
