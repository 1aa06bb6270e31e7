from abc import ABC, abstractmethod


class IMailer(ABC):
    """Outgoing mail - application layer"""

    @abstractmethod
    async def send_email(self, to: str, subject: str, html: str) -> None:
        """
        Deliver an HTML email.

        Raises:
            Exception: backend specific delivery failure
        """
        pass

    async def close(self) -> None:
        pass
