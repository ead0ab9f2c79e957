from abc import ABC, abstractmethod


class INotifier(ABC):
    """Outbound notification interface - application layer"""

    @abstractmethod
    async def send_password_reset(self, email: str, reset_url: str) -> None:
        """Deliver a password reset link to the account's email address"""
        pass
