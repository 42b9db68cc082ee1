"""
User repository port (interface).
"""
from abc import ABC, abstractmethod
from typing import Optional

from accounts.domain.user import ConsoleUser


class UserRepository(ABC):
    """Abstract repository for ConsoleUser entities."""

    @abstractmethod
    async def find_by_id(self, user_id: int) -> Optional[ConsoleUser]:
        """
        Find a console user by Django user id.

        Args:
            user_id: User primary key

        Returns:
            ConsoleUser entity or None if the user has no console profile
        """
        pass
