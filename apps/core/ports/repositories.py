# apps/core/ports/repositories.py
from abc import ABC, abstractmethod
from typing import Optional
from apps.core.domain.entities import UserEntity


class UsernameAlreadyExists(ValueError):
    pass


class IUserRepository(ABC):
    @abstractmethod
    def get_by_username(self, username: str) -> Optional[UserEntity]:
        pass

    @abstractmethod
    def username_exists(self, username: str) -> bool:
        pass

    @abstractmethod
    def create(self, user: UserEntity) -> UserEntity:
        """Tworzy usera (razem z profilem) i zwraca encję z ID.
        Zajęta nazwa -> UsernameAlreadyExists."""
        pass
