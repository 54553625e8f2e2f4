# apps/core/application/use_cases.py
import logging
from dataclasses import dataclass
from apps.core.domain.entities import UserEntity
from apps.core.ports.repositories import IUserRepository, UsernameAlreadyExists

logger = logging.getLogger(__name__)


@dataclass
class RegisterUserInput:
    username: str
    name: str


class RegisterUserUseCase:
    def __init__(self, repository: IUserRepository):
        self.repository = repository

    def execute(self, input_dto: RegisterUserInput) -> UserEntity:
        if not input_dto.username:
            raise ValueError("Username cannot be empty")

        username = input_dto.username.lower()
        if self.repository.username_exists(username):
            raise UsernameAlreadyExists("Username already exists")

        user = self.repository.create(UserEntity(id=None, username=username, name=input_dto.name))
        logger.info("Registered user %s (id=%s)", user.username, user.id)
        return user
