# apps/core/domain/entities.py
from dataclasses import dataclass
from typing import Optional


@dataclass
class UserEntity:
    id: Optional[int]  # None przed zapisem
    username: str
    name: str = ""
    bio: str = ""
    avatar_url: str = ""

    def to_dict(self) -> dict:
        return {'id': self.id, 'name': self.name, 'username': self.username}


@dataclass
class GoogleProfile:
    email: str = ""
    name: str = ""
    avatar_url: str = ""
