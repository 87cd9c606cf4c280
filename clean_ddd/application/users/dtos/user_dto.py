"""User DTOs."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from clean_ddd.domain.users import User


@dataclass(frozen=True)
class UserDTO:
    id: str
    name: str
    email: str
    created_at: datetime
    updated_at: Optional[datetime]
    version: int

    @classmethod
    def from_entity(cls, user: User) -> "UserDTO":
        return cls(
            id=str(user.id),
            name=user.name,
            email=str(user.email),
            created_at=user.created_at,
            updated_at=user.updated_at,
            version=user.version,
        )
