from dataclasses import dataclass
from dtmms.entity.users_entity import UsersEntity


@dataclass
class LoginResultDto:
    success: bool
    user: UsersEntity | None = None
    error: str | None = None
