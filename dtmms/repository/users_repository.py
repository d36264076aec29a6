from dtmms.common.constants import StorageCollection
from dtmms.common.user_role import UserRole
from dtmms.dto.user_dto import UserCreateDto, UserPatchDto
from dtmms.entity.users_entity import UsersEntity
from dtmms.repository.base_collection_repository import BaseCollectionRepository


class UsersRepository(BaseCollectionRepository):
    """
    Repository for user accounts.

    Email uniqueness is not enforced here; callers creating or renaming users
    must check `get_by_email` first.
    """

    collection = StorageCollection.USERS
    entity_class = UsersEntity
    patch_class = UserPatchDto

    def get_by_email(self, email: str) -> UsersEntity | None:
        """
        Retrieve a user by email, ignoring case.

        Args:
            email (str): The email address to look up.

        Returns:
            UsersEntity | None: The first user with a matching email, or None.
        """
        lowered = email.lower()
        return next(
            (user for user in self.get_all() if user.email.lower() == lowered), None
        )

    def get_by_role(self, role: UserRole) -> list[UsersEntity]:
        return self._find_all(lambda user: user.role == role)

    def create(self, user: UserCreateDto) -> UsersEntity:
        """
        Create a user whose id is prefixed with its role.

        Args:
            user (UserCreateDto): The new user's attributes.

        Returns:
            UsersEntity: The created user, with id and createdAt assigned.
        """
        return self._insert(
            {
                **user.model_dump(exclude_none=True),
                "id": self._new_id(user.role.value),
                "created_at": self._now(),
            }
        )

    def update(self, user_id: str, patch: UserPatchDto) -> UsersEntity | None:
        return self._update(user_id, patch)

    def delete(self, user_id: str) -> bool:
        """Delete a user. Records referencing the user are left untouched."""
        return self._delete_by_id(user_id)
