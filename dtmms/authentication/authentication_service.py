from dtmms.common.constants import INVALID_CREDENTIALS_MESSAGE
from dtmms.dto.login_result_dto import LoginResultDto
from dtmms.entity.users_entity import UsersEntity


class AuthenticationService:
    """
    Session accessor: tracks the signed-in user and checks credentials.

    The store keeps only the signed-in user's id; the user record itself is
    always re-read from the users repository.
    """

    def __init__(self, logger, entity_store, users_repository):
        """
        Args:
            logger: The logger instance for logging messages.
            entity_store (EntityStore): Holds the current-user slot.
            users_repository (UsersRepository): Source of user records.
        """
        self.logger = logger
        self.entity_store = entity_store
        self.users_repository = users_repository

    def get_current_user(self) -> UsersEntity | None:
        """
        Return the signed-in user, if any.

        Returns:
            UsersEntity | None: The user the session points to, or None if
                nobody is signed in or the user no longer exists.
        """
        user_id = self.entity_store.get_current_user_id()
        if user_id is None:
            return None

        user = self.users_repository.get_by_id(user_id)
        if user is None:
            self.logger.warning(f"Current user {user_id} no longer exists.")
        return user

    def set_current_user(self, user: UsersEntity | None) -> None:
        """Point the session at a user, or clear it when user is None."""
        self.entity_store.set_current_user_id(None if user is None else user.id)

    def login(self, email: str, password: str) -> LoginResultDto:
        """
        Sign a user in by email and password.

        The email match ignores case. The user must exist, be active and have
        exactly this password. On failure the session is left as it was.

        Args:
            email (str): The email address entered by the user.
            password (str): The password entered by the user.

        Returns:
            LoginResultDto: success with the user, or failure with a
                human-readable error.
        """
        user = self.users_repository.get_by_email(email)
        if user is None or not user.is_active or not self._password_matches(
            user, password
        ):
            self.logger.warning(f"Failed login attempt for {email}.")
            return LoginResultDto(success=False, error=INVALID_CREDENTIALS_MESSAGE)

        self.set_current_user(user)
        self.logger.info(f"User {user.id} logged in.")
        return LoginResultDto(success=True, user=user)

    def logout(self) -> None:
        self.entity_store.set_current_user_id(None)
        self.logger.info("Logged out current user.")

    def _password_matches(self, user: UsersEntity, password: str) -> bool:
        # TODO: switch to salted hashes once stored passwords are migrated.
        return user.password == password
