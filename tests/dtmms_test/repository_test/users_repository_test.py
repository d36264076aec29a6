from unittest import main
from pydantic import ValidationError
from dtmms.common.constants import StorageCollection
from dtmms.common.entity_store import CorruptDataError
from dtmms.common.user_role import UserRole
from dtmms.dto.programme_dto import ProgrammePatchDto
from dtmms.dto.user_dto import UserCreateDto, UserPatchDto
from tests.dtmms_test.repository_test.base_repository_test_lib import (
    BaseRepositoryTestLib,
    TEST_NOW,
)


class TestUsersRepository(BaseRepositoryTestLib):
    def setUp(self):
        super().setUp()
        self.new_user = UserCreateDto(
            email="ngozi@mindbuilders.org",
            password="secret",
            role=UserRole.MENTOR,
            first_name="Ngozi",
            last_name="Eze",
        )

    def test_get_all_returns_seed_in_stored_order(self):
        users = self.users_repository.get_all()

        self.assertEqual(len(users), 10)
        self.assertEqual(users[0].id, "admin-1")
        self.assertEqual(users[-1].id, "trainee-5")

    def test_get_by_id(self):
        user = self.users_repository.get_by_id("mentor-1")

        self.assertEqual(user.display_name, "Chidi Nwosu")
        self.assertEqual(user.role, UserRole.MENTOR)

    def test_get_by_id_not_found(self):
        self.assertIsNone(self.users_repository.get_by_id("nobody"))

    def test_get_by_email_is_case_insensitive(self):
        user = self.users_repository.get_by_email("Admin@MindBuilders.ORG")

        self.assertEqual(user.id, "admin-1")

    def test_get_by_email_not_found(self):
        self.assertIsNone(self.users_repository.get_by_email("x@example.com"))

    def test_get_by_role(self):
        trainees = self.users_repository.get_by_role(UserRole.TRAINEE)

        self.assertEqual(
            [user.id for user in trainees],
            ["trainee-1", "trainee-2", "trainee-3", "trainee-4", "trainee-5"],
        )

    def test_create_assigns_role_prefixed_id_and_timestamp(self):
        created = self.users_repository.create(self.new_user)

        self.assertTrue(created.id.startswith("mentor-"))
        self.assertEqual(created.created_at, TEST_NOW)
        self.assertTrue(created.is_active)
        self.assertEqual(self.users_repository.get_by_id(created.id), created)
        self.assertEqual(len(self.users_repository.get_all()), 11)

    def test_create_persists_camel_case_fields(self):
        created = self.users_repository.create(self.new_user)

        record = self.entity_store.read_all(StorageCollection.USERS)[-1]
        self.assertEqual(record["id"], created.id)
        self.assertEqual(record["firstName"], "Ngozi")
        self.assertEqual(record["role"], "mentor")
        self.assertNotIn("phone", record)

    def test_create_generates_distinct_ids(self):
        first = self.users_repository.create(self.new_user)
        second = self.users_repository.create(self.new_user)

        self.assertNotEqual(first.id, second.id)

    def test_update_merges_given_fields(self):
        updated = self.users_repository.update(
            "trainee-1", UserPatchDto(phone="+234 000", is_active=False)
        )

        self.assertEqual(updated.phone, "+234 000")
        self.assertFalse(updated.is_active)
        self.assertEqual(updated.first_name, "Oluwaseun")
        self.assertEqual(self.users_repository.get_by_id("trainee-1"), updated)

    def test_update_with_empty_patch_returns_record_unchanged(self):
        before = self.users_repository.get_by_id("trainer-2")

        after = self.users_repository.update("trainer-2", UserPatchDto())

        self.assertEqual(after, before)

    def test_update_missing_id_returns_none_without_write(self):
        self.redis_client.set.reset_mock()

        result = self.users_repository.update("ghost", UserPatchDto(first_name="X"))

        self.assertIsNone(result)
        self.redis_client.set.assert_not_called()
        self.assertEqual(len(self.users_repository.get_all()), 10)

    def test_update_with_wrong_patch_type_raises_type_error(self):
        with self.assertRaises(TypeError):
            self.users_repository.update("admin-1", ProgrammePatchDto(title="X"))

    def test_update_clearing_required_field_raises_validation_error(self):
        with self.assertRaises(ValidationError):
            self.users_repository.update("admin-1", UserPatchDto(first_name=None))

        self.assertEqual(
            self.users_repository.get_by_id("admin-1").first_name, "Amara"
        )

    def test_delete(self):
        self.assertTrue(self.users_repository.delete("trainee-5"))

        self.assertIsNone(self.users_repository.get_by_id("trainee-5"))
        self.assertEqual(len(self.users_repository.get_all()), 9)

    def test_delete_missing_id_returns_false(self):
        self.users_repository.delete("trainee-5")
        self.redis_client.set.reset_mock()

        self.assertFalse(self.users_repository.delete("trainee-5"))
        self.redis_client.set.assert_not_called()
        self.assertEqual(len(self.users_repository.get_all()), 9)

    def test_delete_does_not_cascade(self):
        self.users_repository.delete("trainee-1")

        self.assertEqual(
            len(self.enrollments_repository.get_by_trainee_id("trainee-1")), 2
        )

    def test_invalid_record_raises_corrupt_data_error(self):
        self.entity_store.write_all(StorageCollection.USERS, [{"id": "broken"}])

        with self.assertRaises(CorruptDataError):
            self.users_repository.get_all()

    def test_returned_entities_are_copies(self):
        user = self.users_repository.get_by_id("admin-1")
        user.first_name = "Changed"

        self.assertEqual(self.users_repository.get_by_id("admin-1").first_name, "Amara")


if __name__ == "__main__":
    main()
