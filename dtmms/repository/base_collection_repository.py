import uuid
from typing import Any, Callable
from pydantic import ValidationError
from dtmms.common.constants import StorageCollection
from dtmms.common.entity_store import CorruptDataError
from dtmms.dto.base_dto import BaseDto
from dtmms.entity.base_entity import BaseEntity


class BaseCollectionRepository:
    """
    Shared read-modify-write logic for repositories backed by one collection.

    Every call reads the whole collection from the EntityStore and, for
    mutations, writes the whole collection back. Returned entities are fresh
    copies; changing them has no effect until passed back through a mutator.

    Subclasses set `collection`, `entity_class` and, if the entity can be
    updated, `patch_class`.
    """

    collection: StorageCollection
    entity_class: type[BaseEntity]
    patch_class: type[BaseDto] | None = None

    def __init__(self, logger, entity_store, date_time_util):
        """
        Args:
            logger: The logger instance for logging messages.
            entity_store (EntityStore): The store holding the collection.
            date_time_util (DateTimeUtil): Source of creation timestamps.
        """
        self.logger = logger
        self.entity_store = entity_store
        self.date_time_util = date_time_util

    def get_all(self) -> list:
        """
        Retrieve every record of the collection in stored order.

        Returns:
            list: The entities, or an empty list if the collection is empty.

        Raises:
            CorruptDataError: If the stored collection cannot be deserialized.
        """
        return [self._to_entity(record) for record in self._load_records()]

    def get_by_id(self, entity_id: str):
        """
        Retrieve a single record by its id.

        Args:
            entity_id (str): The id to look up.

        Returns:
            The matching entity, or None if no record has this id.
        """
        return next(
            (entity for entity in self.get_all() if entity.id == entity_id), None
        )

    def _find_all(self, predicate: Callable[[Any], bool]) -> list:
        return [entity for entity in self.get_all() if predicate(entity)]

    def _load_records(self) -> list[dict]:
        return self.entity_store.read_all(self.collection)

    def _save_records(self, records: list[dict]) -> None:
        self.entity_store.write_all(self.collection, records)

    def _to_entity(self, record: dict):
        try:
            return self.entity_class.model_validate(record)
        except ValidationError as e:
            key = self.entity_store.key_for(self.collection)
            self.logger.error(
                f"Invalid {self.entity_class.__name__} record under {key}: {e}"
            )
            raise CorruptDataError(
                key, f"record {record.get('id')!r} does not match the schema"
            ) from e

    def _new_id(self, prefix: str) -> str:
        return f"{prefix}-{uuid.uuid4()}"

    def _now(self) -> str:
        return self.date_time_util.now_iso_utc_z()

    def _insert(self, fields: dict[str, Any]):
        """
        Validate and append a new record.

        Args:
            fields (dict): Every attribute of the new entity, id included,
                keyed by snake_case or camelCase name.

        Returns:
            The created entity.
        """
        entity = self.entity_class.model_validate(fields)
        records = self._load_records()
        records.append(entity.to_record())
        self._save_records(records)
        self.logger.info(f"Created {self.entity_class.__name__} {entity.id}.")
        return entity

    def _update(self, entity_id: str, patch: BaseDto):
        """
        Shallow-merge the fields set on a patch over an existing record.

        Only the fields explicitly set on the patch are applied; nested values
        such as evaluation scores are replaced as a whole.

        Args:
            entity_id (str): The id of the record to update.
            patch (BaseDto): An instance of this repository's patch class.

        Returns:
            The merged entity, or None if no record has this id. Nothing is
            written when the record is missing.

        Raises:
            TypeError: If the patch is not an instance of `patch_class`.
            ValidationError: If the merged record is invalid.
        """
        if self.patch_class is None or not isinstance(patch, self.patch_class):
            raise TypeError(
                f"{type(self).__name__} expects a "
                f"{getattr(self.patch_class, '__name__', 'patch')}, "
                f"got {type(patch).__name__}."
            )

        records = self._load_records()
        for index, record in enumerate(records):
            if record.get("id") != entity_id:
                continue
            current = self._to_entity(record)
            merged_fields = current.model_dump()
            merged_fields.update(patch.model_dump(exclude_unset=True))
            updated = self.entity_class.model_validate(merged_fields)
            records[index] = updated.to_record()
            self._save_records(records)
            return updated

        self.logger.warning(
            f"{self.entity_class.__name__} {entity_id} not found, nothing updated."
        )
        return None

    def _delete_by_id(self, entity_id: str) -> bool:
        """
        Remove the record with the given id.

        Returns:
            bool: True if a record was removed, False if none matched. Nothing
                is written when no record matched.
        """
        records = self._load_records()
        remaining = [record for record in records if record.get("id") != entity_id]
        if len(remaining) == len(records):
            return False
        self._save_records(remaining)
        self.logger.info(f"Deleted {self.entity_class.__name__} {entity_id}.")
        return True
