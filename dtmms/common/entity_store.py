import json
from dtmms.common.constants import (
    CURRENT_USER_SLOT,
    DEFAULT_STORAGE_NAMESPACE,
    INITIALIZED_FLAG_VALUE,
    INITIALIZED_SLOT,
    STORAGE_KEY_TEMPLATE,
    StorageCollection,
)
from dtmms.common.seed_data import SEED_DATASET


class CorruptDataError(Exception):
    """Raised when a persisted collection cannot be deserialized."""

    def __init__(self, key: str, reason: str):
        self.key = key
        self.reason = reason
        super().__init__(f"Corrupt data stored under '{key}': {reason}")


class EntityStore:
    """
    Keyed collection store backed by Redis.

    Every entity collection is persisted as a single JSON array under its own
    key; reads and writes always cover the whole collection. Two scalar slots
    sit next to the collections: the seed sentinel and the current-user pointer.
    """

    def __init__(
        self,
        logger,
        redis_client,
        retry_utils,
        namespace: str = DEFAULT_STORAGE_NAMESPACE,
        seed_dataset: dict[StorageCollection, list[dict]] | None = None,
    ):
        """
        Initializes the EntityStore.

        Args:
            logger: The logger instance for logging messages.
            redis_client: The Redis client instance.
            retry_utils: A RetryUtils for handling retries on transient errors.
            namespace (str): Prefix that keeps this application's keys apart
                from unrelated data in the same Redis database.
            seed_dataset (dict | None): Records written on first initialization,
                keyed by collection. Defaults to the bundled sample dataset.
        """
        self.logger = logger
        self.redis_client = redis_client
        self.retry_utils = retry_utils
        self.namespace = namespace
        self.seed_dataset = SEED_DATASET if seed_dataset is None else seed_dataset

    def key_for(self, slot: StorageCollection | str) -> str:
        """Return the Redis key for a collection or scalar slot."""
        slot_name = slot.value if isinstance(slot, StorageCollection) else slot
        return STORAGE_KEY_TEMPLATE.format(namespace=self.namespace, slot=slot_name)

    def all_keys(self) -> list[str]:
        """Return every key owned by this store, scalar slots included."""
        keys = [self.key_for(collection) for collection in StorageCollection]
        keys.append(self.key_for(CURRENT_USER_SLOT))
        keys.append(self.key_for(INITIALIZED_SLOT))
        return keys

    def read_all(self, collection: StorageCollection) -> list[dict]:
        """
        Read every record of a collection.

        Args:
            collection (StorageCollection): The collection to read.

        Returns:
            list[dict]: The stored records in insertion order, or an empty list
                if nothing has been stored under the key.

        Raises:
            CorruptDataError: If the stored value is not a JSON array of objects.
        """
        key = self.key_for(collection)
        raw_value = self.retry_utils.get_retry_on_transient(self.redis_client.get, key)
        if raw_value is None:
            self.logger.debug(f"No data stored under {key}, returning empty collection.")
            return []

        try:
            records = json.loads(raw_value)
        except json.JSONDecodeError as e:
            self.logger.error(f"Failed to decode collection {key}: {e}")
            raise CorruptDataError(key, "value is not valid JSON") from e

        if not isinstance(records, list) or not all(
            isinstance(record, dict) for record in records
        ):
            self.logger.error(f"Collection {key} is not a JSON array of objects.")
            raise CorruptDataError(key, "value is not an array of objects")

        return records

    def write_all(self, collection: StorageCollection, records: list[dict]) -> None:
        """
        Replace the whole collection with the given records.

        Args:
            collection (StorageCollection): The collection to overwrite.
            records (list[dict]): JSON-serializable records in the order to keep.
        """
        key = self.key_for(collection)
        self.retry_utils.get_retry_on_transient(
            self.redis_client.set, key, json.dumps(records)
        )
        self.logger.debug(f"Wrote {len(records)} records to {key}.")

    def is_initialized(self) -> bool:
        """Return True if the seed sentinel is set."""
        return bool(
            self.retry_utils.get_retry_on_transient(
                self.redis_client.exists, self.key_for(INITIALIZED_SLOT)
            )
        )

    def initialize_if_absent(self) -> bool:
        """
        Populate every collection with its seed records on first run.

        All seed collections and the sentinel are written in one pipeline. Does
        nothing if the sentinel is already set.

        Returns:
            bool: True if the seed dataset was written, False if the store was
                already initialized.
        """
        if self.is_initialized():
            self.logger.debug("Store already initialized, skipping seed.")
            return False

        self.retry_utils.get_retry_on_transient(self._write_seed)

        self.logger.info(f"Seeded store namespace '{self.namespace}'.")
        return True

    def reset(self) -> None:
        """
        Clear every known key, including the sentinel and the current-user
        pointer, then seed the store again.
        """
        self.retry_utils.get_retry_on_transient(self._delete_all_keys)
        self.logger.info(f"Cleared store namespace '{self.namespace}'.")

        self.initialize_if_absent()

    def _write_seed(self) -> list:
        # A failed execute empties the command stack, so each attempt queues afresh.
        pipeline = self.redis_client.pipeline()
        for collection in StorageCollection:
            records = self.seed_dataset.get(collection, [])
            pipeline.set(self.key_for(collection), json.dumps(records))
        pipeline.set(self.key_for(INITIALIZED_SLOT), INITIALIZED_FLAG_VALUE)
        return pipeline.execute()

    def _delete_all_keys(self) -> list:
        pipeline = self.redis_client.pipeline()
        for key in self.all_keys():
            pipeline.delete(key)
        return pipeline.execute()

    def get_current_user_id(self) -> str | None:
        """Return the id held in the current-user slot, if any."""
        return self.retry_utils.get_retry_on_transient(
            self.redis_client.get, self.key_for(CURRENT_USER_SLOT)
        )

    def set_current_user_id(self, user_id: str | None) -> None:
        """Write the current-user slot, or clear it when user_id is None."""
        key = self.key_for(CURRENT_USER_SLOT)
        if user_id is None:
            self.retry_utils.get_retry_on_transient(self.redis_client.delete, key)
            return
        self.retry_utils.get_retry_on_transient(self.redis_client.set, key, user_id)
