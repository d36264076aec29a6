from dtmms.common.constants import MATERIAL_ID_PREFIX, StorageCollection
from dtmms.dto.material_dto import MaterialCreateDto, MaterialPatchDto
from dtmms.entity.material_entity import MaterialEntity
from dtmms.repository.base_collection_repository import BaseCollectionRepository


class MaterialsRepository(BaseCollectionRepository):
    collection = StorageCollection.MATERIALS
    entity_class = MaterialEntity
    patch_class = MaterialPatchDto

    def get_by_programme_id(self, programme_id: str) -> list[MaterialEntity]:
        return self._find_all(lambda material: material.programme_id == programme_id)

    def create(self, material: MaterialCreateDto) -> MaterialEntity:
        return self._insert(
            {
                **material.model_dump(exclude_none=True),
                "id": self._new_id(MATERIAL_ID_PREFIX),
                "uploaded_at": self._now(),
            }
        )

    def update(
        self, material_id: str, patch: MaterialPatchDto
    ) -> MaterialEntity | None:
        return self._update(material_id, patch)

    def delete(self, material_id: str) -> bool:
        return self._delete_by_id(material_id)
