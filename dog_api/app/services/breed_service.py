"""
Business logic for breeds.

Breeds are reference data loaded at startup; this service only reads
them.  ``list_groups`` summarises how many breeds fall into each breed
group.
"""

from typing import Dict, List, Optional
from uuid import UUID

from ..core.query import apply_filters, equals, icontains
from ..core.store import DataStores
from ..schemas.breed import Breed, BreedGroup, BreedGroups, BreedGroupSummary, NeedsLevel
from ..schemas.common import Size

GROUP_DESCRIPTIONS: Dict[BreedGroup, str] = {
    BreedGroup.sporting: "Dogs bred for hunting and retrieving game",
    BreedGroup.hound: "Dogs bred for hunting by scent or sight",
    BreedGroup.working: "Dogs bred for specific jobs like guarding, pulling sleds, or water rescue",
    BreedGroup.terrier: "Dogs bred to hunt and kill vermin",
    BreedGroup.toy: "Small companion dogs bred primarily for companionship",
    BreedGroup.non_sporting: "Diverse group of dogs that don't fit into other categories",
    BreedGroup.herding: "Dogs bred to control the movement of livestock",
    BreedGroup.mixed: "Dogs with mixed breed heritage",
}
DEFAULT_GROUP_DESCRIPTION = "Mixed breed dogs"


class BreedService:
    """Read‑only queries over the breed catalogue."""

    def __init__(self, stores: DataStores) -> None:
        self.breeds = stores.breeds

    def list_breeds(
        self,
        group: Optional[BreedGroup] = None,
        size: Optional[Size] = None,
        exercise_needs: Optional[NeedsLevel] = None,
        good_with_kids: Optional[bool] = None,
        good_with_pets: Optional[bool] = None,
    ) -> List[Breed]:
        return apply_filters(
            self.breeds.all(),
            equals("group", group),
            equals("size", size),
            equals("exercise_needs", exercise_needs),
            equals("good_with_kids", good_with_kids),
            equals("good_with_pets", good_with_pets),
        )

    def get_breed(self, breed_id: UUID) -> Breed:
        return self.breeds.get(breed_id)

    def search_breeds(self, q: str, limit: int = 10) -> List[Breed]:
        """Breeds whose name contains ``q`` (case‑insensitive), at most ``limit``."""
        return apply_filters(self.breeds.all(), icontains("name", q))[:limit]

    def list_groups(self) -> BreedGroups:
        """Count breeds per group, in the order groups are first seen."""
        counts: Dict[BreedGroup, int] = {}
        for breed in self.breeds.all():
            counts[breed.group] = counts.get(breed.group, 0) + 1
        return BreedGroups(
            groups=[
                BreedGroupSummary(
                    name=group,
                    description=GROUP_DESCRIPTIONS.get(group, DEFAULT_GROUP_DESCRIPTION),
                    count=count,
                )
                for group, count in counts.items()
            ]
        )
