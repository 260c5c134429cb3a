import json
import os
from functools import lru_cache
from schemas import Medicine
from services.listing import filter_records

SEARCH_FIELDS = ("name", "generic_name", "category")
MAX_RESULTS = 10

CATALOG_PATH = os.path.join(os.path.dirname(__file__), "..", "seed_data", "medicine.json")


@lru_cache(maxsize=1)
def load_catalog() -> tuple[Medicine, ...]:
    with open(CATALOG_PATH, "r", encoding="utf-8") as f:
        return tuple(Medicine(**item) for item in json.load(f))


class MedicineService:
    def __init__(self, catalog: tuple[Medicine, ...] = None):
        self.catalog = catalog if catalog is not None else load_catalog()

    def search(self, query: str) -> list[Medicine]:
        """Prescription autocomplete: blank queries return nothing."""
        if not query or not query.strip():
            return []
        return filter_records(self.catalog, query, SEARCH_FIELDS)[:MAX_RESULTS]

    def categories(self) -> list[str]:
        seen = []
        for medicine in self.catalog:
            if medicine.category not in seen:
                seen.append(medicine.category)
        return seen
