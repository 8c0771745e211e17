# herbal_garden/client/catalog.py
from typing import Iterable, Iterator, List

from herbal_garden.domain.identifiers import ProductKey, KeyKind
from herbal_garden.domain.schemas import Product


class Catalog:
    """
    Katalog wczytany raz przy starcie klienta, tylko do odczytu.
    source: "api" albo "snapshot" (fallback gdy backend nie dziala).
    """

    def __init__(self, products: Iterable[Product], source: str = "api"):
        self._products: List[Product] = list(products)
        self.source = source

    def resolve(self, raw_id) -> Product | None:
        for key in ProductKey.candidates(raw_id):
            for p in self._products:
                if key.kind == KeyKind.STORAGE and p.storage_id == key.value:
                    return p
                if key.kind == KeyKind.CATALOG and p.id == key.value:
                    return p
        return None

    def __iter__(self) -> Iterator[Product]:
        return iter(self._products)

    def __len__(self) -> int:
        return len(self._products)
