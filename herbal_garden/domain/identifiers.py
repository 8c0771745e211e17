# herbal_garden/domain/identifiers.py
import re
from dataclasses import dataclass
from enum import Enum
from typing import List, Union

_STORAGE_ID_RE = re.compile(r"^[0-9a-f]{32}$")


class KeyKind(str, Enum):
    STORAGE = "storage"
    CATALOG = "catalog"


@dataclass(frozen=True)
class ProductKey:
    """
    Identyfikator produktu: albo storage id nadany przez baze,
    albo numeryczne id z katalogu. Rozwiazywany raz, na granicy dostepu do danych.
    """

    kind: KeyKind
    value: Union[str, int]

    @classmethod
    def candidates(cls, raw: Union[str, int, None]) -> List["ProductKey"]:
        """Mozliwe interpretacje surowego id, w kolejnosci sprawdzania (storage id najpierw)."""
        if raw is None or isinstance(raw, bool):
            return []
        if isinstance(raw, int):
            return [cls(KeyKind.CATALOG, raw)]

        text = str(raw).strip()
        keys = []
        if _STORAGE_ID_RE.match(text.lower()):
            keys.append(cls(KeyKind.STORAGE, text.lower()))
        if text.isdigit():
            keys.append(cls(KeyKind.CATALOG, int(text)))
        return keys

    def __str__(self) -> str:
        return f"{self.kind.value}:{self.value}"
