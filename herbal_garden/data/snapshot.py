# herbal_garden/data/snapshot.py
import json
from importlib import resources
from typing import List

from herbal_garden.domain.schemas import Product

SNAPSHOT_FILE = "catalog.json"


def load_snapshot(path: str | None = None) -> List[Product]:
    """
    Statyczny snapshot katalogu: seed bazy oraz fallback klienta gdy API nie odpowiada.
    """
    if path:
        with open(path, encoding="utf-8") as f:
            raw = json.load(f)
    else:
        raw = json.loads(resources.files("herbal_garden.data").joinpath(SNAPSHOT_FILE).read_text(encoding="utf-8"))
    return [Product.model_validate(p) for p in raw]
