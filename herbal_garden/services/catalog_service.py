# herbal_garden/services/catalog_service.py
from decimal import Decimal
from typing import Any, Dict, List

from sqlalchemy.orm import Session

from herbal_garden.data.models.product import ProductModel
from herbal_garden.domain.identifiers import ProductKey
from herbal_garden.repos.product_repo import ProductRepo
from herbal_garden.utils.logging import get_logger

logger = get_logger(__name__)


def product_to_dict(p: ProductModel) -> Dict[str, Any]:
    return {
        "id": p.catalog_id,
        "storage_id": p.storage_id,
        "name": p.name,
        "scientific_name": p.scientific_name,
        "description": p.description or "",
        "medicinal_uses": p.medicinal_uses or "",
        "habitat": p.habitat or "",
        "cultivation": p.cultivation or "",
        "price": p.price,
        "previous_price": p.previous_price,
        "image": p.image,
        "images": list(p.images or []),
        "properties": list(p.properties or []),
        "category": p.category,
        "rating": {"stars": p.rating_stars, "review_count": p.rating_review_count},
        "in_stock": p.in_stock,
        "featured": p.featured,
        "created_at": p.created_at,
    }


class CatalogService:
    """
    Odczyt katalogu (tylko query, katalog nie jest modyfikowany przez API).
    """

    def __init__(self, db: Session):
        self.repo = ProductRepo(db)

    def list_products(
        self,
        search: str | None = None,
        category: str | None = None,
        min_price: Decimal | None = None,
        max_price: Decimal | None = None,
        featured: bool = False,
    ) -> List[Dict[str, Any]]:
        products = self.repo.list_products(
            search=search,
            category=category,
            min_price=min_price,
            max_price=max_price,
            featured_only=featured,
        )
        logger.info(f"Sent {len(products)} products to client")
        return [product_to_dict(p) for p in products]

    def search_products(self, query: str) -> List[Dict[str, Any]]:
        return [product_to_dict(p) for p in self.repo.search_products(query)]

    def get_product(self, raw_id: str) -> Dict[str, Any]:
        # najpierw storage id, potem id z katalogu
        for key in ProductKey.candidates(raw_id):
            product = self.repo.get_by_key(key)
            if product:
                return product_to_dict(product)
        raise LookupError("Product not found")
