# herbal_garden/repos/product_repo.py
from decimal import Decimal
from typing import List

from sqlalchemy import select, or_
from sqlalchemy.orm import Session

from herbal_garden.data.models.product import ProductModel
from herbal_garden.domain.identifiers import ProductKey, KeyKind


def _contains(column, text: str):
    # dopasowanie podciagu bez wzgledu na wielkosc liter, znaki LIKE escapowane
    escaped = text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return column.ilike(f"%{escaped}%", escape="\\")


class ProductRepo:
    def __init__(self, db: Session):
        self.db = db

    def list_products(
        self,
        search: str | None = None,
        category: str | None = None,
        min_price: Decimal | None = None,
        max_price: Decimal | None = None,
        featured_only: bool = False,
    ) -> List[ProductModel]:
        stmt = select(ProductModel)

        if search:
            stmt = stmt.where(_contains(ProductModel.name, search))
        if category:
            stmt = stmt.where(ProductModel.category == category)
        if min_price is not None:
            stmt = stmt.where(ProductModel.price >= min_price)
        if max_price is not None:
            stmt = stmt.where(ProductModel.price <= max_price)
        if featured_only:
            stmt = stmt.where(ProductModel.featured.is_(True))

        # najnowsze najpierw
        stmt = stmt.order_by(ProductModel.created_at.desc(), ProductModel.catalog_id.desc())
        return list(self.db.execute(stmt).scalars().all())

    def search_products(self, query: str) -> List[ProductModel]:
        stmt = select(ProductModel).where(
            or_(
                _contains(ProductModel.name, query),
                _contains(ProductModel.scientific_name, query),
                _contains(ProductModel.description, query),
            )
        )
        return list(self.db.execute(stmt).scalars().all())

    def get_by_key(self, key: ProductKey) -> ProductModel | None:
        if key.kind == KeyKind.STORAGE:
            return self.db.get(ProductModel, key.value)
        return self.db.execute(
            select(ProductModel).where(ProductModel.catalog_id == key.value)
        ).scalar_one_or_none()

    def count(self) -> int:
        return self.db.query(ProductModel).count()

    def add_many(self, products: List[ProductModel]) -> int:
        self.db.add_all(products)
        self.db.commit()
        return len(products)
