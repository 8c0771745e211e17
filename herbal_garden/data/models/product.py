# herbal_garden/data/models/product.py
import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, Integer, String, Text, Numeric, Float, Boolean, DateTime, JSON, CheckConstraint

from herbal_garden.data.database import Base

CATEGORIES = ("medicinal", "herbal", "ayurvedic", "spice")


def new_storage_id() -> str:
    return uuid.uuid4().hex


class ProductModel(Base):
    __tablename__ = "products"

    # storage_id nadaje baza, catalog_id pochodzi z katalogu (np. 1 = Tulsi)
    storage_id = Column(String(32), primary_key=True, default=new_storage_id)
    catalog_id = Column(Integer, unique=True, nullable=False)

    name = Column(String, nullable=False)
    scientific_name = Column(String, nullable=True)
    description = Column(Text, nullable=False, default="")
    medicinal_uses = Column(Text, nullable=False, default="")
    habitat = Column(Text, nullable=False, default="")
    cultivation = Column(Text, nullable=False, default="")

    price = Column(Numeric(10, 2), nullable=False)
    previous_price = Column(Numeric(10, 2), nullable=True)

    image = Column(String, nullable=False)
    images = Column(JSON, nullable=False, default=list)
    properties = Column(JSON, nullable=False, default=list)

    category = Column(String(20), nullable=False, default="medicinal")
    rating_stars = Column(Float, nullable=False, default=0)
    rating_review_count = Column(Integer, nullable=False, default=0)

    in_stock = Column(Boolean, nullable=False, default=True)
    featured = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))

    __table_args__ = (
        CheckConstraint("price >= 0", name="ck_product_price"),
        CheckConstraint("rating_stars >= 0 AND rating_stars <= 5", name="ck_product_stars"),
    )
