# herbal_garden/data/seed.py
from sqlalchemy.exc import SQLAlchemyError

from herbal_garden.data.database import SessionLocal
from herbal_garden.data.models.product import ProductModel
from herbal_garden.data.snapshot import load_snapshot
from herbal_garden.domain.schemas import Product
from herbal_garden.repos.product_repo import ProductRepo
from herbal_garden.utils.logging import get_logger

logger = get_logger(__name__)


def to_model(p: Product) -> ProductModel:
    return ProductModel(
        catalog_id=p.id,
        name=p.name,
        scientific_name=p.scientific_name,
        description=p.description,
        medicinal_uses=p.medicinal_uses,
        habitat=p.habitat,
        cultivation=p.cultivation,
        price=p.price,
        previous_price=p.previous_price,
        image=p.primary_image,
        images=list(p.images),
        properties=list(p.properties),
        category=p.category,
        rating_stars=p.rating.stars,
        rating_review_count=p.rating.review_count,
        in_stock=p.in_stock,
        featured=p.featured,
    )


def seed(session_factory=SessionLocal, path: str | None = None) -> int:
    db = session_factory()
    try:
        repo = ProductRepo(db)
        # not forcing: only seed if empty
        count = repo.count()
        if count:
            logger.info(f"Found {count} existing products in database")
            return 0
        inserted = repo.add_many([to_model(p) for p in load_snapshot(path)])
        logger.info(f"{inserted} products seeded")
        return inserted
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error seeding products: {e}")
        return 0
    finally:
        db.close()
