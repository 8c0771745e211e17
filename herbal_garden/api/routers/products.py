# herbal_garden/api/routers/products.py
from decimal import Decimal
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from herbal_garden.data.database import get_db
from herbal_garden.domain.schemas import ApiResponse, Product
from herbal_garden.services.catalog_service import CatalogService
from herbal_garden.utils.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/api/products", tags=["products"])

ProductList = ApiResponse[List[Product]]
ProductOne = ApiResponse[Product]


def get_service(db: Session):
    return CatalogService(db)


@router.get("", response_model=ProductList, response_model_exclude_none=True)
def list_products(
    search: str | None = Query(None),
    category: str | None = Query(None),
    min_price: Decimal | None = Query(None, alias="minPrice"),
    max_price: Decimal | None = Query(None, alias="maxPrice"),
    featured: bool = Query(False),
    db: Session = Depends(get_db),
):
    svc = get_service(db)
    try:
        products = svc.list_products(
            search=search,
            category=category,
            min_price=min_price,
            max_price=max_price,
            featured=featured,
        )
    except SQLAlchemyError as e:
        logger.error(f"Error fetching products: {e}")
        raise HTTPException(status_code=500, detail="Error fetching products")
    return ProductList(count=len(products), data=[Product.model_validate(p) for p in products])


@router.get("/search/{query}", response_model=ProductList, response_model_exclude_none=True)
def search_products(query: str, db: Session = Depends(get_db)):
    svc = get_service(db)
    try:
        products = svc.search_products(query)
    except SQLAlchemyError as e:
        logger.error(f"Error searching products: {e}")
        raise HTTPException(status_code=500, detail="Error searching products")
    return ProductList(count=len(products), data=[Product.model_validate(p) for p in products])


@router.get("/{product_id}", response_model=ProductOne, response_model_exclude_none=True)
def get_product(product_id: str, db: Session = Depends(get_db)):
    svc = get_service(db)
    try:
        return ProductOne(data=Product.model_validate(svc.get_product(product_id)))
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except SQLAlchemyError as e:
        logger.error(f"Error fetching product {product_id}: {e}")
        raise HTTPException(status_code=500, detail="Error fetching product")
