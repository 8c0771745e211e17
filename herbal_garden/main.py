# herbal_garden/main.py
from contextlib import asynccontextmanager

from fastapi import FastAPI
import uvicorn

from herbal_garden.api import create_app
from herbal_garden.data.database import Base, engine
from herbal_garden.data.seed import seed
from herbal_garden.utils.settings import PORT, SEED_CATALOG
from herbal_garden.utils.logging import get_logger

# import modeli przed create_all zeby byly w Base.metadata
import herbal_garden.data.models  # noqa: F401

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Initializing database, tables: {list(Base.metadata.tables.keys())}")
    try:
        Base.metadata.create_all(bind=engine)
    except Exception as e:
        logger.error(f"Failed to create tables: {e}")
        raise

    if SEED_CATALOG:
        seed()

    logger.info("Herbal Garden storefront started")
    yield


app = create_app(lifespan=lifespan)

if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=PORT)
