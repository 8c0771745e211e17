# herbal_garden/client/cart_storage.py
import os
import tempfile
from typing import Protocol

import redis
from redis.exceptions import RedisError

from herbal_garden.utils.settings import CART_FILE, CART_STORAGE_KEY, REDIS_URL
from herbal_garden.utils.logging import get_logger

logger = get_logger(__name__)


class CartStorageError(Exception):
    pass


class CartStorage(Protocol):
    key: str

    def load(self) -> str | None:
        ...

    def save(self, data: str) -> None:
        ...


class FileCartStorage:
    """Koszyk w pliku JSON, odpowiednik localStorage przegladarki."""

    def __init__(self, path: str | None = None, key: str = CART_STORAGE_KEY):
        self.path = path or CART_FILE
        self.key = key

    def load(self) -> str | None:
        try:
            with open(self.path, encoding="utf-8") as f:
                return f.read()
        except FileNotFoundError:
            return None
        except OSError as e:
            raise CartStorageError(f"Cannot read cart file {self.path}: {e}") from e

    def save(self, data: str) -> None:
        directory = os.path.dirname(os.path.abspath(self.path))
        try:
            # zapis przez plik tymczasowy + replace, zeby nie zostawic polowy JSONa
            fd, tmp = tempfile.mkstemp(dir=directory, prefix=".cart-")
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(data)
            os.replace(tmp, self.path)
        except OSError as e:
            raise CartStorageError(f"Cannot write cart file {self.path}: {e}") from e


class RedisCartStorage:
    """Koszyk pod stalym kluczem w Redisie."""

    def __init__(self, url: str | None = None, key: str = CART_STORAGE_KEY, client=None):
        self.redis = client or redis.Redis.from_url(
            url or REDIS_URL,
            decode_responses=True,
        )
        self.key = key

    def load(self) -> str | None:
        try:
            return self.redis.get(self.key)
        except RedisError as e:
            raise CartStorageError(f"Cannot read cart from redis: {e}") from e

    def save(self, data: str) -> None:
        logger.debug(f"SET {self.key}")
        try:
            self.redis.set(name=self.key, value=data)
        except RedisError as e:
            raise CartStorageError(f"Cannot write cart to redis: {e}") from e
