# herbal_garden/client/__init__.py
from herbal_garden.client.catalog import Catalog
from herbal_garden.client.cart_manager import CartEvent, CartManager
from herbal_garden.client.cart_storage import CartStorageError, FileCartStorage, RedisCartStorage
from herbal_garden.client.storefront import checkout, open_cart
from herbal_garden.client.storefront_client import StorefrontClient, StorefrontError

__all__ = [
    "Catalog",
    "CartEvent",
    "CartManager",
    "CartStorageError",
    "FileCartStorage",
    "RedisCartStorage",
    "StorefrontClient",
    "StorefrontError",
    "checkout",
    "open_cart",
]
