import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from herbal_garden.client.cart_manager import CartManager
from herbal_garden.client.cart_storage import CartStorageError, FileCartStorage, RedisCartStorage


class FakeRedis:
    def __init__(self):
        self.data = {}

    def get(self, name):
        return self.data.get(name)

    def set(self, name, value):
        self.data[name] = value
        return True


class DownRedis:
    def get(self, name):
        raise RedisConnectionError("redis down")

    def set(self, name, value):
        raise RedisConnectionError("redis down")


def test_file_storage_missing_file(tmp_path):
    assert FileCartStorage(str(tmp_path / "nope.json")).load() is None


def test_file_storage_round_trip(tmp_path):
    storage = FileCartStorage(str(tmp_path / "cart.json"))
    storage.save('[{"productId": 1, "quantity": 1}]')
    assert storage.load() == '[{"productId": 1, "quantity": 1}]'


def test_file_storage_unwritable(tmp_path):
    storage = FileCartStorage(str(tmp_path / "missing-dir" / "cart.json"))
    with pytest.raises(CartStorageError):
        storage.save("[]")


def test_redis_storage_uses_fixed_key(catalog):
    fake = FakeRedis()
    cart = CartManager(catalog, RedisCartStorage(client=fake))
    cart.add(1)
    assert list(fake.data) == ["herbal_garden_cart"]

    restored = CartManager(catalog, RedisCartStorage(client=fake))
    restored.restore()
    assert restored.items == cart.items


def test_redis_errors_are_wrapped():
    storage = RedisCartStorage(client=DownRedis())
    with pytest.raises(CartStorageError):
        storage.load()
    with pytest.raises(CartStorageError):
        storage.save("[]")


def test_restore_from_unavailable_redis_is_empty(catalog):
    cart = CartManager(catalog, RedisCartStorage(client=DownRedis()))
    cart.restore()
    assert cart.items == ()
