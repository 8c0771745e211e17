# herbal_garden/client/storefront.py
from herbal_garden.client.cart_manager import CartManager
from herbal_garden.client.cart_storage import CartStorage
from herbal_garden.client.storefront_client import StorefrontClient
from herbal_garden.domain.schemas import Customer, OrderReceipt
from herbal_garden.utils.logging import get_logger

logger = get_logger(__name__)


def open_cart(client: StorefrontClient, storage: CartStorage) -> CartManager:
    """Start klienta: katalog (API albo snapshot), potem koszyk ze storage."""
    catalog = client.load_catalog()
    cart = CartManager(catalog, storage)
    cart.restore()
    logger.info(f"Cart restored with {cart.item_count()} items ({catalog.source} catalog)")
    return cart


def checkout(
    cart: CartManager,
    client: StorefrontClient,
    customer: Customer | dict,
    payment_method: str = "cod",
    notes: str | None = None,
) -> OrderReceipt:
    """
    Use Case: zlozenie zamowienia z koszyka.

    1. Snapshot koszyka (walidacja danych klienta)
    2. POST /api/orders
    3. Czyszczenie koszyka dopiero po potwierdzeniu z serwera
    """
    submission = cart.to_order_submission(customer, payment_method, notes)
    receipt = client.place_order(submission)

    cart.clear()
    logger.info(f"Order placed successfully, order id {receipt.order_id}, total {receipt.total_amount}")
    return receipt
