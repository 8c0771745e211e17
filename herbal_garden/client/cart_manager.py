# herbal_garden/client/cart_manager.py
from dataclasses import dataclass
from decimal import Decimal
from typing import Callable, List, Tuple

from pydantic import TypeAdapter

from herbal_garden.client.catalog import Catalog
from herbal_garden.client.cart_storage import CartStorage, CartStorageError
from herbal_garden.domain.schemas import Customer, LineItem, OrderItem, OrderSubmission
from herbal_garden.utils.logging import get_logger

logger = get_logger(__name__)

_LINES = TypeAdapter(List[LineItem])


@dataclass(frozen=True)
class CartEvent:
    kind: str  # added, updated, removed, cleared, restored
    product_id: int | str | None = None
    message: str | None = None  # krotkie powiadomienie dla uzytkownika


CartListener = Callable[[CartEvent], None]


class CartManager:
    """
    Koszyk klienta.
    commands (add, change_quantity, remove, clear, restore) zmieniaja stan i zapisuja go w storage,
    query (items, total, item_count, to_order_submission) tylko odczyt.
    Widok nie jest tu podpiety, subskrybuje zdarzenia przez subscribe().
    """

    def __init__(self, catalog: Catalog, storage: CartStorage):
        self.catalog = catalog
        self.storage = storage
        self._lines: List[LineItem] = []
        self._listeners: List[CartListener] = []

    # query
    @property
    def items(self) -> Tuple[LineItem, ...]:
        return tuple(line.model_copy() for line in self._lines)

    def total(self) -> Decimal:
        total = Decimal("0.00")
        for line in self._lines:
            price = self._unit_price(line)
            if price is None:
                logger.warning(f"No price for product {line.product_id}, skipped in total")
                continue
            total += price * line.quantity
        return total

    def item_count(self) -> int:
        return sum(line.quantity for line in self._lines)

    def to_order_submission(
        self,
        customer: Customer | dict,
        payment_method: str = "cod",
        notes: str | None = None,
    ) -> OrderSubmission:
        """Snapshot koszyka do wyslania; koszyk nie jest modyfikowany."""
        if isinstance(customer, dict):
            customer = Customer.model_validate(customer)

        # phone opcjonalny, reszta wymagana juz po stronie klienta
        required = (customer.name, customer.email, customer.address)
        if not all((value or "").strip() for value in required):
            raise ValueError("Please fill all required fields")
        if not self._lines:
            raise ValueError("Cart is empty")

        items = [
            OrderItem(
                product_id=line.product_id,
                name=line.name,
                quantity=line.quantity,
                price=self._unit_price(line),
                image=line.image,
            )
            for line in self._lines
        ]
        return OrderSubmission(
            customer=customer.model_copy(),
            items=items,
            total_amount=self.total(),
            payment_method=payment_method or "cod",
            notes=notes,
        )

    # commands
    def subscribe(self, listener: CartListener) -> Callable[[], None]:
        self._listeners.append(listener)
        return lambda: self._listeners.remove(listener)

    def add(self, product_id) -> LineItem | None:
        product = self.catalog.resolve(product_id)
        if not product:
            logger.info(f"Ignoring unknown product {product_id}")
            return None

        line = self._find(product.id)
        if line:
            line.quantity += 1
        else:
            line = LineItem(
                product_id=product.id,
                name=product.name,
                price=product.price,
                image=product.primary_image,
                quantity=1,
            )
            self._lines.append(line)

        logger.info(f"Product {product.id} in cart, quantity {line.quantity}")
        self._changed(CartEvent("added", product.id, "Product added to cart!"))
        return line.model_copy()

    def change_quantity(self, product_id, delta: int) -> LineItem | None:
        line = self._find(self._canonical_id(product_id))
        if not line:
            return None

        new_quantity = line.quantity + delta
        if new_quantity <= 0:
            self._lines.remove(line)
            logger.info(f"Product {line.product_id} removed from cart")
            self._changed(CartEvent("removed", line.product_id))
            return None

        line.quantity = new_quantity
        self._changed(CartEvent("updated", line.product_id))
        return line.model_copy()

    def remove(self, product_id) -> None:
        line = self._find(self._canonical_id(product_id))
        if line:
            self.change_quantity(line.product_id, -line.quantity)

    def clear(self) -> None:
        self._lines = []
        self._changed(CartEvent("cleared"))

    def persist(self) -> None:
        self.storage.save(_LINES.dump_json(self._lines, by_alias=True).decode("utf-8"))

    def restore(self) -> None:
        """Wczytuje koszyk ze storage; brak lub uszkodzone dane daja pusty koszyk."""
        try:
            raw = self.storage.load()
            self._lines = self._deduplicated(_LINES.validate_json(raw) if raw else [])
        except (CartStorageError, ValueError) as e:
            logger.warning(f"Stored cart unreadable, starting empty: {e}")
            self._lines = []
        self._notify(CartEvent("restored"))

    # helpers
    def _unit_price(self, line: LineItem) -> Decimal | None:
        if line.price is not None:
            return line.price
        product = self.catalog.resolve(line.product_id)
        return product.price if product else None

    def _canonical_id(self, product_id):
        product = self.catalog.resolve(product_id)
        return product.id if product else product_id

    def _find(self, product_id) -> LineItem | None:
        for line in self._lines:
            if str(line.product_id) == str(product_id):
                return line
        return None

    def _deduplicated(self, lines: List[LineItem]) -> List[LineItem]:
        # jedna pozycja na produkt, id sprowadzone do id katalogowego
        seen = set()
        for line in lines:
            line.product_id = self._canonical_id(line.product_id)
            key = str(line.product_id)
            if key in seen:
                raise ValueError(f"Duplicate cart line for product {line.product_id}")
            seen.add(key)
        return lines

    def _changed(self, event: CartEvent) -> None:
        try:
            self.persist()
        except CartStorageError as e:
            # stan w pamieci zostaje, zapis ponowi nastepna zmiana
            logger.error(f"Failed to persist cart: {e}")
        self._notify(event)

    def _notify(self, event: CartEvent) -> None:
        for listener in list(self._listeners):
            listener(event)
