# herbal_garden/services/order_service.py
import random
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Dict, List

from sqlalchemy.orm import Session

from herbal_garden.data.models.order import OrderModel
from herbal_garden.domain.schemas import OrderSubmission, OrderOut
from herbal_garden.repos.order_repo import OrderRepo
from herbal_garden.utils.settings import VERIFY_ORDER_TOTALS
from herbal_garden.utils.logging import get_logger

logger = get_logger(__name__)

ORDER_ID_PREFIX = "ORD"
ORDER_ID_ATTEMPTS = 5
TOTAL_TOLERANCE = Decimal("0.01")
CENT = Decimal("0.01")


def generate_order_id(now: datetime | None = None, rng: random.Random | None = None) -> str:
    """ORD + epoch w milisekundach + 3-cyfrowy losowy sufiks, np. ORD1718000000000042."""
    now = now or datetime.now(timezone.utc)
    rng = rng or random
    millis = int(now.timestamp() * 1000)
    return f"{ORDER_ID_PREFIX}{millis}{rng.randrange(1000):03d}"


def items_total(submission: OrderSubmission) -> Decimal:
    total = sum((i.price * i.quantity for i in submission.items), Decimal("0.00"))
    return total.quantize(CENT)


class OrderService:
    """
    Serwis domeny zamowien.
    command: place_order (zapis), query: list_orders (tylko odczyt).
    Zamowienia sa niemutowalne, brak update/delete.
    """

    def __init__(self, db: Session, verify_totals: bool = VERIFY_ORDER_TOTALS):
        self.repo = OrderRepo(db)
        self.verify_totals = verify_totals

    def place_order(self, submission: OrderSubmission) -> Dict[str, Any]:
        """
        Use Case: zlozenie zamowienia.

        1. Walidacja (customer.name, customer.email, niepusta lista items)
        2. Opcjonalna weryfikacja totalAmount wzgledem pozycji
        3. Nadanie orderId i zapis
        """
        customer = submission.customer
        if not customer or not customer.name or not customer.email or not submission.items:
            raise ValueError("Customer info and items are required")

        if submission.total_amount is None:
            raise ValueError("Total amount is required")

        if self.verify_totals:
            self._verify_total(submission)

        order_id = self._new_order_id()

        order = self.repo.create_order(
            OrderModel(
                order_id=order_id,
                customer=customer.model_dump(mode="json", by_alias=True, exclude_none=True),
                items=[i.model_dump(mode="json", by_alias=True, exclude_none=True) for i in submission.items],
                total_amount=submission.total_amount,
                payment_method=submission.payment_method or "cod",
                notes=submission.notes,
            )
        )

        logger.info(
            f"New order {order.order_id} placed by {customer.name}: "
            f"{len(submission.items)} items, total {submission.total_amount}"
        )

        # total zwracany dokladnie taki jak przyslal klient
        return {
            "order_id": order.order_id,
            "order_date": order.created_at,
            "total_amount": submission.total_amount,
        }

    def list_orders(self) -> List[OrderOut]:
        return [
            OrderOut(
                order_id=o.order_id,
                customer=o.customer,
                items=o.items,
                total_amount=o.total_amount,
                payment_method=o.payment_method,
                notes=o.notes,
                status=o.status,
                created_at=o.created_at,
            )
            for o in self.repo.list_orders()
        ]

    def _verify_total(self, submission: OrderSubmission) -> None:
        if any(i.price is None for i in submission.items):
            raise ValueError("Every item needs a price to verify the order total")

        expected = items_total(submission)
        if abs(expected - submission.total_amount) > TOTAL_TOLERANCE:
            logger.warning(
                f"Rejected order total {submission.total_amount}, items add up to {expected}"
            )
            raise ValueError("Total amount does not match order items")

    def _new_order_id(self) -> str:
        # losowy sufiks moze sie powtorzyc w tej samej milisekundzie, sprawdzamy w bazie
        for _ in range(ORDER_ID_ATTEMPTS):
            order_id = generate_order_id()
            if not self.repo.order_id_exists(order_id):
                return order_id
            logger.warning(f"Order id collision on {order_id}, generating another")
        raise RuntimeError("Could not generate a unique order id")
