from sqlalchemy import Column, Integer, String, Text, DateTime, Numeric, JSON
from datetime import datetime, timezone

from herbal_garden.data.database import Base


class OrderModel(Base):
    __tablename__ = "orders"

    id = Column(Integer, primary_key=True)
    order_id = Column(String(32), unique=True, nullable=False)  # ORD + ms + losowy sufiks

    # dokumentowe czesci zamowienia trzymane jako JSON
    customer = Column(JSON, nullable=False)
    items = Column(JSON, nullable=False)

    total_amount = Column(Numeric(10, 2), nullable=False)
    payment_method = Column(String(10), nullable=False, default="cod")  # cod, online
    notes = Column(Text, nullable=True)
    status = Column(String, nullable=False, default="pending")
    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))
