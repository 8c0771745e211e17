# herbal_garden/repos/order_repo.py
from typing import List

from sqlalchemy import select
from sqlalchemy.orm import Session
from herbal_garden.data.models.order import OrderModel


class OrderRepo:
    def __init__(self, db: Session):
        self.db = db

    def create_order(self, order: OrderModel) -> OrderModel:
        self.db.add(order)
        self.db.commit()
        self.db.refresh(order)
        return order

    def order_id_exists(self, order_id: str) -> bool:
        return self.db.execute(
            select(OrderModel.id).where(OrderModel.order_id == order_id)
        ).first() is not None

    def list_orders(self) -> List[OrderModel]:
        return (
            self.db.query(OrderModel)
            .order_by(OrderModel.created_at.desc(), OrderModel.id.desc())
            .all()
        )
