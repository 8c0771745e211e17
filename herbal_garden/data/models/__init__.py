#import wszystkich modeli zeby SQLAlchemy je zarejestrowal w base metadata

from herbal_garden.data.models.product import ProductModel
from herbal_garden.data.models.contact import ContactModel
from herbal_garden.data.models.order import OrderModel

__all__ = ["ProductModel", "ContactModel", "OrderModel"]
