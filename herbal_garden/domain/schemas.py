# herbal_garden/domain/schemas.py
from datetime import datetime
from decimal import Decimal
from typing import Annotated, Generic, List, Literal, TypeVar

from pydantic import BaseModel, BeforeValidator, ConfigDict, EmailStr, Field, PlainSerializer
from pydantic.alias_generators import to_camel

T = TypeVar("T")

# kwoty liczymy na Decimal (nieujemne), w JSON wychodza jako liczby
Money = Annotated[Decimal, Field(ge=0), PlainSerializer(float, return_type=float, when_used="json")]

# puste pole to brak wartosci, reszta musi byc poprawnym adresem
OptionalEmail = Annotated[
    EmailStr | None,
    BeforeValidator(lambda v: (v.strip() or None) if isinstance(v, str) else v),
]

Category = Literal["medicinal", "herbal", "ayurvedic", "spice"]
PaymentMethod = Literal["cod", "online"]


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ApiResponse(BaseModel, Generic[T]):
    """Koperta odpowiedzi: {success, data?, message?, count?}."""

    success: bool = True
    message: str | None = None
    count: int | None = None
    data: T | None = None


# ---------------- katalog ----------------

class Rating(CamelModel):
    stars: float = Field(0, ge=0, le=5)
    review_count: int = Field(0, ge=0)


class Product(CamelModel):
    """Produkt z katalogu (response oraz snapshot po stronie klienta)."""

    id: int
    storage_id: str | None = Field(None, alias="_id")
    name: str
    scientific_name: str | None = None
    description: str = ""
    medicinal_uses: str = ""
    habitat: str = ""
    cultivation: str = ""
    price: Money
    previous_price: Money | None = None
    image: str | None = None
    images: List[str] = Field(default_factory=list)
    properties: List[str] = Field(default_factory=list)
    category: Category = "medicinal"
    rating: Rating = Field(default_factory=Rating)
    in_stock: bool = True
    featured: bool = False
    created_at: datetime | None = None

    @property
    def primary_image(self) -> str | None:
        if self.image:
            return self.image
        return self.images[0] if self.images else None


# ---------------- kontakt ----------------

class ContactIn(CamelModel):
    """Schema formularza kontaktowego. Wymagalnosc pol sprawdza ContactService."""

    name: str | None = None
    email: OptionalEmail = None
    subject: str | None = None
    message: str | None = None


class ContactReceipt(CamelModel):
    id: int
    submitted_at: datetime


class ContactOut(CamelModel):
    id: int
    name: str
    email: str
    subject: str
    message: str
    created_at: datetime


# ---------------- zamowienia ----------------

class Customer(CamelModel):
    name: str | None = None
    email: OptionalEmail = None
    phone: str | None = None
    address: str | None = None


class OrderItem(CamelModel):
    """Snapshot pozycji koszyka w momencie skladania zamowienia."""

    product_id: int | str
    name: str | None = None
    quantity: int = Field(..., ge=1)
    price: Money | None = None
    image: str | None = None


class OrderSubmission(CamelModel):
    """Schema dla skladania zamowienia (body POST /api/orders)."""

    customer: Customer | None = None
    items: List[OrderItem] = Field(default_factory=list)
    total_amount: Money | None = None
    payment_method: PaymentMethod | None = None
    notes: str | None = None


class OrderReceipt(CamelModel):
    order_id: str
    order_date: datetime
    total_amount: Money


class OrderOut(CamelModel):
    order_id: str
    customer: Customer
    items: List[OrderItem]
    total_amount: Money
    payment_method: PaymentMethod
    notes: str | None = None
    status: str
    created_at: datetime


# ---------------- koszyk (klient) ----------------

class LineItem(CamelModel):
    """Pozycja koszyka; name/price/image to snapshot produktu z chwili dodania."""

    product_id: int | str
    name: str | None = None
    price: Money | None = None
    image: str | None = None
    quantity: int = Field(..., ge=1)
