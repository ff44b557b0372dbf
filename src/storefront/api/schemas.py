"""Pydantic request/response schemas for the Storefront API."""

from __future__ import annotations

from pydantic import BaseModel, Field

# --- Request Schemas ---


class AddToCartRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"product_id": 1}]}}

    product_id: int


class UpdateQuantityRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"quantity": 3}]}}

    # Zero or below removes the line
    quantity: int


class SelectProductRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"product_id": 3}]}}

    product_id: int


class CustomOrderDialogRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"open": True}]}}

    open: bool


class EditCustomOrderRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Анна",
                    "email": "anna@example.com",
                    "message": "Панно 100x120 в тёплых тонах",
                }
            ]
        }
    }

    name: str | None = Field(None, max_length=255)
    email: str | None = Field(None, max_length=254)
    message: str | None = None


# --- Response Schemas ---


class ProductResponse(BaseModel):
    product_id: int
    name: str
    price: int
    image: str | None = None
    description: str | None = None
    category: str

    @classmethod
    def from_product(cls, product) -> ProductResponse:
        return cls(**product.to_dict())


class CartLineResponse(BaseModel):
    product_id: int
    name: str
    price: int
    image: str | None = None
    description: str | None = None
    category: str | None = None
    quantity: int
    line_total: int


class CustomOrderFormResponse(BaseModel):
    name: str = ""
    email: str = ""
    message: str = ""


class StorefrontResponse(BaseModel):
    products: list[ProductResponse]
    cart: list[CartLineResponse]
    total_price: int
    cart_count: int
    selected: ProductResponse | None = None
    custom_order_open: bool
    form: CustomOrderFormResponse
    notifications: list[str] = []

    @classmethod
    def from_snapshot(cls, snapshot, notifications=None) -> StorefrontResponse:
        return cls(
            products=[ProductResponse.from_product(p) for p in snapshot.products],
            cart=[
                CartLineResponse(
                    product_id=line.product_id,
                    name=line.name,
                    price=line.price,
                    image=line.image,
                    description=line.description,
                    category=line.category,
                    quantity=line.quantity,
                    line_total=line.line_total,
                )
                for line in snapshot.cart
            ],
            total_price=snapshot.total_price,
            cart_count=snapshot.cart_count,
            selected=ProductResponse.from_product(snapshot.selected) if snapshot.selected else None,
            custom_order_open=snapshot.custom_order_open,
            form=CustomOrderFormResponse(
                name=snapshot.form.name or "",
                email=snapshot.form.email or "",
                message=snapshot.form.message or "",
            ),
            notifications=notifications or [],
        )


class CustomOrderReceiptResponse(BaseModel):
    reference: str
    notifications: list[str] = []
