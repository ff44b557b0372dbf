"""FastAPI endpoints for the Storefront.

Every intent endpoint answers with a fresh snapshot of the settled state,
together with any notifications raised while handling it.
"""

from fastapi import APIRouter, Depends, HTTPException, Request
from protean.exceptions import ObjectNotFoundError, ValidationError

from storefront.api.schemas import (
    AddToCartRequest,
    CustomOrderDialogRequest,
    CustomOrderReceiptResponse,
    EditCustomOrderRequest,
    ProductResponse,
    SelectProductRequest,
    StorefrontResponse,
    UpdateQuantityRequest,
)
from storefront.application import Storefront

storefront_router = APIRouter(tags=["storefront"])


def get_storefront(request: Request) -> Storefront:
    return request.app.state.storefront


def _drain(shop: Storefront) -> list[str]:
    drain = getattr(shop.notifier, "drain", None)
    return drain() if drain else []


def _render(shop: Storefront) -> StorefrontResponse:
    return StorefrontResponse.from_snapshot(shop.snapshot(), _drain(shop))


def _not_found(exc: ObjectNotFoundError) -> HTTPException:
    return HTTPException(status_code=404, detail=str(exc))


# --- Snapshot & catalogue ---


@storefront_router.get("/storefront", response_model=StorefrontResponse)
async def get_snapshot(shop: Storefront = Depends(get_storefront)) -> StorefrontResponse:
    return _render(shop)


@storefront_router.get("/products", response_model=list[ProductResponse])
async def list_products(shop: Storefront = Depends(get_storefront)) -> list[ProductResponse]:
    return [ProductResponse.from_product(product) for product in shop.catalogue]


@storefront_router.get("/products/{product_id}", response_model=ProductResponse)
async def get_product(product_id: int, shop: Storefront = Depends(get_storefront)) -> ProductResponse:
    try:
        return ProductResponse.from_product(shop.catalogue.require(product_id))
    except ObjectNotFoundError as exc:
        raise _not_found(exc) from exc


# --- Cart ---


@storefront_router.post("/cart/items", response_model=StorefrontResponse)
async def add_to_cart(body: AddToCartRequest, shop: Storefront = Depends(get_storefront)) -> StorefrontResponse:
    try:
        shop.add_to_cart(body.product_id)
    except ObjectNotFoundError as exc:
        raise _not_found(exc) from exc
    return _render(shop)


@storefront_router.put("/cart/items/{product_id}", response_model=StorefrontResponse)
async def update_quantity(
    product_id: int, body: UpdateQuantityRequest, shop: Storefront = Depends(get_storefront)
) -> StorefrontResponse:
    shop.update_quantity(product_id, body.quantity)
    return _render(shop)


@storefront_router.delete("/cart/items/{product_id}", response_model=StorefrontResponse)
async def remove_from_cart(product_id: int, shop: Storefront = Depends(get_storefront)) -> StorefrontResponse:
    shop.remove_from_cart(product_id)
    return _render(shop)


# --- Selection ---


@storefront_router.put("/selection", response_model=StorefrontResponse)
async def select_product(body: SelectProductRequest, shop: Storefront = Depends(get_storefront)) -> StorefrontResponse:
    try:
        shop.select_product(body.product_id)
    except ObjectNotFoundError as exc:
        raise _not_found(exc) from exc
    return _render(shop)


@storefront_router.delete("/selection", response_model=StorefrontResponse)
async def clear_selection(shop: Storefront = Depends(get_storefront)) -> StorefrontResponse:
    shop.clear_selection()
    return _render(shop)


@storefront_router.post("/selection/add-to-cart", response_model=StorefrontResponse)
async def add_selected_to_cart(shop: Storefront = Depends(get_storefront)) -> StorefrontResponse:
    shop.add_selected_to_cart_and_close()
    return _render(shop)


# --- Custom order ---


@storefront_router.put("/custom-order/dialog", response_model=StorefrontResponse)
async def set_custom_order_dialog(
    body: CustomOrderDialogRequest, shop: Storefront = Depends(get_storefront)
) -> StorefrontResponse:
    if body.open:
        shop.open_custom_order()
    else:
        shop.close_custom_order()
    return _render(shop)


@storefront_router.put("/custom-order/form", response_model=StorefrontResponse)
async def edit_custom_order(
    body: EditCustomOrderRequest, shop: Storefront = Depends(get_storefront)
) -> StorefrontResponse:
    shop.edit_custom_order(**body.model_dump(exclude_none=True))
    return _render(shop)


@storefront_router.post("/custom-order", status_code=201, response_model=CustomOrderReceiptResponse)
async def submit_custom_order(shop: Storefront = Depends(get_storefront)) -> CustomOrderReceiptResponse:
    try:
        reference = shop.submit_custom_order()
    except ValidationError as exc:
        raise HTTPException(status_code=422, detail=exc.messages) from exc
    if reference is None:
        raise HTTPException(status_code=409, detail="The custom-order dialog is not open")
    return CustomOrderReceiptResponse(reference=reference, notifications=_drain(shop))
