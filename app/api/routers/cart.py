# app/api/routers/cart.py
from fastapi import APIRouter, Depends

from app.api.deps import get_cart_service, get_remote_user
from app.domain.schemas import (
    ApiResponse,
    CartAddOut,
    CartItemIn,
    CartItemOut,
    CartOut,
    CartRemoveOut,
)
from app.services.cart_service import CartService

router = APIRouter(prefix="/api/cart", tags=["cart"])


@router.get("", response_model=ApiResponse[CartOut])
def get_cart(
    user: dict = Depends(get_remote_user),
    svc: CartService = Depends(get_cart_service),
):
    return {"success": True, "data": CartOut.model_validate(svc.get_cart(user["id"]))}


@router.post("/items", response_model=ApiResponse[CartAddOut])
def add_item(
    payload: CartItemIn,
    user: dict = Depends(get_remote_user),
    svc: CartService = Depends(get_cart_service),
):
    cart, added = svc.add_item(user["id"], payload.product_id, payload.quantity)
    return {
        "success": True,
        "message": "Item added to cart",
        "data": CartAddOut(
            cart=CartOut.model_validate(cart),
            added_item=CartItemOut.model_validate(added),
        ),
    }


@router.delete("/items/{product_id}", response_model=ApiResponse[CartRemoveOut])
def remove_item(
    product_id: int,
    user: dict = Depends(get_remote_user),
    svc: CartService = Depends(get_cart_service),
):
    cart, removed = svc.remove_item(user["id"], product_id)
    return {
        "success": True,
        "message": "Item removed from cart",
        "data": CartRemoveOut(
            cart=CartOut.model_validate(cart),
            removed_item=CartItemOut.model_validate(removed),
        ),
    }


@router.delete("", response_model=ApiResponse[None])
def clear_cart(
    user: dict = Depends(get_remote_user),
    svc: CartService = Depends(get_cart_service),
):
    svc.clear_cart(user["id"])
    return {"success": True, "message": "Cart cleared"}
