# app/api/routers/orders.py
from fastapi import APIRouter, Depends

from app.api.deps import get_order_service, get_remote_user, require_admin
from app.domain.enums import PaymentStatus
from app.domain.schemas import ApiResponse, OrderCreate, OrderOut, OrderStatusIn
from app.services.order_service import OrderService

router = APIRouter(prefix="/api/orders", tags=["orders"])
test_router = APIRouter(prefix="/test", tags=["test"], include_in_schema=False)


@router.post("", response_model=ApiResponse[OrderOut], status_code=201)
def create_order(
    payload: OrderCreate,
    user: dict = Depends(get_remote_user),
    svc: OrderService = Depends(get_order_service),
):
    """
    Checkout: stany -> kwoty -> platnosc -> zmniejszenie stanow.
    Nieudana platnosc to nadal 201, zamowienie ma status cancelled.
    """
    order = svc.create_order(user["id"], payload)
    paid = order.payment_status == PaymentStatus.COMPLETED
    return {
        "success": True,
        "message": "Order created successfully" if paid else "Order created but payment failed",
        "data": OrderOut.model_validate(order),
    }


@router.get("", response_model=ApiResponse[list[OrderOut]])
def list_orders(
    user: dict = Depends(get_remote_user),
    svc: OrderService = Depends(get_order_service),
):
    orders = [OrderOut.model_validate(o) for o in svc.list_orders(user["id"])]
    return {"success": True, "data": orders, "count": len(orders)}


@router.get("/{order_id}", response_model=ApiResponse[OrderOut])
def get_order(
    order_id: str,
    user: dict = Depends(get_remote_user),
    svc: OrderService = Depends(get_order_service),
):
    return {"success": True, "data": OrderOut.model_validate(svc.get_order(order_id, user["id"]))}


@router.patch("/{order_id}/status", response_model=ApiResponse[OrderOut])
def update_order_status(
    order_id: str,
    payload: OrderStatusIn,
    user: dict = Depends(require_admin),
    svc: OrderService = Depends(get_order_service),
):
    order = svc.update_status(order_id, payload.status, user)
    return {
        "success": True,
        "message": "Order status updated",
        "data": OrderOut.model_validate(order),
    }


@test_router.post("/clear-orders", response_model=ApiResponse[None])
def clear_orders(svc: OrderService = Depends(get_order_service)):
    svc.clear_orders()
    return {"success": True, "message": "Orders cleared"}
