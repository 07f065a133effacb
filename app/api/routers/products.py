# app/api/routers/products.py
from fastapi import APIRouter, Depends

from app.api.deps import get_product_service
from app.domain.schemas import ApiResponse, CategoryResponse, ProductOut, StockUpdateIn
from app.services.product_service import ProductService

router = APIRouter(prefix="/api/products", tags=["products"])


@router.get("", response_model=ApiResponse[list[ProductOut]])
def list_products(svc: ProductService = Depends(get_product_service)):
    products = [ProductOut.model_validate(p) for p in svc.list_products()]
    return {"success": True, "data": products, "count": len(products)}


@router.get("/category/{category}", response_model=CategoryResponse)
def list_by_category(category: str, svc: ProductService = Depends(get_product_service)):
    products = [ProductOut.model_validate(p) for p in svc.list_by_category(category)]
    return {
        "success": True,
        "data": products,
        "count": len(products),
        "category": category.lower(),
    }


@router.get("/{product_id}", response_model=ApiResponse[ProductOut])
def get_product(product_id: int, svc: ProductService = Depends(get_product_service)):
    return {"success": True, "data": ProductOut.model_validate(svc.get_product(product_id))}


@router.api_route("/{product_id}/stock", methods=["PATCH", "PUT"], response_model=ApiResponse[ProductOut])
def update_stock(
    product_id: int,
    payload: StockUpdateIn,
    svc: ProductService = Depends(get_product_service),
):
    product = svc.update_stock(product_id, payload.quantity)
    return {
        "success": True,
        "message": "Stock updated successfully",
        "data": ProductOut.model_validate(product),
    }
