# app/product_service/main.py
import uvicorn
from fastapi import FastAPI

from app.api import create_service_app
from app.api.routers import products
from app.data.models.product import ProductModel
from app.data.seed import seed_products
from app.repos.product_repo import ProductRepo
from app.utils.settings import PRODUCT_SERVICE_PORT


def create_app(products_seed: list[ProductModel] | None = None) -> FastAPI:
    app = create_service_app("product-service", "Product Service", [products.router])
    app.state.product_repo = ProductRepo(seed_products() if products_seed is None else products_seed)
    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=PRODUCT_SERVICE_PORT)
