# app/services/product_service.py
from app.data.models.product import ProductModel
from app.domain.errors import NotFoundError, ValidationFailed
from app.repos.product_repo import ProductRepo
from app.utils.logging import get_logger

logger = get_logger(__name__)


class ProductService:
    def __init__(self, repo: ProductRepo):
        self.repo = repo

    def list_products(self) -> list[ProductModel]:
        logger.info("Listing all products")
        return self.repo.list_products()

    def get_product(self, product_id: int) -> ProductModel:
        product = self.repo.get_product(product_id)
        if not product:
            raise NotFoundError("Product not found")
        logger.info(f"Product {product_id} requested: {product.name}")
        return product

    def list_by_category(self, category: str) -> list[ProductModel]:
        logger.info(f"Searching products in category: {category.lower()}")
        return self.repo.list_by_category(category)

    def update_stock(self, product_id: int, quantity: int) -> ProductModel:
        # stan ustawiany absolutnie, nie przyrostowo
        if not self.repo.get_product(product_id):
            raise NotFoundError("Product not found")
        if quantity < 0:
            raise ValidationFailed("Quantity cannot be negative")

        product = self.repo.update_stock(product_id, quantity)
        logger.info(f"Updated stock for product {product_id} to {quantity}")
        return product
