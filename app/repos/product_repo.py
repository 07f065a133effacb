# app/repos/product_repo.py
from app.data.models.product import ProductModel


class ProductRepo:
    def __init__(self, products: list[ProductModel] | None = None):
        self.products = products if products is not None else []

    def list_products(self) -> list[ProductModel]:
        return list(self.products)

    def get_product(self, product_id: int) -> ProductModel | None:
        return next((p for p in self.products if p.id == product_id), None)

    def list_by_category(self, category: str) -> list[ProductModel]:
        category = category.lower()
        return [p for p in self.products if p.category.lower() == category]

    def update_stock(self, product_id: int, stock: int) -> ProductModel | None:
        product = self.get_product(product_id)
        if product:
            product.stock = stock
        return product
