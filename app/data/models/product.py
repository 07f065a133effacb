from dataclasses import dataclass
from decimal import Decimal


@dataclass
class ProductModel:
    id: int
    name: str
    price: Decimal
    category: str
    stock: int
    description: str = ""
