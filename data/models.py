from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Credentials:
    username: Optional[str]
    password: Optional[str]


@dataclass(frozen=True)
class InvalidLoginCase:
    username: Optional[str]
    password: Optional[str]
    expected_error: str


@dataclass(frozen=True)
class EdgeCaseLogin:
    username: str
    password: str
    description: str


@dataclass(frozen=True)
class CheckoutInfo:
    first_name: str
    last_name: str
    postal_code: str


@dataclass(frozen=True)
class Product:
    """inventory/订单确认页面读取的商品信息，price 保留页面原文（如 '$29.99'）"""
    name: str
    price: str


@dataclass(frozen=True)
class CartItem:
    name: str
    price: str
    quantity: int


@dataclass(frozen=True)
class PriceSummary:
    subtotal: float
    tax: float
    total: float
