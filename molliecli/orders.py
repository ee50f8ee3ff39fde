"""Orders and their tabular display."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from molliecli.formatting import Amount, Displayable, PaginationLinks

_ORDER_COLS = (
    "RESOURCE",
    "ID",
    "OrderNumber",
    "Description",
    "ShippingAddress",
    "Amount",
    "PaidAt",
    "Status",
    "CREATED_AT",
)

_ORDER_COL_MAP = {
    "RESOURCE": "the resource name",
    "ID": "the order id",
    "OrderNumber": "the order number",
    "Description": "the Description",
    "ShippingAddress": "the shipping address",
    "Amount": "the order amount",
    "PaidAt": "the order paid at",
    "Status": "the order status",
    "CREATED_AT": "the order creation date",
}


@dataclass
class Order:
    """An order created through the Orders API."""

    resource: str = ""
    id: str = ""
    order_number: str = ""
    description: str = ""
    shipping_address: Any = None
    amount: Amount | None = None
    paid_at: datetime | None = None
    status: Any = ""
    created_at: datetime | None = None


@dataclass
class OrderList:
    """A page of orders."""

    count: int = 0
    orders: list[Order] = field(default_factory=list)
    links: PaginationLinks = field(default_factory=PaginationLinks)


def build_order_row(order: Order) -> dict[str, Any]:
    """The display row for one order; values are shown as they are."""
    return {
        "RESOURCE": order.resource,
        "ID": order.id,
        "OrderNumber": order.order_number,
        "Description": order.description,
        "ShippingAddress": order.shipping_address,
        "Amount": order.amount,
        "PaidAt": order.paid_at,
        "Status": order.status,
        "CREATED_AT": order.created_at,
    }


@dataclass
class MollieOrder(Displayable):
    """Displays a single order."""

    order: Order

    def kv(self) -> list[dict[str, Any]]:
        return [build_order_row(self.order)]

    def cols(self) -> list[str]:
        return list(_ORDER_COLS)

    def col_map(self) -> dict[str, str]:
        return dict(_ORDER_COL_MAP)


@dataclass
class MollieOrderList:
    """Rows for a list of orders."""

    order_list: OrderList

    def kv(self) -> list[dict[str, Any]]:
        """Return one row per order."""
        return [build_order_row(o) for o in self.order_list.orders]