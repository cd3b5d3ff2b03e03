"""Order-related Pydantic schemas."""

from typing import List, Optional

from pydantic import BaseModel, Field

from credit_sync.domain.entities import Order, OrderItem, OrderStatus


class OrderItemSchema(BaseModel):
    """A single order line.

    Price and quantity are deliberately unconstrained here so that domain
    validation reports the violation.
    """

    id: str = Field(..., examples=["ITEM001"])
    name: str = Field(..., examples=["Keyboard"])
    price: float = Field(..., examples=[10.0])
    quantity: int = Field(..., examples=[1])
    description: str = ""

    def to_entity(self) -> OrderItem:
        return OrderItem(
            id=self.id,
            name=self.name,
            price=self.price,
            quantity=self.quantity,
            description=self.description,
        )


class OrderSchema(BaseModel):
    """Schema for order request bodies."""

    id: str = Field(..., min_length=1, max_length=64, examples=["ORD001"])
    customer_id: Optional[str] = Field(None, examples=["CUST001"])
    status: OrderStatus = OrderStatus.PENDING
    items: List[OrderItemSchema] = Field(default_factory=list)

    def to_entity(self) -> Order:
        return Order(
            id=self.id,
            customer_id=self.customer_id,
            status=self.status,
            items=[item.to_entity() for item in self.items],
        )


class OrderValidationResponseSchema(BaseModel):
    """Schema for POST /v1/orders/validate response body."""

    order_id: str
    valid: bool = True


class OrderProcessResponseSchema(BaseModel):
    """Schema for POST /v1/orders/process response body."""

    order_id: str
    status: OrderStatus
    total: float = Field(..., description="Sum of price x quantity over items")


class SyncReportSchema(BaseModel):
    """Schema for POST /v1/orders/sync response body."""

    fetched: int = Field(..., ge=0)
    persisted: int = Field(..., ge=0)
    skipped: int = Field(..., ge=0, description="Already persisted in an earlier pass")
    failed: int = Field(..., ge=0)
    aborted: bool = Field(..., description="True if the pending orders could not be fetched")
