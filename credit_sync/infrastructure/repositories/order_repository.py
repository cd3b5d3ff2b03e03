"""SQLAlchemy implementation of OrderRepository."""

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.orm import selectinload

from credit_sync.domain.entities import Order, OrderItem, OrderStatus
from credit_sync.domain.exceptions import (
    OrderNotFoundException,
    PersistenceException,
)
from credit_sync.domain.interfaces import OrderRepository
from credit_sync.infrastructure.database.models import OrderItemModel, OrderModel


class SqlAlchemyOrderRepository(OrderRepository):
    """
    Relational implementation of the Order repository.

    Every operation runs in its own session and transaction, so a failed
    save never affects other orders written by the same caller.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    async def save(self, order: Order) -> Order:
        """Persist a new order and its items."""
        if order is None:
            raise PersistenceException("Cannot save null order")
        self._check_id(order.id)

        try:
            async with self._session_factory() as session:
                async with session.begin():
                    existing = await session.get(OrderModel, order.id)
                    if existing is not None:
                        raise PersistenceException(f"Order already exists: {order.id}")
                    session.add(self._to_model(order))
        except IntegrityError as e:
            raise PersistenceException(f"Order already exists: {order.id}") from e
        except SQLAlchemyError as e:
            raise PersistenceException(f"Failed to save order {order.id}: {e}") from e

        return order

    async def get_by_id(self, order_id: str) -> Order:
        """Retrieve an order with its items."""
        self._check_id(order_id)

        try:
            async with self._session_factory() as session:
                model = await self._load(session, order_id)
                return self._to_entity(model)
        except SQLAlchemyError as e:
            raise PersistenceException(f"Failed to load order {order_id}: {e}") from e

    async def update_status(self, order_id: str, status: OrderStatus) -> None:
        """Update the status of a stored order."""
        self._check_id(order_id)
        if status is None:
            raise PersistenceException("Status cannot be null")

        try:
            async with self._session_factory() as session:
                async with session.begin():
                    model = await self._load(session, order_id)
                    model.status = OrderStatus(status).value
        except SQLAlchemyError as e:
            raise PersistenceException(f"Failed to update order {order_id}: {e}") from e

    async def delete(self, order_id: str) -> None:
        """Delete a stored order and its items."""
        self._check_id(order_id)

        try:
            async with self._session_factory() as session:
                async with session.begin():
                    model = await self._load(session, order_id)
                    await session.delete(model)
        except SQLAlchemyError as e:
            raise PersistenceException(f"Failed to delete order {order_id}: {e}") from e

    @staticmethod
    def _check_id(order_id: str | None) -> None:
        if not order_id:
            raise PersistenceException("Order ID cannot be null or empty")

    async def _load(self, session: AsyncSession, order_id: str) -> OrderModel:
        stmt = (
            select(OrderModel)
            .options(selectinload(OrderModel.items))
            .where(OrderModel.id == order_id)
        )
        result = await session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            raise OrderNotFoundException(order_id)

        return model

    def _to_model(self, order: Order) -> OrderModel:
        model = OrderModel(
            id=order.id,
            customer_id=order.customer_id,
            status=order.status.value,
            total=order.total,
        )

        for position, item in enumerate(order.items):
            model.items.append(
                OrderItemModel(
                    position=position,
                    item_id=item.id,
                    name=item.name,
                    price=item.price,
                    quantity=item.quantity,
                    description=item.description or "",
                )
            )

        return model

    def _to_entity(self, model: OrderModel) -> Order:
        """Convert database model to domain entity."""
        items = [
            OrderItem(
                id=item.item_id,
                name=item.name,
                price=item.price,
                quantity=item.quantity,
                description=item.description,
            )
            for item in model.items
        ]

        return Order(
            id=model.id,
            customer_id=model.customer_id,
            status=OrderStatus(model.status),
            items=items,
        )
