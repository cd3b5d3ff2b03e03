"""Order sync job - ingests, validates and processes orders."""

from typing import Optional

import structlog

from credit_sync.application.dto import SyncReport
from credit_sync.core.config import settings
from credit_sync.core.metrics import record_order_processed, record_sync_run
from credit_sync.domain.entities import Order, OrderStatus
from credit_sync.domain.exceptions import (
    ExternalAPIException,
    InvalidArgumentException,
    OrderValidationException,
    PersistenceException,
)
from credit_sync.domain.interfaces import OrderRepository, OrderSourceClient
from credit_sync.infrastructure.cache import DedupCache

logger = structlog.get_logger(__name__)

PROCESSED_MARKER = True


class OrderSyncJob:
    """
    Synchronizes pending orders from the external source into the store.

    Three independent entry points:
    - run(): one fetch-and-persist pass, deduplicated through the cache
    - process_order(): single-order status transition and persistence
    - validate_order(): pure domain validation

    The cache is owned by the caller. Jobs that share a cache also share
    its per-key locks, so an order id is persisted at most once even when
    passes overlap.
    """

    def __init__(
        self,
        order_source: OrderSourceClient,
        order_repository: OrderRepository,
        cache: DedupCache,
        manual_approval_threshold: float | None = None,
        log=None,
    ):
        self._source = order_source
        self._repo = order_repository
        self._cache = cache
        self._manual_approval_threshold = (
            manual_approval_threshold
            if manual_approval_threshold is not None
            else settings.order_manual_approval_threshold
        )
        self._log = log or logger

    async def run(self) -> SyncReport:
        """
        Run one sync pass.

        A failed fetch aborts the pass without touching any order; the
        next scheduled pass retries. A failed save is logged and the
        order is left uncached so a later pass retries it.
        """
        report = SyncReport()

        try:
            orders = await self._source.fetch_pending()
        except ExternalAPIException as e:
            self._log.error(
                "order_fetch_failed",
                error=e.message,
                error_code=e.code,
            )
            report.aborted = True
            record_sync_run(aborted=True, persisted=0, skipped=0, failed=0)
            return report

        report.fetched = len(orders)

        for order in orders:
            async with self._cache.key_lock(order.id):
                if self._cache.contains(order.id):
                    report.skipped += 1
                    continue

                try:
                    await self._repo.save(order)
                except PersistenceException as e:
                    self._log.error(
                        "order_save_failed",
                        order_id=order.id,
                        error=e.message,
                    )
                    report.failed += 1
                    continue

                self._cache.put(order.id, PROCESSED_MARKER)
                report.persisted += 1

        self._log.info("order_sync_completed", **report.to_dict())
        record_sync_run(
            aborted=False,
            persisted=report.persisted,
            skipped=report.skipped,
            failed=report.failed,
        )
        return report

    async def process_order(self, order: Optional[Order]) -> None:
        """
        Advance a single order through its processing transition.

        Cancelled orders are left untouched. Orders above the manual
        approval threshold are parked in PENDING_APPROVAL and not saved.
        Everything else moves to PROCESSING and is saved; if the save
        fails the order ends in ERROR.
        """
        if order is None:
            self._log.warning("null_order_process_attempt")
            record_order_processed("skipped")
            return

        log = self._log.bind(order_id=order.id)

        if order.status == OrderStatus.CANCELLED:
            log.info("cancelled_order_skipped")
            record_order_processed("skipped")
            return

        if order.total > self._manual_approval_threshold:
            order.status = OrderStatus.PENDING_APPROVAL
            log.info(
                "order_requires_manual_approval",
                total=order.total,
                threshold=self._manual_approval_threshold,
            )
            record_order_processed("pending_approval")
            return

        order.status = OrderStatus.PROCESSING
        async with self._cache.key_lock(order.id):
            try:
                await self._repo.save(order)
            except PersistenceException as e:
                order.status = OrderStatus.ERROR
                log.error("order_save_failed", error=e.message)
                record_order_processed("error")
                return

            self._cache.put(order.id, PROCESSED_MARKER)

        log.info("order_processed", total=order.total)
        record_order_processed("processing")

    def validate_order(self, order: Order) -> None:
        """
        Check an order against the domain rules.

        Raises:
            InvalidArgumentException: If no order is given
            OrderValidationException: On the first rule violated, checking
                customer id, then item presence, then each item in order
        """
        if order is None:
            raise InvalidArgumentException("Order cannot be null")

        if not order.customer_id:
            raise OrderValidationException("Customer ID is required", order.id)

        if not order.items:
            raise OrderValidationException(
                "Order must have at least one item", order.id
            )

        for item in order.items:
            if item.quantity <= 0:
                raise OrderValidationException(
                    "Item quantity must be greater than 0", order.id
                )
            if item.price < 0:
                raise OrderValidationException(
                    "Item price cannot be negative", order.id
                )
