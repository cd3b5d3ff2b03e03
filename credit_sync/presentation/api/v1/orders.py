"""Order validation, processing and sync API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from credit_sync.application.services import OrderSyncJob
from credit_sync.core.dependencies import get_order_sync_job
from credit_sync.presentation.schemas import (
    ErrorResponseSchema,
    OrderProcessResponseSchema,
    OrderSchema,
    OrderValidationResponseSchema,
    SyncReportSchema,
)

orders_router = APIRouter(
    prefix="/v1/orders",
    responses={
        422: {"model": ErrorResponseSchema, "description": "Order failed validation"},
    },
)


@orders_router.post(
    "/validate",
    response_model=OrderValidationResponseSchema,
    summary="Validate Order",
    description="Check an order against the domain rules without storing it.",
)
async def validate_order(
    request: OrderSchema,
    job: Annotated[OrderSyncJob, Depends(get_order_sync_job)],
) -> OrderValidationResponseSchema:
    order = request.to_entity()
    job.validate_order(order)
    return OrderValidationResponseSchema(order_id=order.id, valid=True)


@orders_router.post(
    "/process",
    response_model=OrderProcessResponseSchema,
    summary="Process Order",
    description="""
    Validate an order, then advance it through processing.

    Orders above the manual approval threshold end in pending_approval
    and are not stored. A storage failure ends the order in error.
    """,
)
async def process_order(
    request: OrderSchema,
    job: Annotated[OrderSyncJob, Depends(get_order_sync_job)],
) -> OrderProcessResponseSchema:
    order = request.to_entity()
    job.validate_order(order)
    await job.process_order(order)
    return OrderProcessResponseSchema(
        order_id=order.id,
        status=order.status,
        total=order.total,
    )


@orders_router.post(
    "/sync",
    response_model=SyncReportSchema,
    summary="Run Order Sync",
    description="Run one sync pass against the external order source.",
)
async def run_sync(
    job: Annotated[OrderSyncJob, Depends(get_order_sync_job)],
) -> SyncReportSchema:
    report = await job.run()
    return SyncReportSchema(**report.to_dict())
