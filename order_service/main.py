"""
main.py — FastAPI Entry Point for the Order Service

This module exposes order processing over HTTP.

Responsibilities:
    • Accept new orders via HTTP API and process them synchronously
    • Map strategy names in the request to strategy instances
    • Provide system health information
"""

from fastapi import FastAPI, HTTPException

from .config import DEFAULT_NOTIFICATION_MESSAGE
from .errors import OrderServiceError
from .logging_config import get_logger, setup_logging
from .models import NewOrderRequest, Order, OrderResult
from .registry import build_delivery, build_discount, build_notifier, build_payment
from .reporting import ActionReporter
from .workflow import process_order

# Initialization
# Configure logging and initialize FastAPI app
setup_logging()
log = get_logger(__name__)
app = FastAPI(title="Order Service")


# API Endpoint: submit and process an order
@app.post("/v1/orders", response_model=OrderResult)
def submit_order(request: NewOrderRequest):
    """
    Receives a new order, processes it and returns the outcome.

    Items are validated by the `NewOrderRequest` model; strategy names are
    restricted to the registered ones, so FastAPI answers 422 for unknown
    names before this handler runs.

    Args:
        request (NewOrderRequest): Validated order payload.

    Returns:
        OrderResult: Subtotal, total and the reported actions.

    Raises:
        HTTPException(422): If the order or its discount is rejected.
    """
    reporter = ActionReporter()
    try:
        order = Order(
            payment_method=build_payment(request.payment, reporter),
            delivery_method=build_delivery(request.delivery, reporter),
            notifier=build_notifier(request.notification, reporter),
        )
        log_prefix = f"[Order: {order.order_id}]"
        log.info(f"{log_prefix} New order received via API ({len(request.items)} items).")

        for item in request.items:
            order.add_item(item.name, item.price, item.quantity)
        discount = build_discount(request.discount.kind, request.discount.value)

        return process_order(
            order,
            discount,
            message=request.message if request.message is not None else DEFAULT_NOTIFICATION_MESSAGE,
            reporter=reporter,
        )
    except OrderServiceError as e:
        log.warning(f"Order rejected: {e}")
        raise HTTPException(status_code=422, detail=str(e))


# Health Check Endpoint
@app.get("/health")
def health_check():
    """
    Simple health check endpoint.

    Returns:
        dict: A basic JSON object indicating service availability.
    """
    return {"status": "ok"}
