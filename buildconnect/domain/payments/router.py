"""Payment router - checkout order endpoint"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from ...capabilities import PaymentGateway, get_payment_gateway
from ...services.razorpay_service import PaymentGatewayError
from .schemas import OrderCreate
from .service import PaymentService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Payments"])


def get_payment_service(gateway: PaymentGateway = Depends(get_payment_gateway)) -> PaymentService:
    """Dependency injection for PaymentService"""
    return PaymentService(gateway)


@router.post("/create-order")
async def create_order(
    data: OrderCreate,
    service: PaymentService = Depends(get_payment_service),
):
    """Create a payment order; gateway errors are passed through with their own status"""
    try:
        return await service.create_order(data.amount)
    except PaymentGatewayError as e:
        logger.error(f"❌ Payment gateway error: {e.status_code} {e.error}")
        return JSONResponse(status_code=e.status_code, content=e.error)
