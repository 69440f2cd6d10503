from fastapi import APIRouter, Depends, status
from bookmarket.config import settings
from bookmarket.database import EntityStore, get_store
from bookmarket.models.user import User
from bookmarket.schemas.orders_schemas import OrderWithItems, PlaceOrderRequest
from bookmarket.services.order_service import place_order
from bookmarket.utils.token import get_current_user

router = APIRouter()


#Order Confirmation Page

@router.post("/place-order", response_model=OrderWithItems, status_code=status.HTTP_201_CREATED)
def place_order_endpoint(
    data: PlaceOrderRequest,
    store: EntityStore = Depends(get_store),
    current_user: User = Depends(get_current_user)
):
    # payment is simulated; the order is written as pending
    return place_order(
        store,
        current_user.id,
        data.shipping_address,
        mark_sold=settings.mark_sold_on_checkout,
    )
