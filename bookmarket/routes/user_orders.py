from typing import List
from fastapi import APIRouter, Depends
from bookmarket.database import EntityStore, get_store
from bookmarket.models.user import User
from bookmarket.schemas.orders_schemas import OrderWithItems
from bookmarket.services.order_service import get_order, list_orders
from bookmarket.utils.token import get_current_user

router = APIRouter()


@router.get("/", response_model=List[OrderWithItems])
def my_orders(
    store: EntityStore = Depends(get_store),
    current_user: User = Depends(get_current_user)
):
    return list_orders(store, current_user.id)


@router.get("/{order_id}", response_model=OrderWithItems)
def order_detail(
    order_id: int,
    store: EntityStore = Depends(get_store),
    current_user: User = Depends(get_current_user)
):
    return get_order(store, order_id, user_id=current_user.id)
