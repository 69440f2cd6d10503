from typing import List
from fastapi import APIRouter, Depends, Response, status
from bookmarket.database import EntityStore, get_store
from bookmarket.exceptions import NotFoundError
from bookmarket.models.user import User
from bookmarket.schemas.cart_schemas import (
    CartAddRequest,
    CartItemWithBook,
    CartSummary,
    CartUpdateRequest,
)
from bookmarket.services import cart_service
from bookmarket.utils.token import get_current_user  # JWT dependency


router = APIRouter()

# View Cart 

@router.get("/", response_model=List[CartItemWithBook])
def get_cart(
    store: EntityStore = Depends(get_store),
    current_user: User = Depends(get_current_user)
):
    return cart_service.get_cart(store, current_user.id)


@router.get("/summary", response_model=CartSummary)
def get_cart_summary(
    store: EntityStore = Depends(get_store),
    current_user: User = Depends(get_current_user)
):
    return cart_service.cart_summary(cart_service.get_cart(store, current_user.id))

# Add to Cart 

@router.post("/add", response_model=CartItemWithBook, status_code=status.HTTP_201_CREATED)
def add_to_cart(
    data: CartAddRequest,
    store: EntityStore = Depends(get_store),
    current_user: User = Depends(get_current_user)
):
    return cart_service.add_to_cart(store, current_user.id, data.book_id, data.quantity)

# Update Cart 

@router.put("/update/{item_id}", response_model=CartItemWithBook)
def update_cart_item(
    item_id: int,
    data: CartUpdateRequest,
    store: EntityStore = Depends(get_store),
    current_user: User = Depends(get_current_user)
):
    return cart_service.update_quantity(store, item_id, data.quantity, user_id=current_user.id)

# Remove Cart 

@router.delete("/remove/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_item(
    item_id: int,
    store: EntityStore = Depends(get_store),
    current_user: User = Depends(get_current_user)
):
    if not cart_service.remove_item(store, item_id, user_id=current_user.id):
        raise NotFoundError("Cart item not found", cart_item_id=item_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

# Clear Cart 

@router.delete("/clear", status_code=status.HTTP_204_NO_CONTENT)
def clear_cart_endpoint(
    store: EntityStore = Depends(get_store),
    current_user: User = Depends(get_current_user)
):
    cart_service.clear_cart(store, current_user.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
