from fastapi import APIRouter, Depends
from bookmarket.database import EntityStore, get_store
from bookmarket.models.user import User, UserPublic
from bookmarket.schemas.user_schemas import UserUpdate
from bookmarket.services.user_service import update_user
from bookmarket.utils.token import get_current_user

router = APIRouter()


# -------- USER PROFILE --------

@router.get("/me", response_model=UserPublic)
def get_my_profile(current_user: User = Depends(get_current_user)):
    return current_user


@router.put("/update-profile", response_model=UserPublic)
def update_user_profile(
    payload: UserUpdate,
    store: EntityStore = Depends(get_store),
    current_user: User = Depends(get_current_user)
):
    return update_user(store, current_user.id, payload)
