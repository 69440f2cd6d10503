from fastapi import APIRouter, Depends, HTTPException, status
from bookmarket.database import EntityStore, get_store
from bookmarket.models.user import UserPublic
from bookmarket.schemas.user_schemas import UserRegister, UserLogin, Token
from bookmarket.services.user_service import authenticate, register_user
from bookmarket.utils.token import create_access_token


router = APIRouter()


# -------- AUTH ROUTES --------

@router.post("/register", response_model=UserPublic, status_code=status.HTTP_201_CREATED)
def register(payload: UserRegister, store: EntityStore = Depends(get_store)):
    return register_user(store, payload)


@router.post("/login", response_model=Token)
def login(payload: UserLogin, store: EntityStore = Depends(get_store)):
    user = authenticate(store, payload.username, payload.password)

    if not user:
        raise HTTPException(401, "Invalid username or password")

    token = create_access_token({"user_id": user.id})
    return Token(access_token=token, token_type="bearer")


@router.post("/logout")
def logout():
    return {"message": "Logout successful"}
