import logging
from typing import Optional

from bookmarket.database import EntityStore
from bookmarket.exceptions import NotFoundError, ValidationError
from bookmarket.models.user import User
from bookmarket.schemas.user_schemas import UserRegister, UserUpdate
from bookmarket.utils.hash import hash_password, verify_password

logger = logging.getLogger(__name__)


def get_user_by_username(store: EntityStore, username: str) -> Optional[User]:
    username = username.lower()
    return store.first(User, lambda user: user.username.lower() == username)


def get_user_by_email(store: EntityStore, email: str) -> Optional[User]:
    email = email.lower()
    return store.first(User, lambda user: user.email.lower() == email)


def _check_unique(store: EntityStore, username: Optional[str], email: Optional[str], user_id: Optional[int] = None):
    if username:
        existing = get_user_by_username(store, username)
        if existing and existing.id != user_id:
            raise ValidationError("Username already exists")
    if email:
        existing = get_user_by_email(store, email)
        if existing and existing.id != user_id:
            raise ValidationError("Email already registered")


def register_user(store: EntityStore, payload: UserRegister) -> User:
    hashed = hash_password(payload.password)
    with store.transaction():
        _check_unique(store, payload.username, payload.email)
        user = store.create(User, {
            **payload.model_dump(exclude={"password"}),
            "password": hashed,
        })
    logger.info(f"Registered user {user.id} ({user.username})")
    return user


def authenticate(store: EntityStore, username: str, password: str) -> Optional[User]:
    user = get_user_by_username(store, username)
    if not user or not verify_password(password, user.password):
        return None
    return user


def update_user(store: EntityStore, user_id: int, payload: UserUpdate) -> User:
    changes = payload.model_dump(exclude_unset=True, exclude_none=True)
    if "password" in changes:
        changes["password"] = hash_password(changes["password"])

    with store.transaction():
        _check_unique(store, changes.get("username"), changes.get("email"), user_id)
        user = store.update(User, user_id, changes)
    if user is None:
        raise NotFoundError("User not found", user_id=user_id)
    return user
