from fastapi import APIRouter, Depends
from datetime import datetime

from bookmarket.database import EntityStore, get_store
from bookmarket.models import Book, Order, User

router = APIRouter()

@router.get("/check")
def health_check(store: EntityStore = Depends(get_store)):
    return {
        "status": "ok",
        "store": {
            "users": store.count(User),
            "books": store.count(Book),
            "orders": store.count(Order),
        },
        "timestamp": datetime.utcnow().isoformat()
    }
