import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager

from bookmarket.config import settings
from bookmarket.database import create_store
from bookmarket.exceptions import MarketplaceError
from bookmarket.routes import (
    auth,
    users,
    books,
    book_attributes,
    cart,
    checkout,
    user_orders,
    health,
)

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # State is process-local; sample data only in local runs
    app.state.store = create_store(seed=settings.seed_sample_data)
    logger.info(f"Entity store ready (env={settings.env})")
    yield

app = FastAPI(title="Used Book Marketplace API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(MarketplaceError)
async def marketplace_error_handler(request: Request, exc: MarketplaceError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


app.include_router(auth.router, prefix="/auth", tags=["Authentication"])
app.include_router(users.router, prefix="/users", tags=["Users"])
app.include_router(books.router, prefix="/books", tags=["Books"])
app.include_router(book_attributes.router, prefix="/book-attributes", tags=["Book Attributes"])
app.include_router(cart.router, prefix="/cart", tags=["Cart"])
app.include_router(checkout.router, prefix="/checkout", tags=["Checkout"])
app.include_router(user_orders.router, prefix="/orders", tags=["Orders"])
app.include_router(health.router, prefix="/health", tags=["Health"])


@app.get("/")
def root():
    return {
        "auth_endpoints": [
            "/auth/register", "/auth/login", "/auth/logout"
        ],
        "user_endpoints": [
            "/users/me", "/users/update-profile"
        ],
        "book_endpoints": [
            "/books", "/books/mine", "/books/{book_id}", "/book-attributes"
        ],
        "cart": [
            "/cart", "/cart/summary", "/cart/add", "/cart/update/{id}",
            "/cart/remove/{id}", "/cart/clear"
        ],
        "orders": [
            "/checkout/place-order", "/orders", "/orders/{order_id}"
        ]
    }
