from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    env: str = "local"

    secret_key: str = "change-me-in-production"
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 60

    # Load the admin account and sample listings on startup
    seed_sample_data: bool = True
    # Flip ordered books to out of stock once an order is written
    mark_sold_on_checkout: bool = False

    log_level: str = "INFO"

    cors_origins: List[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
        "http://127.0.0.1:5173",
    ]

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "allow"

settings = Settings()
