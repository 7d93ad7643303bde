"""
Configuration settings for the Parcelly Backend.

This module handles application configuration using Pydantic settings.
"""

from decimal import Decimal
from typing import List, Optional
from urllib.parse import quote_plus

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings."""

    # Application
    app_name: str = "Parcelly Backend"
    api_version: str = "v1"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 5000
    log_level: str = "INFO"
    cors_origins: str = "*"

    # Database Configuration (MongoDB Atlas)
    mongodb_uri: Optional[str] = None
    db_user: str = ""
    db_pass: str = ""
    db_host: str = "cluster0.o4dtxo0.mongodb.net"
    db_name: str = "parcelDb"
    user_collection: str = "user"
    parcel_collection: str = "parcel"
    review_collection: str = "reviews"

    # Security Configuration (JWT)
    access_token_secret: str = "change-this-secret-in-production-min-32-chars"
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 60

    # Payments (Stripe)
    stripe_secret_key: str = ""
    payment_currency: str = "usd"
    minimum_charge: Decimal = Decimal("0.50")

    class Config:
        env_file = ".env"
        case_sensitive = False

    @property
    def database_uri(self) -> str:
        """Full connection string, assembled from credentials unless given outright."""
        if self.mongodb_uri:
            return self.mongodb_uri
        return (
            f"mongodb+srv://{quote_plus(self.db_user)}:{quote_plus(self.db_pass)}@{self.db_host}/"
            "?retryWrites=true&w=majority&appName=Cluster0"
        )

    @property
    def cors_origins_list(self) -> List[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


settings = Settings()
