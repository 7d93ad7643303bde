"""
API Router.

Aggregates all API endpoints. Paths are unversioned; the web client calls
them at the root.
"""

from fastapi import APIRouter
from parcelly.app.api.endpoints import auth, parcels, payments, reviews, users

router = APIRouter()

# Token issuing
router.include_router(auth.router)

# Parcels
router.include_router(parcels.router)

# Users and role promotion
router.include_router(users.router)

# Delivery man reviews
router.include_router(reviews.router)

# Stripe payment intents
router.include_router(payments.router)
