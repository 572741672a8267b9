"""
Main API router
Combines all handlers
"""
from fastapi import APIRouter

from receipt_processor.api.routes import receipts, health

api_router = APIRouter()

api_router.include_router(receipts.router)
api_router.include_router(health.router)
