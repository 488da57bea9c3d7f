from fastapi import APIRouter

from app.api.routes import reminders, webhook

api_router = APIRouter()

# API routes (all have /api/v1 prefix from the app factory)
api_router.include_router(webhook.router, tags=["webhook"])
api_router.include_router(reminders.router)
