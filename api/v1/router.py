# api/v1/router.py
from fastapi import APIRouter

from . import nutrition

api_router = APIRouter()

api_router.include_router(nutrition.router, prefix="/nutrition", tags=["Nutrition"])
