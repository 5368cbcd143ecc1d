# api/v1/nutrition.py
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from config import Settings, get_settings
from core.meal_planner import generate_plan
from services.openai_chat import ChatCompletionClient
from api.v1.schemas import ErrorResponse, PlanRequest, PlanResponse

router = APIRouter()
Logger = logging.getLogger(__name__)


def get_chat_client(settings: Settings = Depends(get_settings)) -> ChatCompletionClient:
    return ChatCompletionClient.from_settings(settings)


@router.post(
    "",
    response_model=PlanResponse,
    status_code=status.HTTP_200_OK,
    responses={
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def create_plan(
    body: PlanRequest,
    settings: Settings = Depends(get_settings),
    chat: ChatCompletionClient = Depends(get_chat_client),
):
    # every failure past validation is a 500 carrying the exception text
    try:
        plan = await generate_plan(body, settings, chat)
    except Exception as exc:
        Logger.exception("Nutrition API error")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": str(exc) or "Unknown error"},
        )
    return PlanResponse(plan=plan)
