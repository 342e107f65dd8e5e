# app/action/routes.py
from typing import Any

from fastapi import APIRouter, Depends, Request, Response, status
from starlette.concurrency import run_in_threadpool

from app.action.schemas import ActionResult
from app.action.services import ACTIONS, dispatch
from app.core.session import SessionState, get_session

router = APIRouter(tags=["Actions"])


async def _read_body(request: Request) -> dict[str, Any] | None:
    if request.headers.get("content-type", "").startswith("application/json"):
        try:
            data = await request.json()
        except ValueError:
            return None
        return data if isinstance(data, dict) else None

    form = await request.form()
    return {key: value for key, value in form.items() if isinstance(value, str)}


@router.post("/", response_model=ActionResult, response_model_exclude_none=True)
async def perform(
    request: Request,
    response: Response,
    session: SessionState = Depends(get_session),
):
    data = await _read_body(request)
    if data is None:
        response.status_code = status.HTTP_400_BAD_REQUEST
        return ActionResult(success=False, message="Invalid request")

    action = data.pop("action", None)
    if not isinstance(action, str) or action not in ACTIONS:
        response.status_code = status.HTTP_400_BAD_REQUEST
        return ActionResult(success=False, message="Unknown action")

    # bcrypt hashing is slow; keep it off the event loop
    return await run_in_threadpool(dispatch, session, action, data)
