import asyncio
import contextlib
import logging

from fastapi import APIRouter, Depends, HTTPException, WebSocket, WebSocketDisconnect

from passcheck.core.config import Setting, get_setting
from passcheck.models.analysis import AnalysisResult, AnalyzeRequest
from passcheck.services.analyzer import analyze, analyze_with_breach
from passcheck.services.breach.base import BreachClient
from passcheck.services.breach.manager import get_breach_client
from passcheck.services.session import AnalysisSession

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/analyze", tags=["Analyzer"])


def error_body(code: str, message: str) -> dict:
    return {
        "error": {
            "code": code,
            "message": message,
        }
    }


def validation_error(code: str, message: str, status_code: int = 400):
    raise HTTPException(status_code=status_code, detail=error_body(code, message))


def password_too_long(password: str) -> bool:
    return len(password) > get_setting(Setting.PASSWORD_MAX_LENGTH)


def enforce_password_guardrails(password: str) -> str:
    if password_too_long(password):
        max_length = get_setting(Setting.PASSWORD_MAX_LENGTH)
        validation_error("PASSWORD_TOO_LONG", f"Password must be <= {max_length} characters")
    return password


# =========================================================
# REQUEST / RESPONSE
# =========================================================

@router.post("/local", response_model=AnalysisResult)
def analyze_local(request_data: AnalyzeRequest):
    password = enforce_password_guardrails(request_data.password)
    return analyze(password)


@router.post("/", response_model=AnalysisResult)
def analyze_full(
    request_data: AnalyzeRequest,
    client: BreachClient = Depends(get_breach_client),
):
    password = enforce_password_guardrails(request_data.password)

    try:
        return analyze_with_breach(password, client)
    except HTTPException:
        raise
    except Exception:
        logging.exception("Analyze failed")
        raise HTTPException(status_code=400, detail="Analyze failed")


# =========================================================
# LIVE STREAM (one text frame per input change)
# =========================================================

async def _send_frames(websocket: WebSocket, queue: asyncio.Queue) -> None:
    while True:
        frame = await queue.get()
        await websocket.send_json(frame)


@router.websocket("/stream")
async def analyze_stream(
    websocket: WebSocket,
    client: BreachClient = Depends(get_breach_client),
):
    await websocket.accept()

    queue: asyncio.Queue = asyncio.Queue()
    session = AnalysisSession(
        client,
        on_result=lambda result: queue.put_nowait(result.model_dump(mode="json")),
    )
    sender = asyncio.create_task(_send_frames(websocket, queue))

    try:
        while True:
            password = await websocket.receive_text()
            if password_too_long(password):
                max_length = get_setting(Setting.PASSWORD_MAX_LENGTH)
                queue.put_nowait(error_body("PASSWORD_TOO_LONG", f"Password must be <= {max_length} characters"))
                continue
            session.submit(password)
    except WebSocketDisconnect:
        logger.info("analyze_stream_closed generation=%s", session.generation)
    finally:
        sender.cancel()
        # starlette raises RuntimeError for a send after close
        with contextlib.suppress(asyncio.CancelledError, WebSocketDisconnect, RuntimeError):
            await sender
