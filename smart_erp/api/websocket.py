"""WebSocket endpoint for real-time notification delivery."""

import asyncio
import logging

from fastapi import APIRouter, Query, WebSocket, WebSocketDisconnect

from smart_erp.database import SessionLocal
from smart_erp.exceptions import Unauthenticated
from smart_erp.services.auth import decode_access_token, get_user_by_id
from smart_erp.services.realtime import RealtimeService, notification_channel

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/ws", tags=["websocket"])

PING_INTERVAL_SECONDS = 30


@router.websocket("/notifications")
async def websocket_notifications(
    websocket: WebSocket,
    token: str = Query(...),
) -> None:
    """Push the current user's notification events as they happen.

    Authentication via token query parameter (browsers can't set headers on
    WebSocket upgrades). Clients that don't connect keep polling the REST feed.
    """
    try:
        user_id = decode_access_token(token)["sub"]
    except Unauthenticated:
        await websocket.close(code=4001, reason="Invalid token")
        return

    # Manual DB session; only needed for the account check
    db = SessionLocal()
    try:
        user = get_user_by_id(db, user_id)
    finally:
        db.close()
    if user is None:
        await websocket.close(code=4001, reason="User not found")
        return

    realtime_service = RealtimeService()
    try:
        await websocket.accept()
        logger.info(f"WebSocket connected: user={user_id}")

        async def handle_messages() -> None:
            """Receive events from Redis and forward them to the socket."""
            async for message in realtime_service.subscribe(notification_channel(user_id)):
                try:
                    await websocket.send_json(message)
                except WebSocketDisconnect:
                    break
                except Exception as e:
                    logger.error(f"Error sending WebSocket message: {e}")
                    break

        async def handle_ping() -> None:
            """Send periodic pings to keep the connection alive."""
            while True:
                try:
                    await asyncio.sleep(PING_INTERVAL_SECONDS)
                    await websocket.send_json({"type": "ping"})
                except Exception:
                    break

        async def handle_client() -> None:
            """Drain client frames (pong replies) until it disconnects."""
            while True:
                try:
                    await websocket.receive_json()
                except WebSocketDisconnect:
                    break
                except Exception:
                    break

        tasks = [
            asyncio.create_task(handle_messages()),
            asyncio.create_task(handle_ping()),
            asyncio.create_task(handle_client()),
        ]
        # Whichever side ends first tears the connection down
        done, pending = await asyncio.wait(tasks, return_when=asyncio.FIRST_COMPLETED)
        for task in done:
            error = task.exception()
            if error is not None:
                logger.error(
                    f"WebSocket handler failed for user={user_id}: {error}", exc_info=error
                )
        for task in pending:
            task.cancel()
        await asyncio.gather(*pending, return_exceptions=True)

    except WebSocketDisconnect:
        logger.info(f"WebSocket disconnected: user={user_id}")
    except Exception as e:
        logger.error(f"WebSocket error: {e}", exc_info=True)
    finally:
        await realtime_service.cleanup()
