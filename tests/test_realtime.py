"""Tests for real-time notification delivery."""

import json
import logging
import threading
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from starlette.websockets import WebSocketDisconnect

import smart_erp.services.realtime as realtime_module
from smart_erp.services.auth import create_access_token, create_password_reset_token
from smart_erp.services.realtime import (
    NotificationEventType,
    RealtimeService,
    get_sync_redis,
    notification_channel,
    publish_notification_event,
)


class TestNotificationEventType:
    def test_event_types_exist(self):
        """Verify all notification event types are defined."""
        assert NotificationEventType.NOTIFICATION_CREATED == "notification_created"
        assert NotificationEventType.NOTIFICATION_READ == "notification_read"
        assert NotificationEventType.NOTIFICATIONS_ALL_READ == "notifications_all_read"


class TestGetSyncRedis:
    def test_creates_redis_client(self):
        """Test that get_sync_redis creates a Redis client."""
        realtime_module._sync_redis = None

        with patch("smart_erp.services.realtime.redis.from_url") as mock_from_url:
            mock_client = MagicMock()
            mock_from_url.return_value = mock_client

            result = get_sync_redis()

            assert result == mock_client
            mock_from_url.assert_called_once()

    def test_reuses_existing_client(self, mock_redis):
        """Test that get_sync_redis reuses existing client."""
        with patch("smart_erp.services.realtime.redis.from_url") as mock_from_url:
            result = get_sync_redis()

            assert result == mock_redis
            mock_from_url.assert_not_called()


class TestPublishNotificationEvent:
    def test_publishes_event_to_users_channel(self, mock_redis):
        """Test that events go to the owner's channel."""
        publish_notification_event(
            123, NotificationEventType.NOTIFICATION_READ, {"notification_id": 456}
        )

        mock_redis.publish.assert_called_once()
        channel, payload = mock_redis.publish.call_args.args
        assert channel == "notifications:123"
        assert channel == notification_channel(123)

        message = json.loads(payload)
        assert message["type"] == "notification_read"
        assert message["user_id"] == 123
        assert message["data"] == {"notification_id": 456}
        assert "timestamp" in message

    def test_publishes_event_without_data(self, mock_redis):
        publish_notification_event(123, NotificationEventType.NOTIFICATIONS_ALL_READ)

        message = json.loads(mock_redis.publish.call_args.args[1])
        assert message["data"] == {}

    def test_handles_redis_error_gracefully(self, mock_redis):
        """Redis errors must not reach the caller."""
        mock_redis.publish.side_effect = Exception("Redis connection failed")

        publish_notification_event(123, NotificationEventType.NOTIFICATION_CREATED, {"id": 1})


class TestRealtimeService:
    def test_init(self):
        service = RealtimeService()
        assert service._redis is None
        assert service._pubsub is None

    @pytest.mark.asyncio
    async def test_get_redis_creates_connection(self):
        service = RealtimeService()

        with patch("smart_erp.services.realtime.aioredis.from_url") as mock_from_url:
            mock_redis = AsyncMock()
            mock_from_url.return_value = mock_redis

            result = await service._get_redis()

            assert result == mock_redis
            mock_from_url.assert_called_once()

    @pytest.mark.asyncio
    async def test_cleanup_closes_connections(self):
        service = RealtimeService()
        mock_redis = AsyncMock()
        mock_pubsub = AsyncMock()
        service._redis = mock_redis
        service._pubsub = mock_pubsub

        await service.cleanup()

        mock_pubsub.close.assert_called_once()
        mock_redis.close.assert_called_once()

    @pytest.mark.asyncio
    async def test_cleanup_handles_no_connections(self):
        service = RealtimeService()

        # Should not raise
        await service.cleanup()

    @pytest.mark.asyncio
    async def test_subscribe_skips_control_and_invalid_messages(self):
        """Subscribe confirmations and bad JSON are dropped; events are parsed."""
        service = RealtimeService()

        mock_redis = MagicMock()
        mock_pubsub = MagicMock()

        event = {"type": "notification_created", "user_id": 7}

        async def mock_listen():
            yield {"type": "subscribe", "data": 1}
            yield {"type": "message", "data": "not valid json"}
            yield {"type": "message", "data": json.dumps(event)}

        mock_pubsub.listen = mock_listen
        mock_pubsub.subscribe = AsyncMock()
        mock_pubsub.unsubscribe = AsyncMock()
        mock_redis.pubsub.return_value = mock_pubsub

        # Directly set the redis connection to bypass _get_redis
        service._redis = mock_redis

        messages = []
        async for msg in service.subscribe("notifications:7"):
            messages.append(msg)
            break

        assert messages == [event]
        mock_pubsub.subscribe.assert_awaited_once_with("notifications:7")


class FakeRealtimeService:
    """Yields one event, then ends the stream."""

    channels: list[str] = []

    async def subscribe(self, channel):
        self.channels.append(channel)
        yield {"type": "notification_created", "data": {"title": "Hello"}}

    async def cleanup(self):
        pass


class TestWebSocketEndpoint:
    def test_requires_token(self, client):
        with pytest.raises(WebSocketDisconnect), client.websocket_connect("/api/ws/notifications"):
            pass

    def test_rejects_invalid_token(self, client):
        with (
            pytest.raises(WebSocketDisconnect) as exc_info,
            client.websocket_connect("/api/ws/notifications?token=invalid_token"),
        ):
            pass
        assert exc_info.value.code == 4001

    def test_rejects_reset_token(self, client, auth_headers):
        token = create_password_reset_token(auth_headers.user_id)
        with (
            pytest.raises(WebSocketDisconnect) as exc_info,
            client.websocket_connect(f"/api/ws/notifications?token={token}"),
        ):
            pass
        assert exc_info.value.code == 4001

    def test_rejects_nonexistent_user(self, client):
        token = create_access_token(99999, "admin")
        with (
            pytest.raises(WebSocketDisconnect) as exc_info,
            client.websocket_connect(f"/api/ws/notifications?token={token}"),
        ):
            pass
        assert exc_info.value.code == 4001

    def test_forwards_events_from_users_channel(self, client, auth_headers):
        FakeRealtimeService.channels = []
        with (
            patch("smart_erp.api.websocket.RealtimeService", FakeRealtimeService),
            client.websocket_connect(f"/api/ws/notifications?token={auth_headers.token}") as ws,
        ):
            message = ws.receive_json()

        assert message == {"type": "notification_created", "data": {"title": "Hello"}}
        assert FakeRealtimeService.channels == [f"notifications:{auth_headers.user_id}"]

    def test_subscription_failure_is_logged(self, client, auth_headers, caplog):
        closed = threading.Event()

        class UnreachableRealtimeService(FakeRealtimeService):
            async def subscribe(self, channel):
                raise ConnectionError("Redis unavailable")
                yield

            async def cleanup(self):
                closed.set()

        with (
            patch("smart_erp.api.websocket.RealtimeService", UnreachableRealtimeService),
            caplog.at_level(logging.ERROR, logger="smart_erp.api.websocket"),
            client.websocket_connect(f"/api/ws/notifications?token={auth_headers.token}"),
        ):
            # The connection is torn down once the failed subscription is handled
            assert closed.wait(timeout=5)

        failures = [r for r in caplog.records if r.name == "smart_erp.api.websocket"]
        assert any("Redis unavailable" in r.getMessage() for r in failures)
