"""Notification feed tests."""

import json

import pytest

from smart_erp.exceptions import Forbidden, NotFound
from smart_erp.models import Notification
from smart_erp.models.enums import NotificationType
from smart_erp.services.notification_service import NotificationService


@pytest.fixture
def service(db):
    return NotificationService(db)


def add_notification(db, user_id: int, title: str, read: bool = False) -> Notification:
    notification = Notification(
        user_id=user_id, type="info", title=title, message=f"{title} body", read=read
    )
    db.add(notification)
    db.commit()
    db.refresh(notification)
    return notification


class TestListNotifications:
    def test_requires_auth(self, client):
        assert client.get("/api/notifications").status_code == 401

    def test_lists_only_own_notifications_newest_first(
        self, client, db, auth_headers, other_auth_headers
    ):
        add_notification(db, auth_headers.user_id, "First")
        add_notification(db, auth_headers.user_id, "Second")
        add_notification(db, other_auth_headers.user_id, "Not mine")

        response = client.get("/api/notifications", headers=auth_headers)
        assert response.status_code == 200
        titles = [n["title"] for n in response.json()]
        assert titles[:2] == ["Second", "First"]
        assert "Not mine" not in titles
        assert all(n["user_id"] == auth_headers.user_id for n in response.json())

    def test_response_shape(self, client, auth_headers):
        notification = client.get("/api/notifications", headers=auth_headers).json()[0]
        assert set(notification) == {
            "id",
            "user_id",
            "type",
            "title",
            "message",
            "read",
            "created_at",
        }
        assert notification["type"] == "info"


class TestUnreadCount:
    def test_counts_unread(self, client, db, auth_headers):
        add_notification(db, auth_headers.user_id, "Unread")
        add_notification(db, auth_headers.user_id, "Read", read=True)

        response = client.get("/api/notifications/unread-count", headers=auth_headers)
        assert response.status_code == 200
        # Welcome notification plus "Unread"
        assert response.json() == {"count": 2}


class TestMarkRead:
    def test_marks_own_notification_read(self, client, db, auth_headers):
        notification = add_notification(db, auth_headers.user_id, "Hello")

        response = client.put(f"/api/notifications/{notification.id}/read", headers=auth_headers)
        assert response.status_code == 200
        assert response.json()["read"] is True

        db.refresh(notification)
        assert notification.read is True

    def test_other_accounts_notification_is_forbidden(
        self, client, db, auth_headers, other_auth_headers
    ):
        notification = add_notification(db, other_auth_headers.user_id, "Private")

        response = client.put(f"/api/notifications/{notification.id}/read", headers=auth_headers)
        assert response.status_code == 403
        assert response.json() == {"detail": "Not authorized"}

        db.refresh(notification)
        assert notification.read is False

    def test_missing_notification(self, client, auth_headers):
        response = client.put("/api/notifications/99999/read", headers=auth_headers)
        assert response.status_code == 404
        assert response.json() == {"detail": "Notification not found"}

    def test_marking_read_twice_is_harmless(self, client, db, auth_headers):
        notification = add_notification(db, auth_headers.user_id, "Twice")

        client.put(f"/api/notifications/{notification.id}/read", headers=auth_headers)
        response = client.put(f"/api/notifications/{notification.id}/read", headers=auth_headers)
        assert response.status_code == 200
        assert response.json()["read"] is True


class TestMarkAllRead:
    def test_marks_everything_read(self, client, db, auth_headers, other_auth_headers):
        add_notification(db, auth_headers.user_id, "One")
        add_notification(db, auth_headers.user_id, "Two")

        response = client.put("/api/notifications/mark-all-read", headers=auth_headers)
        assert response.status_code == 200
        assert response.json() == {
            "message": "All notifications marked as read",
            "updated_count": 3,
        }

        count = client.get("/api/notifications/unread-count", headers=auth_headers).json()
        assert count == {"count": 0}
        # Other accounts are untouched
        other = client.get("/api/notifications/unread-count", headers=other_auth_headers).json()
        assert other == {"count": 1}

    def test_is_idempotent(self, client, auth_headers):
        first = client.put("/api/notifications/mark-all-read", headers=auth_headers)
        second = client.put("/api/notifications/mark-all-read", headers=auth_headers)

        assert first.status_code == second.status_code == 200
        assert second.json()["updated_count"] == 0
        feed = client.get("/api/notifications", headers=auth_headers).json()
        assert all(n["read"] for n in feed)


class TestTestNotification:
    def test_creates_notification_in_development(self, client, auth_headers):
        response = client.post(
            "/api/notifications/test",
            headers=auth_headers,
            json={"type": "warning", "title": "Heads up", "message": "Disk almost full"},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["type"] == "warning"
        assert data["user_id"] == auth_headers.user_id
        assert data["read"] is False

    def test_rejects_unknown_type(self, client, auth_headers):
        response = client.post(
            "/api/notifications/test",
            headers=auth_headers,
            json={"type": "party", "title": "Hi", "message": "Hi"},
        )
        assert response.status_code == 422


class TestNotificationService:
    def test_create_requires_existing_owner(self, service):
        with pytest.raises(NotFound):
            service.create(99999, "Orphan", "Nobody home")

    def test_create_publishes_event(self, service, auth_headers, mock_redis):
        mock_redis.reset_mock()

        notification = service.create(
            auth_headers.user_id, "Stock low", "Reorder soon", NotificationType.WARNING
        )

        mock_redis.publish.assert_called_once()
        channel, payload = mock_redis.publish.call_args.args
        assert channel == f"notifications:{auth_headers.user_id}"
        message = json.loads(payload)
        assert message["type"] == "notification_created"
        assert message["data"]["id"] == notification.id
        assert message["data"]["type"] == "warning"

    def test_create_without_commit_defers_event(self, service, auth_headers, mock_redis, db):
        mock_redis.reset_mock()

        service.create(auth_headers.user_id, "Pending", "Not yet", commit=False)

        mock_redis.publish.assert_not_called()
        db.rollback()

    def test_mark_read_checks_owner(self, service, db, auth_headers, other_auth_headers):
        notification = add_notification(db, other_auth_headers.user_id, "Theirs")

        with pytest.raises(Forbidden):
            service.mark_read(auth_headers.user_id, notification.id)

    def test_mark_all_read_skips_event_when_nothing_changed(
        self, service, auth_headers, mock_redis
    ):
        service.mark_all_read(auth_headers.user_id)
        mock_redis.reset_mock()

        assert service.mark_all_read(auth_headers.user_id) == 0
        mock_redis.publish.assert_not_called()

    def test_redis_failure_does_not_break_create(self, service, auth_headers, mock_redis):
        mock_redis.publish.side_effect = Exception("Redis connection failed")

        notification = service.create(auth_headers.user_id, "Still saved", "Even without Redis")

        assert notification.id is not None
