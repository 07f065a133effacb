"""Tests for notification sending, templates, events and stats."""

import pytest

from app.data.models.template import TemplateModel
from app.domain.enums import NotificationType
from app.services.channels import DeliveryResult, NotificationChannels
from tests.fakes import ADMIN_TOKEN, CUSTOMER_TOKEN, auth


def send(notification_api, type_="email", token=CUSTOMER_TOKEN, **extra):
    payload = {"userId": 1, "type": type_, "subject": "Hello", "message": "Test message", **extra}
    return notification_api.post("/api/notifications/send", json=payload, headers=auth(token))


class TestRender:
    def test_declared_variables_are_replaced(self):
        template = TemplateModel(
            name="t",
            type=NotificationType.EMAIL,
            subject="Order {{orderId}}",
            body="Hi {{firstName}}, {{orderId}} costs {{total}}",
            variables=["firstName", "orderId", "total"],
        )
        subject, body = template.render({"firstName": "John", "orderId": "A1", "total": 0})
        assert subject == "Order A1"
        assert body == "Hi John, A1 costs 0"

    def test_missing_and_undeclared_variables_keep_placeholder(self):
        template = TemplateModel(
            name="t",
            type=NotificationType.SMS,
            subject="{{a}}",
            body="{{a}} {{b}} {{c}}",
            variables=["a", "b"],
        )
        subject, body = template.render({"a": "", "c": "x"})
        assert subject == "{{a}}"
        assert body == "{{a}} {{b}} {{c}}"


class TestSend:
    def test_requires_token(self, notification_api):
        response = notification_api.post(
            "/api/notifications/send",
            json={"userId": 1, "type": "email", "subject": "s", "message": "m"},
        )
        assert response.status_code == 401

    @pytest.mark.parametrize("type_", ["email", "sms", "push", "in_app"])
    def test_send_each_channel(self, notification_api, type_):
        response = send(notification_api, type_, metadata={"source": "test"})
        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Notification sent successfully"
        data = body["data"]
        assert data["type"] == type_
        assert data["status"] == "sent"
        assert data["sentAt"] is not None
        assert data["metadata"] == {"source": "test"}

    def test_unknown_type(self, notification_api):
        response = send(notification_api, "pigeon")
        assert response.status_code == 400
        assert response.json()["message"] == "Validation error"

    def test_user_service_down(self, notification_api, fake_users):
        fake_users.unreachable = True
        response = send(notification_api)
        assert response.status_code == 401
        assert response.json()["message"] == "Token verification failed"

    def test_failed_delivery_is_recorded(self, notification_app, notification_api, monkeypatch):
        def broken(self, type_, recipient, subject, message):
            return DeliveryResult(False, "channel down")

        monkeypatch.setattr(NotificationChannels, "dispatch", broken)
        response = send(notification_api)
        assert response.status_code == 200
        assert response.json()["data"]["status"] == "failed"
        assert response.json()["data"]["sentAt"] is None


class TestSendTemplate:
    def test_renders_with_profile_and_variables(self, notification_api):
        response = notification_api.post(
            "/api/notifications/send-template",
            json={
                "templateName": "order_confirmation",
                "userId": 1,
                "variables": {"orderId": "ORD-1", "total": "117.99"},
            },
            headers=auth(CUSTOMER_TOKEN),
        )
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["subject"] == "Order Confirmed - ORD-1"
        assert data["message"] == "Hi John, your order ORD-1 has been confirmed! Total: $117.99"
        assert data["metadata"] == {
            "templateName": "order_confirmation",
            "variables": {"orderId": "ORD-1", "total": "117.99"},
        }

    def test_missing_variable_keeps_placeholder(self, notification_api):
        response = notification_api.post(
            "/api/notifications/send-template",
            json={"templateName": "order_shipped", "userId": 1, "variables": {"orderId": "X"}},
            headers=auth(CUSTOMER_TOKEN),
        )
        assert response.json()["data"]["message"].endswith("Tracking: {{trackingNumber}}")

    def test_name_and_user_required(self, notification_api):
        response = notification_api.post(
            "/api/notifications/send-template",
            json={"userId": 1},
            headers=auth(CUSTOMER_TOKEN),
        )
        assert response.status_code == 400
        assert response.json()["message"] == "Template name and user ID are required"

    def test_unknown_template(self, notification_api):
        response = notification_api.post(
            "/api/notifications/send-template",
            json={"templateName": "nope", "userId": 1},
            headers=auth(CUSTOMER_TOKEN),
        )
        assert response.status_code == 404
        assert response.json()["message"] == "Template not found"


class TestTemplates:
    def test_list_seeded_templates(self, notification_api):
        body = notification_api.get(
            "/api/notifications/templates", headers=auth(CUSTOMER_TOKEN)
        ).json()
        assert body["count"] == 4
        names = {t["name"] for t in body["data"]}
        assert names == {"welcome_email", "order_confirmation", "order_shipped", "low_stock_alert"}

    def test_create_template(self, notification_api):
        payload = {
            "name": "promo",
            "type": "push",
            "subject": "Sale!",
            "body": "Hi {{firstName}}",
            "variables": ["firstName"],
        }
        response = notification_api.post(
            "/api/notifications/templates", json=payload, headers=auth(ADMIN_TOKEN)
        )
        assert response.status_code == 201
        data = response.json()["data"]
        assert data["name"] == "promo"
        assert data["createdAt"] is not None

        again = notification_api.post(
            "/api/notifications/templates", json=payload, headers=auth(ADMIN_TOKEN)
        )
        assert again.status_code == 409
        assert again.json()["message"] == "Template with this name already exists"

    def test_created_template_defaults_to_no_variables(self, notification_api):
        response = notification_api.post(
            "/api/notifications/templates",
            json={"name": "plain", "type": "sms", "subject": "s", "body": "b"},
            headers=auth(ADMIN_TOKEN),
        )
        assert response.json()["data"]["variables"] == []


class TestEvents:
    def test_no_auth_needed(self, notification_api):
        response = notification_api.post(
            "/api/notifications/events",
            json={"eventType": "user_registered", "userId": 3, "data": {}},
        )
        assert response.status_code == 200
        assert response.json()["message"] == "Event processed successfully"

    @pytest.mark.parametrize("event", ["order_created", "low_stock", "something_else"])
    def test_any_event_type_is_accepted(self, notification_api, event):
        response = notification_api.post(
            "/api/notifications/events",
            json={"eventType": event, "userId": 1, "data": {"productId": 4}},
        )
        assert response.status_code == 200

    def test_event_type_and_user_required(self, notification_api):
        response = notification_api.post("/api/notifications/events", json={"eventType": "low_stock"})
        assert response.status_code == 400
        assert response.json()["message"] == "Event type and user ID are required"

    def test_template_lookup(self, notification_app):
        from app.services.notification_service import NotificationService

        state = notification_app.state
        svc = NotificationService(state.notification_repo, state.template_repo, state.user_client)
        assert svc.process_event("order_confirmed", 1, {}) == "order_confirmation"
        assert svc.process_event("order_created", 1, {}) == ""
        assert svc.process_event("bogus", 1, None) == ""


class TestQueries:
    def test_list_only_own_notifications(self, notification_api):
        send(notification_api)
        send(notification_api, token=ADMIN_TOKEN, userId=2)
        body = notification_api.get("/api/notifications", headers=auth(CUSTOMER_TOKEN)).json()
        assert body["count"] == 1
        assert body["data"][0]["userId"] == 1

    def test_stats(self, notification_api):
        send(notification_api, "email")
        send(notification_api, "sms")
        send(notification_api, "sms")
        data = notification_api.get("/api/notifications/stats", headers=auth(CUSTOMER_TOKEN)).json()["data"]
        assert data == {
            "total": 3,
            "sent": 3,
            "failed": 0,
            "byType": {"email": 1, "sms": 2, "push": 0, "in_app": 0},
        }

    def test_health_reports_total(self, notification_api):
        send(notification_api)
        body = notification_api.get("/health").json()
        assert body["status"] == "healthy"
        assert body["service"] == "notification-service"
        assert body["queueSize"] == 0
        assert body["totalNotifications"] == 1


def test_unsent_timestamps_stay_in_payload(notification_api):
    body = send(notification_api).json()
    assert set(body) == {"success", "message", "data"}
    assert body["data"]["deliveredAt"] is None
