from healthconnect.integrations.notifications import active_notifications, dismiss_notification, push_notification


def test_newest_first_and_count(client, auth_headers):
	me = client.get("/auth/me", headers=auth_headers).json()
	push_notification(me["user_id"], "info", "One", "first")
	push_notification(me["user_id"], "warning", "Two", "second")
	body = client.get("/notifications", headers=auth_headers).json()
	assert body["unread_count"] == 2
	assert [n["title"] for n in body["notifications"]] == ["Two", "One"]


def test_dismiss(client, auth_headers):
	me = client.get("/auth/me", headers=auth_headers).json()
	n = push_notification(me["user_id"], "success", "Saved", "ok")
	assert client.delete(f"/notifications/{n.notification_id}", headers=auth_headers).status_code == 200
	assert client.delete(f"/notifications/{n.notification_id}", headers=auth_headers).status_code == 404
	assert client.get("/notifications", headers=auth_headers).json()["unread_count"] == 0


def test_notifications_expire(client, monkeypatch):
	from healthconnect.config import settings
	push_notification("user-x", "info", "Gone soon", "bye")
	assert len(active_notifications("user-x")) == 1
	monkeypatch.setattr(settings, "notification_ttl_seconds", 0)
	assert active_notifications("user-x") == []
	assert dismiss_notification("user-x", "missing") is False


def test_push_drops_expired_entries(client, monkeypatch):
	from healthconnect.config import settings
	from healthconnect.store import store
	for i in range(3):
		push_notification("user-y", "info", f"Old {i}", "stale")
	monkeypatch.setattr(settings, "notification_ttl_seconds", 0)
	fresh = push_notification("user-y", "success", "New", "kept")
	assert store.notifications["user-y"] == [fresh]
