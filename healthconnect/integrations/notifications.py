from datetime import timedelta
from typing import List
from healthconnect.config import settings
from healthconnect.schemas import NotificationOut
from healthconnect.store import store, utcnow, new_id
from healthconnect.logger import get_logger

log = get_logger("notifications")


def _cutoff():
	return utcnow() - timedelta(seconds=settings.notification_ttl_seconds)


def push_notification(user_id: str, type: str, title: str, message: str) -> NotificationOut:
	n = NotificationOut(notification_id=new_id(), type=type, title=title, message=message, timestamp=utcnow())
	cutoff = _cutoff()
	with store.lock:
		rows = [x for x in store.notifications.get(user_id, []) if x.timestamp > cutoff]
		store.notifications[user_id] = [n] + rows
	log.info("Notification for %s: %s", user_id, title)
	return n


def active_notifications(user_id: str) -> List[NotificationOut]:
	"""Newest first; anything older than the toast lifetime is dropped."""
	cutoff = _cutoff()
	with store.lock:
		rows = [n for n in store.notifications.get(user_id, []) if n.timestamp > cutoff]
		store.notifications[user_id] = rows
		return list(rows)


def dismiss_notification(user_id: str, notification_id: str) -> bool:
	with store.lock:
		rows = store.notifications.get(user_id, [])
		kept = [n for n in rows if n.notification_id != notification_id]
		store.notifications[user_id] = kept
		return len(kept) != len(rows)
