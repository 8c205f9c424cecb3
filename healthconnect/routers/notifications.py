from fastapi import APIRouter, Depends, HTTPException
from healthconnect.integrations.notifications import active_notifications, dismiss_notification
from healthconnect.schemas import NotificationsOut, UserOut
from healthconnect.services.auth import current_user

router = APIRouter(prefix="/notifications", tags=["notifications"])

@router.get("", response_model=NotificationsOut)
def list_notifications(user: UserOut = Depends(current_user)):
	rows = active_notifications(user.user_id)
	return NotificationsOut(unread_count=len(rows), notifications=rows)

@router.delete("/{notification_id}")
def dismiss(notification_id: str, user: UserOut = Depends(current_user)):
	if not dismiss_notification(user.user_id, notification_id):
		raise HTTPException(status_code=404, detail="Notification not found")
	return {"notification_id": notification_id, "dismissed": True}
