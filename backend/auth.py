import hmac

from fastapi import HTTPException, Query, status

from config import settings


async def verify_webhook_token(
    token: str | None = Query(default=None),
) -> None:
    expected = settings.webhook_token
    if not expected:
        return
    if not token or not hmac.compare_digest(token, expected):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid webhook token"
        )
