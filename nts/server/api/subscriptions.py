"""
Subscriptions API Endpoint.

Stores new newsletter subscribers. Input is validated into a ``NewSubscriber``
before anything touches the database; invalid input is answered with ``400``.
"""

import uuid
from datetime import datetime, timezone

from fastapi import APIRouter, HTTPException, Response
from pydantic import BaseModel
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from nts.core.logging_config import get_logger
from nts.domain import NewSubscriber
from nts.server.deps import DbPoolDep

logger = get_logger(__name__)

router = APIRouter()

INSERT_SUBSCRIBER = text(
    "INSERT INTO subscriptions (id, email, name, subscribed_at, status) "
    "VALUES (:id, :email, :name, :subscribed_at, 'pending_confirmation')"
)


class SubscriptionForm(BaseModel):
    name: str
    email: str


@router.post(
    "/subscriptions",
    summary="Subscribe",
    description="Register a new subscriber pending confirmation.",
    responses={
        200: {"description": "Subscriber stored"},
        400: {"description": "Invalid name or email"},
        500: {"description": "Subscriber could not be stored"},
    },
)
async def subscribe(form: SubscriptionForm, pool: DbPoolDep) -> Response:
    try:
        new_subscriber = NewSubscriber.parse(name=form.name, email=form.email)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    subscriber_id = uuid.uuid4()
    try:
        async with pool.begin() as conn:
            await conn.execute(
                INSERT_SUBSCRIBER,
                {
                    "id": str(subscriber_id),
                    "email": str(new_subscriber.email),
                    "name": str(new_subscriber.name),
                    "subscribed_at": datetime.now(timezone.utc),
                },
            )
    except SQLAlchemyError as exc:
        logger.error("Failed to save new subscriber %s: %s", subscriber_id, exc)
        raise HTTPException(status_code=500, detail="Failed to save new subscriber") from exc

    logger.info("New subscriber %s saved", subscriber_id)
    return Response(status_code=200)
