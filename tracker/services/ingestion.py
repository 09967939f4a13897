"""Page-view ingestion: validate the beacon payload, resolve the visitor, append the view.

Visitor lookup, visitor creation and the page-view insert share one
transaction, so a failure part-way leaves neither an orphaned visitor nor a
half-recorded event. Visitor ids are always generated here, never adopted
from the client.
"""

import logging
import uuid

from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from tracker.core.exceptions import PayloadValidationError, StoreError
from tracker.models.page_view import PageView
from tracker.models.visitor import Visitor
from tracker.schemas.tracking import PageViewEvent
from tracker.services.client_context import ClientContext
from tracker.services.geo import resolve_geo
from tracker.services.user_agent import classify_user_agent

logger = logging.getLogger(__name__)

_FIELD_ERRORS = {
    "visitorId": "InvalidVisitorId",
    "route": "InvalidRoute",
    "room": "InvalidRoom",
}


def parse_page_view_event(raw: bytes) -> PageViewEvent:
    """Decode and validate the raw request body.

    Raises PayloadValidationError on malformed JSON or any invalid field; the
    first offending field decides the ``error`` code.
    """
    try:
        return PageViewEvent.model_validate_json(raw)
    except ValidationError as exc:
        errors = exc.errors()
        first_loc = errors[0]["loc"] if errors and errors[0]["loc"] else ("",)
        code = _FIELD_ERRORS.get(str(first_loc[0]), "InvalidPayload")
        detail = "; ".join(
            f"{'.'.join(str(p) for p in e['loc']) or 'body'}: {e['msg']}" for e in errors
        )
        raise PayloadValidationError(detail=detail, error=code) from exc


def build_visitor(context: ClientContext) -> Visitor:
    ua = classify_user_agent(context.user_agent)
    geo = resolve_geo(context)
    return Visitor(
        id=uuid.uuid4(),
        browser=ua.browser,
        device=ua.device,
        os=ua.os,
        city=geo.city,
        country=geo.country,
        region=geo.region,
    )


async def record_page_view(
    db: AsyncSession,
    event: PageViewEvent,
    context: ClientContext,
) -> uuid.UUID:
    """Record one page view and return the (reused or new) visitor id.

    Commits the session. Store failures roll back and raise StoreError.
    """
    try:
        visitor = None
        if event.visitor_id is not None:
            visitor = await db.get(Visitor, event.visitor_id)

        if visitor is None:
            visitor = build_visitor(context)
            db.add(visitor)
            await db.flush()
            logger.info("Created visitor %s", visitor.id)

        visitor_id = visitor.id
        db.add(PageView(visitor_id=visitor_id, route=event.route.value, room=event.room))
        await db.commit()
    except SQLAlchemyError as exc:
        await db.rollback()
        logger.exception(
            "Failed to record page view, payload=%s",
            event.model_dump(mode="json", by_alias=True),
        )
        raise StoreError() from exc

    return visitor_id
