"""Page-view beacon endpoint (anonymous).

Flow: raw body -> validate -> look up or create visitor -> append page view.
The body is read raw because beacons are usually sent as text/plain blobs.
"""

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from tracker.core.dependencies import get_db
from tracker.schemas.common import ErrorResponse
from tracker.schemas.tracking import TrackPageViewResponse
from tracker.services.client_context import ClientContext
from tracker.services.ingestion import parse_page_view_event, record_page_view

router = APIRouter()


@router.post(
    "/track-page-view",
    response_model=TrackPageViewResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def track_page_view(
    request: Request,
    db: AsyncSession = Depends(get_db),
) -> TrackPageViewResponse:
    """Record one page view and return the visitor id the client should keep."""
    event = parse_page_view_event(await request.body())
    visitor_id = await record_page_view(db, event, ClientContext.from_request(request))
    return TrackPageViewResponse(visitor_id=visitor_id)
