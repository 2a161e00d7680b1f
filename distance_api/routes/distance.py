"""Distance API route."""
from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Request, Response

from distance_api.handler import DistanceHandler

router = APIRouter()


def get_handler(request: Request) -> DistanceHandler:
    """Handler bound to the settings loaded at startup."""
    return DistanceHandler(request.app.state.settings)


@router.get("/distance")
def get_distance(
    origin: str = Query("", description="Start address; sent to Maps as given"),
    handler: DistanceHandler = Depends(get_handler),
):
    """Driving distance from origin to the configured destination.

    Plain def: FastAPI runs the blocking Maps call in its threadpool.
    """
    result = handler.handle({"origin": origin})
    return Response(
        content=result.body,
        status_code=result.status_code,
        media_type=result.content_type,
    )
