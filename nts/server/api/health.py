"""
Health Check Endpoint.

Used by deployments and by the test harness to verify that the server is
reachable.
"""

from fastapi import APIRouter, Response

router = APIRouter()


@router.get(
    "/health_check",
    summary="Health Check",
    description="Check the operational status of the API server.",
    response_description="Empty body with status 200.",
)
async def health_check() -> Response:
    """
    Health check endpoint.

    Returns an empty ``200 OK`` to confirm the server is running and reachable.
    """
    return Response(status_code=200)
