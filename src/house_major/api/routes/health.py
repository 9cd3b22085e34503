"""Liveness check used by the deployment platform."""

from __future__ import annotations

from fastapi import APIRouter, Response, status

from house_major.data.db import ping

router = APIRouter(tags=["health"])


@router.get("/health")
def health_check(response: Response) -> dict[str, str]:
    """Report healthy only while the database answers; 503 otherwise."""
    if not ping():
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        return {"status": "unhealthy"}
    return {"status": "healthy"}
