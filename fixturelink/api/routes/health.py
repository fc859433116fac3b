"""Health check endpoint."""

from fastapi import APIRouter

from fixturelink.config import VERSION

router = APIRouter()


@router.get("/health")
def health_check() -> dict:
    return {
        "status": "healthy",
        "version": VERSION,
    }
