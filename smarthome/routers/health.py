from fastapi import APIRouter

router = APIRouter(tags=["health"])

@router.get("/healthz")
async def health_check():
    """Health check endpoint"""
    return {"status": "ok"}

@router.get("/health")
async def api_health_check():
    """Health check endpoint used by the compose healthchecks"""
    return {"status": "ok"}
