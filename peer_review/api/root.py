from fastapi import APIRouter

router = APIRouter()

@router.get("/")
def root():
    return {
        "name": "Peer Review Aggregation Engine",
        "status": "ok",
        "docs": "/docs",
        "health": "/health",
    }
