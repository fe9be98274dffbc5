from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from peer_review.api.health import router as health_router
from peer_review.api.root import router as root_router
from peer_review.api.questions import router as questions_router
from peer_review.api.anonymity import router as anonymity_router
from peer_review.api.text import router as text_router
from peer_review.api.reviews import router as reviews_router
from peer_review.api.summaries import router as summaries_router
from peer_review.core.config import settings
from peer_review.core.logging_setup import configure_logging

configure_logging(settings.LOG_LEVEL)

app = FastAPI(title="Peer Review Aggregation Engine")

# CORS middleware for frontend access
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(root_router)
app.include_router(health_router)
app.include_router(questions_router)
app.include_router(anonymity_router)
app.include_router(text_router)
app.include_router(reviews_router)
app.include_router(summaries_router)
