"""
FastAPI server exposing the complaint analysis components.

Each component router is mounted under /v2; the comprehensive analysis
and the stored-complaint endpoints live under /api.
"""
import logging

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from config import Config
from components.base import configure_logging
from components.base.exceptions import ComponentError
from components.orchestrator import AnalysisRequest, ComprehensiveAnalysis, run_analysis
from components.taxonomy import available_taxonomies

# Import component routers (for individual component HTTP access)
from components.classification import router as classification_router
from components.sentiment import router as sentiment_router
from components.similarity import router as similarity_router
from components.responses import router as responses_router
from components.assistant import router as assistant_router
from components.complaints.router import router as complaints_router

configure_logging(Config.LOG_LEVEL)
logger = logging.getLogger("api_server")

app = FastAPI(
    title=Config.APP_NAME,
    description="Rule-based classification, sentiment, duplicate detection and "
                "reply suggestions for campus and civic complaints",
    version=Config.APP_VERSION,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=Config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ============================================================================
# Mount v2 Component Routers
# ============================================================================
# API Structure:
#   /v2/classification/* - Category, priority, summary, department
#   /v2/sentiment/*      - Keyword sentiment
#   /v2/similarity/*     - Duplicate detection
#   /v2/responses/*      - Reply suggestions
#   /v2/assistant/*      - Help desk chat

app.include_router(classification_router, prefix="/v2")
app.include_router(sentiment_router, prefix="/v2")
app.include_router(similarity_router, prefix="/v2")
app.include_router(responses_router, prefix="/v2")
app.include_router(assistant_router, prefix="/v2")
app.include_router(complaints_router, prefix="/api")


@app.post("/api/analyze", response_model=ComprehensiveAnalysis)
async def analyze_complaint(request: AnalysisRequest) -> ComprehensiveAnalysis:
    """
    Run the full analysis workflow on a complaint and a corpus snapshot.
    """
    try:
        return await run_analysis(request.complaint, request.corpus)
    except ComponentError as e:
        raise HTTPException(status_code=500, detail=e.to_dict())


@app.get("/api/health")
async def health():
    return {
        "status": "healthy",
        "taxonomy": Config.TAXONOMY,
        "available_taxonomies": available_taxonomies(),
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "api_server:app",
        host=Config.HOST,
        port=Config.PORT,
        reload=True,
        log_level=Config.LOG_LEVEL.lower(),
    )
