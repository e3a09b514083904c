"""
NewsCheck Credibility Service - API
Scores pasted news text with pattern heuristics and returns a credibility report
"""

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from typing import Dict, Any
from collections import Counter
from datetime import datetime
from contextlib import asynccontextmanager
import logging
import time
import os

from dotenv import load_dotenv

# Load environment variables early so Settings picks them up
load_dotenv()

from newscheck.config import get_settings
from newscheck.engine import ContentScorer, fallback_report, force_fake
from newscheck.models import AnalysisReport, AnalyzeRequest
from newscheck.samples import SAMPLES

settings = get_settings()

# Logging configuration
logging.basicConfig(
    level=settings.log_level.upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.StreamHandler(),
        logging.FileHandler(settings.log_file)
        if settings.log_file and os.path.isdir(os.path.dirname(settings.log_file) or ".")
        else logging.NullHandler()
    ]
)

logger = logging.getLogger(__name__)


# Metrics tracker
class Metrics:
    """Track service metrics"""

    def __init__(self):
        self.total_requests = 0
        self.successful_requests = 0
        self.failed_requests = 0
        self.total_processing_time = 0.0
        self.status_counts: Counter = Counter()
        self.start_time = time.time()

    def record_request(self, success: bool, processing_time: float, verification_status: str = None):
        """Record request outcome"""
        self.total_requests += 1
        if success:
            self.successful_requests += 1
        else:
            self.failed_requests += 1
        self.total_processing_time += processing_time
        if verification_status:
            self.status_counts[verification_status] += 1

    def get_stats(self) -> Dict[str, Any]:
        """Get current metrics"""
        uptime = time.time() - self.start_time
        avg_time = self.total_processing_time / self.total_requests if self.total_requests > 0 else 0

        return {
            "total_requests": self.total_requests,
            "successful_requests": self.successful_requests,
            "failed_requests": self.failed_requests,
            "success_rate": f"{(self.successful_requests / self.total_requests * 100):.1f}%" if self.total_requests > 0 else "N/A",
            "average_processing_time": f"{avg_time * 1000:.2f}ms",
            "verification_status": dict(self.status_counts),
            "uptime_seconds": int(uptime)
        }


metrics = Metrics()
scorer = ContentScorer()


# Application lifespan
@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events"""
    logger.info("=" * 60)
    logger.info(f"Starting {settings.service_title} v{settings.version}")
    logger.info("=" * 60)
    logger.info(f"  CORS origins: {settings.get_cors_origins()}")
    logger.info(f"  Max content length: {settings.max_content_length}")
    logger.info("Service ready")

    yield

    logger.info("Shutdown complete")


# FastAPI application
app = FastAPI(
    title=settings.service_title,
    version=settings.version,
    description=settings.description,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler"""
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "Internal server error",
            "detail": str(exc) if settings.debug else "An error occurred"
        }
    )


# API endpoints
@app.get("/")
async def root():
    """Root endpoint with service information"""
    return {
        "service": settings.service_title,
        "version": settings.version,
        "status": "operational",
        "endpoints": {
            "analyze": "POST /api/analyze-news",
            "samples": "GET /samples",
            "health": "GET /health",
            "metrics": "GET /metrics"
        }
    }


@app.get("/health")
async def health_check():
    """Detailed health check"""
    return {
        "status": "healthy",
        "timestamp": datetime.utcnow().isoformat(),
        "components": {
            "api": "healthy",
            "scorer": "loaded"
        },
        "metrics": metrics.get_stats()
    }


@app.get("/metrics")
async def get_metrics():
    """Get service metrics"""
    return {
        "service": settings.service_title,
        "version": settings.version,
        "metrics": metrics.get_stats()
    }


@app.get("/samples")
async def get_samples():
    """Sample texts for trying the analyzer"""
    return dict(SAMPLES)


@app.post("/api/analyze-news", response_model=AnalysisReport)
async def analyze_news(http_request: Request):
    """
    Score content for fake-news likelihood.
    Always answers 200; unreadable requests and analysis failures get the fallback report.
    """
    start_time = time.time()

    try:
        body = await http_request.json()
        request_body = AnalyzeRequest.model_validate(body)
    except ValueError as e:
        # Covers malformed JSON and pydantic ValidationError
        logger.warning(f"Malformed analysis request: {e}")
        metrics.record_request(success=False, processing_time=time.time() - start_time)
        return fallback_report()

    text = request_body.text_to_analyze
    if len(text) > settings.max_content_length:
        logger.warning(f"Content truncated from {len(text)} to {settings.max_content_length} characters")
        text = text[:settings.max_content_length]

    logger.info(f"Analyzing content ({len(text)} chars): {text[:50]}...")

    try:
        report = scorer.analyze(text)
        if request_body.force_fake:
            report = force_fake(report)
    except Exception as e:
        logger.error(f"Analysis error: {e}", exc_info=True)
        metrics.record_request(success=False, processing_time=time.time() - start_time)
        return fallback_report()

    metrics.record_request(
        success=True,
        processing_time=time.time() - start_time,
        verification_status=report.verification_status
    )
    return report


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=True,
        log_level="info"
    )
