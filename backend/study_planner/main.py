"""
Expert Study Plan Generator — FastAPI Application

This is the entry point for the backend. It:
1. Creates the FastAPI app instance
2. Configures CORS (so the browser client can talk to us)
3. Registers route handlers
4. Sets up startup/shutdown lifecycle events

Run with:
    uvicorn study_planner.main:app --reload --port 8000
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from study_planner.config import settings
from study_planner.routers import plans


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown logic.

    Code before 'yield' runs on startup.
    Code after 'yield' runs on shutdown.
    """
    # --- Startup ---
    print("🚀 Starting Expert Study Plan Generator API...")
    if not settings.generation_configured:
        print("⚠️ ANTHROPIC_API_KEY is not set — plans will come back as fallbacks")

    yield  # App is running, handling requests

    # --- Shutdown ---
    print("👋 Shutting down...")


app = FastAPI(
    title="Expert Study Plan Generator API",
    description="AI-generated study plans from beginner to expert, exported as PDF",
    version="1.0.0",
    lifespan=lifespan,
)

# --- CORS Middleware ---
# Without this, the browser client (localhost:3000) can't call the API
# (localhost:8000) because browsers block cross-origin requests by default.
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["Content-Disposition"],  # So the client sees the PDF file name
)

app.include_router(plans.router)


# --- Health Check Endpoints ---

@app.get("/", tags=["health"])
async def root():
    """Root endpoint — confirms the API is alive."""
    return {
        "service": "Expert Study Plan Generator",
        "status": "running",
        "version": "1.0.0",
    }


@app.get("/health", tags=["health"])
async def health_check():
    """Health check — reports whether plan generation can reach Claude.

    Without an API key every plan degrades to the fallback sentence,
    so the service is up but "degraded".
    """
    generation_status = "configured" if settings.generation_configured else "missing_api_key"

    return {
        "status": "healthy" if settings.generation_configured else "degraded",
        "generation": generation_status,
        "model": settings.ANTHROPIC_MODEL,
        "environment": settings.APP_ENV,
    }
