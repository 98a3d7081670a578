"""Main FastAPI application for match reporting."""

from __future__ import annotations

import logging
import os

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from . import __version__
from .api.rest.routes import router as reports_router

load_dotenv()

logging.basicConfig(level=os.environ.get("LOG_LEVEL", "INFO").upper())


app = FastAPI(
    title="League Reporting API",
    description="Match reporting and analytics for youth sports leagues",
    version=__version__,
)

# CORS configuration for frontend integration
app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:3000",  # Next.js dev server
        "*",  # Allow all for development
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    version: str
    match_source: str


@app.get("/", tags=["meta"])
async def root():
    """API root with information and available endpoints."""
    return {
        "name": "League Reporting API",
        "version": __version__,
        "docs": "/docs",
        "endpoints": {
            "health": "GET /health",
            "report": "GET /api/reports/matches",
            "generate": "POST /api/reports/generate",
            "export": "POST /api/reports/export?format=json|html|pdf|csv|text",
        },
    }


@app.get("/health", response_model=HealthResponse, tags=["meta"])
async def health_check():
    """Check API health and configured match source."""
    source = "file" if os.environ.get("MATCH_DATA_FILE") else "league_api"
    return HealthResponse(status="healthy", version=__version__, match_source=source)


app.include_router(reports_router)
