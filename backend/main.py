"""
FastAPI Application Entry Point
Serves the ATS match-checking REST API.
"""

import logging
import os
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

from routers.analyze import router as analyze_router

load_dotenv()

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="[%(asctime)s] %(levelname)s [%(name)s]: %(message)s",
)

app = FastAPI(
    title="ATS Match Checker",
    description="Resume vs. job description ATS analysis powered by Groq, with deterministic keyword verification",
    version="1.0.0",
)

# CORS — allow origins from environment or default to *
allowed_origins = os.getenv("ALLOWED_ORIGINS", "*").split(",")

app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# API Routes
app.include_router(analyze_router, prefix="/api")


if __name__ == "__main__":
    import uvicorn
    port = int(os.getenv("PORT", 8000))
    uvicorn.run(app, host="0.0.0.0", port=port)
