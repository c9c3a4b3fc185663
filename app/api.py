# app/api.py
"""FastAPI application for the Skill Assessment Engine."""
import logging
import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from core.catalog import build_catalog
from core.normalize_skills import dedupe
from core.parse_skills import parse_skills
from core.report import cached_report, demo_inputs

from .schemas import (
    ParseRequest, ParseResponse,
    CatalogRequest, CatalogResponse,
    ReconcileRequest, ReconcileResponse,
)

logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
)
logger = logging.getLogger(__name__)

CORS_ORIGINS = [o.strip() for o in os.environ.get("CORS_ORIGINS", "*").split(",") if o.strip()]


app = FastAPI(title="Skill Assessment Engine API", version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.get("/")
def root():
    return {"ok": True}

@app.get("/healthz")
def healthz():
    return {"status": "ok"}

@app.get("/demo", response_model=ReconcileRequest)
def demo() -> ReconcileRequest:
    return ReconcileRequest(**demo_inputs())

@app.post("/parse", response_model=ParseResponse)
def parse(request: ParseRequest) -> ParseResponse:
    skills = parse_skills(request.text)
    return ParseResponse(skills=skills, deduped=dedupe(skills))

@app.post("/catalog", response_model=CatalogResponse)
def catalog(request: CatalogRequest) -> CatalogResponse:
    cat = build_catalog(request.master_text)
    return CatalogResponse(skills=cat.skills, count=len(cat))

@app.post("/reconcile", response_model=ReconcileResponse)
def reconcile(request: ReconcileRequest) -> ReconcileResponse:
    report = cached_report(request.master_text, request.passed_text, request.failed_text)
    logger.info(
        "reconcile: %d master, %d passed, %d failed, coverage %d%%",
        len(report.master), len(report.passed.canonical), len(report.failed.canonical), report.coverage,
    )
    return ReconcileResponse(**report.to_dict())
