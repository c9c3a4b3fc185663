# app/schemas.py
from typing import Dict, List
from pydantic import BaseModel, Field

class ParseRequest(BaseModel):
    text: str = Field("", description="Raw skills: JSON array or one per line / comma / semicolon")

class ParseResponse(BaseModel):
    skills: List[str]
    deduped: List[str]

class CatalogRequest(BaseModel):
    master_text: str = Field("", description="Raw master skill list")

class CatalogResponse(BaseModel):
    skills: List[str]
    count: int

class ReconcileRequest(BaseModel):
    master_text: str = Field("", description="Raw master skill list")
    passed_text: str = Field("", description="Skills the student has passed")
    failed_text: str = Field("", description="Skills attempted but not yet passed")

class PartitionModel(BaseModel):
    canonical: List[str]          # resolved to master spelling
    unknown: List[str]            # not in the master list

class ReconcileResponse(BaseModel):
    master: List[str]
    passed: PartitionModel
    failed: PartitionModel
    recommended: List[str]
    attempted_count: int
    coverage: int                 # percent of master passed
    remaining_gap_percent: int    # percent of master untouched
    counts: Dict[str, int]
