# backend/app/api/lookup.py
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from regexp_table.config.settings import TABLES_DIR, TABLE_SUFFIX
from regexp_table.pipeline.table import RegexpTable
from regexp_table.rules.errors import TableError
from backend.app.registry import table_registry

router = APIRouter()


class LookupRequest(BaseModel):
    table: str
    text: str


class ParseRequest(BaseModel):
    source: str
    source_id: Optional[str] = None


@router.get("/tables")
def list_tables() -> dict:
    return {"ok": True, **table_registry.snapshot()}


@router.post("/tables/reload")
def reload_tables() -> dict:
    table_registry.reload(TABLES_DIR, TABLE_SUFFIX)
    return {"ok": True, **table_registry.snapshot()}


@router.post("/lookup")
def lookup(req: LookupRequest) -> dict:
    table = table_registry.get(req.table)
    if table is None:
        raise HTTPException(status_code=404, detail=f"Unknown table: {req.table}")
    return {"ok": True, "table": req.table, "action": table.find(req.text)}


@router.post("/parse")
def parse_source(req: ParseRequest) -> dict:
    try:
        table = RegexpTable.from_text(req.source, source_id=req.source_id)
    except TableError as exc:
        raise HTTPException(
            status_code=400,
            detail={
                "error": type(exc).__name__,
                "message": exc.message,
                "source_id": exc.source_id,
                "line_number": exc.line_number,
            },
        )
    return {"ok": True, "rules": table.rule_count(), "top_level_rules": len(table)}
