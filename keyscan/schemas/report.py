from typing import Any, Optional

from pydantic import BaseModel


class ResultSet(BaseModel):
    resolved: dict[str, Any] = {}
    unresolved: dict[str, Any] = {}


class ScanReport(BaseModel):
    markup_files: int
    program_files: int
    candidates: int
    resolved_keys: int
    unresolved_keys: int
    translations_path: Optional[str] = None
    unresolved_path: Optional[str] = None
