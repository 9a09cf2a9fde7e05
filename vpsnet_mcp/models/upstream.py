from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class UpstreamRequest:
    method: str
    path: str
    body: Optional[Dict[str, Any]] = None
