# File: resume_builder/api/endpoints/health.py
from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import APIRouter

router = APIRouter()


@router.get("")
def health_check() -> Dict[str, Any]:
    """Connectivity probe used by the client's status indicator."""
    return {
        "success": True,
        "message": "Resume Builder API is running",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
