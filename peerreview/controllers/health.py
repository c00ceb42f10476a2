from fastapi import APIRouter
from typing import Dict

from peerreview.config import SERVICE_NAME, VERSION

router = APIRouter()


@router.get("/health")
def health() -> Dict[str, str]:
    return {"status": "ok", "service": SERVICE_NAME, "version": VERSION}
