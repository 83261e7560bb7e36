from datetime import UTC, datetime

from fastapi import APIRouter

router = APIRouter()


@router.get("/")
async def root():
    return {"message": "Internship Allotment API Running"}


@router.get("/health")
async def health():
    return {"status": "ok", "timestamp": datetime.now(UTC).isoformat()}
