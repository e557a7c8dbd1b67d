"""
Settings endpoints - threshold configuration.
"""

from fastapi import APIRouter, Depends
from sqlmodel import Session

from app.db.session import get_db
from app.schemas.thresholds import ThresholdSettings
from app.services.threshold_service import ThresholdService

router = APIRouter()


@router.get(
    "/thresholds",
    summary="Current risk thresholds (stored values over environment defaults).",
    response_model=ThresholdSettings,
)
def get_thresholds(db: Session = Depends(get_db)):
    return ThresholdService(db).get()


@router.put(
    "/thresholds",
    summary="Replace the stored risk thresholds.",
    response_model=ThresholdSettings,
)
def update_thresholds(data: ThresholdSettings, db: Session = Depends(get_db)):
    return ThresholdService(db).update(data)
