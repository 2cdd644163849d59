from fastapi import APIRouter

from loandocs.config import settings

router = APIRouter(tags=["health"])


@router.get("/health")
def health_check():
    return {
        "status": "ok",
        "payment_date_rule": settings.PAYMENT_DATE_RULE,
    }
