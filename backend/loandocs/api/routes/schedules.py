from fastapi import APIRouter, HTTPException, Response

from loandocs.errors import InvalidLoanParametersError
from loandocs.models.requests import LoanDocumentRequest
from loandocs.models.schedule import AmortizationSchedule
from loandocs.services.document_service import build_schedule
from loandocs.services.schedule_export import XLSX_MEDIA_TYPE, schedule_to_xlsx

router = APIRouter(tags=["schedules"])


def _schedule_or_422(request: LoanDocumentRequest) -> AmortizationSchedule:
    try:
        return build_schedule(request)
    except InvalidLoanParametersError as e:
        raise HTTPException(status_code=422, detail=str(e))


@router.post("/schedules/amortization", response_model=AmortizationSchedule)
def amortization_schedule(request: LoanDocumentRequest):
    """Month-by-month schedule, with a trailing balloon row when one is due."""
    return _schedule_or_422(request)


@router.post("/schedules/amortization/xlsx")
def amortization_schedule_xlsx(request: LoanDocumentRequest):
    schedule = _schedule_or_422(request)
    return Response(
        content=schedule_to_xlsx(schedule),
        media_type=XLSX_MEDIA_TYPE,
        headers={"Content-Disposition": 'attachment; filename="amortization-schedule.xlsx"'},
    )
