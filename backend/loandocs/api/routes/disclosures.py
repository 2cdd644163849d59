from fastapi import APIRouter, HTTPException

from loandocs.errors import InvalidLoanParametersError
from loandocs.models.disclosure import ConsistencyCheck, FinanceDisclosure, SettlementStatement
from loandocs.models.requests import ConsistencyRequest, LoanDocumentRequest
from loandocs.services.consistency import check_documents
from loandocs.services.disclosure_service import build_finance_disclosure
from loandocs.services.document_service import build_schedule
from loandocs.services.settlement_service import build_settlement_statement

router = APIRouter(tags=["disclosures"])


def _finance_disclosure(request: LoanDocumentRequest) -> FinanceDisclosure:
    return build_finance_disclosure(
        request.terms,
        request.generated_at,
        request.resolved_first_payment_date(),
        include_origination_fees=request.include_origination_fees,
        schedule=build_schedule(request),
    )


def _settlement_statement(request: LoanDocumentRequest) -> SettlementStatement:
    return build_settlement_statement(
        request.terms,
        request.generated_at,
        request.resolved_first_payment_date(),
        request.recording_fee,
    )


@router.post("/disclosures/finance", response_model=FinanceDisclosure)
def finance_disclosure(request: LoanDocumentRequest):
    """Total of payments, finance charge, amount financed, APR and TIP."""
    try:
        return _finance_disclosure(request)
    except InvalidLoanParametersError as e:
        raise HTTPException(status_code=422, detail=str(e))


@router.post("/disclosures/settlement", response_model=SettlementStatement)
def settlement_statement(request: LoanDocumentRequest):
    try:
        return _settlement_statement(request)
    except InvalidLoanParametersError as e:
        raise HTTPException(status_code=422, detail=str(e))


@router.post("/disclosures/consistency", response_model=list[ConsistencyCheck])
def consistency_checks(request: ConsistencyRequest):
    """Cross-document checks between the Settlement Statement and Closing Disclosure.

    Either document may be supplied as already issued; the other is generated
    from the terms.
    """
    try:
        settlement = request.settlement_statement or _settlement_statement(request)
        disclosure = request.finance_disclosure or _finance_disclosure(request)
    except InvalidLoanParametersError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return check_documents(settlement, disclosure)
