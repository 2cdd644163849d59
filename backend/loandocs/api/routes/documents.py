from fastapi import APIRouter, HTTPException, Response

from loandocs.documents.helpers import DOCX_MEDIA_TYPE
from loandocs.errors import InvalidFundTermsError, InvalidLoanParametersError
from loandocs.models.requests import FundRequest, LoanDocumentRequest
from loandocs.services.document_service import (
    DOCUMENT_BUILDERS,
    generate_loan_document,
    generate_waterfall_document,
)

router = APIRouter(tags=["documents"])


def _docx_response(content: bytes, name: str) -> Response:
    return Response(
        content=content,
        media_type=DOCX_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{name}.docx"'},
    )


@router.get("/documents")
def list_document_types():
    return {"loan": sorted(DOCUMENT_BUILDERS), "fund": ["waterfall"]}


@router.post("/documents/waterfall")
def waterfall_document(request: FundRequest):
    try:
        content = generate_waterfall_document(request)
    except InvalidFundTermsError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return _docx_response(content, "distribution-waterfall")


@router.post("/documents/{doc_type}")
def loan_document(doc_type: str, request: LoanDocumentRequest):
    """Render a loan document (.docx) from a terms snapshot."""
    if doc_type not in DOCUMENT_BUILDERS:
        raise HTTPException(status_code=404, detail=f"Unknown document type '{doc_type}'")
    try:
        content = generate_loan_document(doc_type, request)
    except InvalidLoanParametersError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return _docx_response(content, doc_type)
