from fastapi import APIRouter, HTTPException, UploadFile

from loandocs.errors import TermsSheetError
from loandocs.models.loan import LoanTerms
from loandocs.services.terms_parser import parse_terms_sheet

router = APIRouter(tags=["terms"])


@router.post("/terms/upload", response_model=list[LoanTerms])
async def upload_terms_sheet(file: UploadFile):
    """Upload an Excel term sheet and return one LoanTerms per row."""
    if not file.filename:
        raise HTTPException(status_code=400, detail="No filename provided")

    ext = file.filename.rsplit(".", 1)[-1].lower() if "." in file.filename else ""
    if ext not in ("xlsx", "xls"):
        raise HTTPException(
            status_code=400,
            detail=f"Unsupported file type '.{ext}'. Please upload .xlsx or .xls",
        )

    try:
        return parse_terms_sheet(file.file, file.filename)
    except TermsSheetError as e:
        raise HTTPException(status_code=422, detail=str(e))
