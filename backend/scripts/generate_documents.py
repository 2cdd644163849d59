#!/usr/bin/env python3
"""Render the loan exhibits for every loan on an Excel term sheet.

Usage:
    python scripts/generate_documents.py term_sheet.xlsx [--closing-date 2024-03-15]
        [--borrower "Acme LLC"] [--out-dir reports/documents]
"""
import argparse
import logging
from datetime import date
from pathlib import Path

from loandocs.errors import LoanDocsError
from loandocs.models.requests import LoanDocumentRequest
from loandocs.services.document_service import DOCUMENT_BUILDERS, generate_loan_document
from loandocs.services.terms_parser import parse_terms_sheet

OUT_DIR = Path(__file__).resolve().parent.parent.parent / "reports" / "documents"

logger = logging.getLogger(__name__)


def main():
    parser = argparse.ArgumentParser(description="Generate loan documents from a term sheet")
    parser.add_argument("term_sheet", type=Path)
    parser.add_argument("--closing-date", type=date.fromisoformat, default=date.today())
    parser.add_argument("--borrower", default="[Borrower Name]")
    parser.add_argument("--out-dir", type=Path, default=OUT_DIR)
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    args.out_dir.mkdir(parents=True, exist_ok=True)

    with open(args.term_sheet, "rb") as f:
        loans = parse_terms_sheet(f, args.term_sheet.name)

    for i, terms in enumerate(loans, start=1):
        request = LoanDocumentRequest(
            terms=terms, generated_at=args.closing_date, borrower_name=args.borrower,
        )
        for doc_type in DOCUMENT_BUILDERS:
            try:
                content = generate_loan_document(doc_type, request)
            except LoanDocsError as e:
                logger.error("Loan %d: could not render %s: %s", i, doc_type, e)
                continue
            out_path = args.out_dir / f"loan-{i:03d}-{doc_type}.docx"
            out_path.write_bytes(content)
            print(f"Saved to {out_path}")


if __name__ == "__main__":
    main()
