"""Distribution Waterfall exhibit for fund offering documents."""
from __future__ import annotations

from typing import Optional

from loandocs.documents.helpers import (
    body_text,
    create_table,
    document_title,
    key_terms_table,
    new_legal_document,
    section_heading,
    spacer,
)
from loandocs.finance.formatting import format_currency
from loandocs.models.fund import DistributionIllustration, FundTerms, Waterfall


def build_waterfall_document(
    terms: FundTerms,
    waterfall: Waterfall,
    illustration: Optional[DistributionIllustration] = None,
):
    doc = new_legal_document(f"Distribution Waterfall - {terms.fund_name}")

    document_title(doc, "Distribution Waterfall")
    body_text(doc, f"Distributions of {terms.fund_name} shall be made in the following order "
                   f"of priority in accordance with the Limited Partnership Agreement.")
    spacer(doc)

    key_terms_table(doc, [
        ("Target Fund Size", format_currency(terms.target_raise)),
        ("GP Commitment",
         f"{format_currency(terms.gp_commitment)} ({waterfall.gp_commitment_display} of target fund size)"),
        ("Preferred Return", f"{terms.preferred_return * 100:.1f}% per annum"),
        ("Carried Interest", f"{terms.carried_interest * 100:.1f}%"),
    ])
    spacer(doc)

    section_heading(doc, "Waterfall Tiers")
    create_table(
        doc,
        ["Tier", "Name", "Allocation", "GP", "LP"],
        [
            [str(t.tier), t.name, t.description, f"{t.gp_percent:.1f}%", f"{t.lp_percent:.1f}%"]
            for t in waterfall.tiers
        ],
        column_widths=[7, 18, 53, 11, 11],
    )

    if illustration is not None:
        spacer(doc)
        section_heading(doc, "Illustrative Distribution")
        body_text(doc, f"Assumes {format_currency(illustration.distributable_cash)} of distributable "
                       f"cash on {format_currency(illustration.contributed_capital)} of contributed "
                       f"capital held {illustration.years:g} years. For illustration only.",
                  italic=True)
        rows = [
            [str(s.tier), s.name, format_currency(s.amount), format_currency(s.to_gp),
             format_currency(s.to_lp)]
            for s in illustration.steps
        ]
        rows.append(["", "Total", format_currency(illustration.distributable_cash),
                     format_currency(illustration.total_to_gp),
                     format_currency(illustration.total_to_lp)])
        create_table(doc, ["Tier", "Name", "Amount", "To GP", "To LPs"], rows,
                     column_widths=[8, 32, 20, 20, 20])

    return doc
