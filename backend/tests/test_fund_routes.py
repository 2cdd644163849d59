"""Tests for the fund waterfall endpoints."""
import io

import pytest
from docx import Document
from fastapi.testclient import TestClient

from loandocs.main import app

client = TestClient(app)


def _make_fund(**overrides) -> dict:
    fund = dict(
        fund_name="Harbor Credit Fund I",
        target_raise=50_000_000.0,
        gp_commitment=1_000_000.0,
        preferred_return=0.08,
        carried_interest=0.20,
        catch_up_percentage=1.0,
    )
    fund.update(overrides)
    return fund


def test_waterfall_tiers():
    response = client.post("/api/funds/waterfall", json={"fund_terms": _make_fund()})
    assert response.status_code == 200
    data = response.json()
    assert len(data["waterfall"]["tiers"]) == 4
    assert data["waterfall"]["gp_commitment_display"] == "2.0%"
    assert data["illustration"] is None


def test_waterfall_with_illustration():
    body = {
        "fund_terms": _make_fund(),
        "illustration": {"distributable_cash": 2_000_000.0, "contributed_capital": 1_000_000.0,
                         "years": 1},
    }
    data = client.post("/api/funds/waterfall", json=body).json()
    illustration = data["illustration"]
    assert illustration["total_to_gp"] == pytest.approx(200_000.0)
    assert illustration["total_to_gp"] + illustration["total_to_lp"] == pytest.approx(2_000_000.0)


def test_invalid_carry_returns_422():
    response = client.post("/api/funds/waterfall",
                           json={"fund_terms": _make_fund(carried_interest=1.5)})
    assert response.status_code == 422


def test_waterfall_document():
    response = client.post("/api/documents/waterfall", json={"fund_terms": _make_fund()})
    assert response.status_code == 200
    doc = Document(io.BytesIO(response.content))
    assert doc.paragraphs[0].text == "DISTRIBUTION WATERFALL"


def test_waterfall_document_invalid_terms():
    response = client.post("/api/documents/waterfall",
                           json={"fund_terms": _make_fund(catch_up_percentage=2.0)})
    assert response.status_code == 422
