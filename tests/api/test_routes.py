"""
HTTP tests for the PharmaGuard API.
"""

import gzip

import pytest
from fastapi.testclient import TestClient

from pharmaguard.main import app


SAMPLE_VCF = (
    b"##fileformat=VCFv4.2\n"
    b"#CHROM\tPOS\tID\tREF\tALT\tQUAL\tFILTER\tINFO\tFORMAT\tSAMPLE\n"
    b"10\t96541616\trs4244285\tG\tA\t99\tPASS\t.\tGT\t1/1\n"
)


@pytest.fixture
def client():
    return TestClient(app)


def _analyze(client, drugs, content=SAMPLE_VCF, filename="patient.vcf", **data):
    return client.post(
        "/api/v1/analyze",
        data={"drugs": drugs, **data},
        files={"vcf": (filename, content, "text/plain")},
    )


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "service": "PharmaGuard"}


class TestDrugRoutes:

    def test_list_supported_drugs(self, client):
        response = client.get("/api/v1/drugs")
        body = response.json()

        assert response.status_code == 200
        assert [d["drug_id"] for d in body] == [
            "CODEINE", "WARFARIN", "CLOPIDOGREL", "SIMVASTATIN", "AZATHIOPRINE", "FLUOROURACIL",
        ]
        assert body[2]["gene"] == "CYP2C19"
        assert "plavix" in body[2]["aliases"]

    def test_resolve_brand_name(self, client):
        response = client.get("/api/v1/drugs/resolve", params={"q": "zocor"})
        top = response.json()[0]

        assert response.status_code == 200
        assert top["drug_id"] == "SIMVASTATIN"
        assert top["match_kind"] == "AliasExact"
        assert top["edit_distance"] == 0

    def test_resolve_short_query_is_empty(self, client):
        response = client.get("/api/v1/drugs/resolve", params={"q": "x"})

        assert response.status_code == 200
        assert response.json() == []


class TestReportRoute:

    def test_report(self, client):
        response = client.get("/api/v1/report", params={"drug": "CLOPIDOGREL", "patient_id": "PT-1"})
        body = response.json()

        assert response.status_code == 200
        assert body["patient_id"] == "PT-1"
        assert body["drug"] == "CLOPIDOGREL"
        assert body["risk_assessment"]["risk_label"] == "Toxic"
        assert body["pharmacogenomic_profile"]["diplotype"] == "*2/*2"

    def test_unsupported_drug(self, client):
        response = client.get("/api/v1/report", params={"drug": "ASPIRIN"})

        assert response.status_code == 400
        assert "not a supported drug" in response.json()["detail"]


class TestAnalyzeRoute:

    def test_brand_names_resolved(self, client):
        response = _analyze(client, "plavix, coumadin", patient_id="PT-9")
        body = response.json()

        assert response.status_code == 200
        assert [r["drug"] for r in body] == ["CLOPIDOGREL", "WARFARIN"]
        assert all(r["patient_id"] == "PT-9" for r in body)

    def test_wrong_extension(self, client):
        response = _analyze(client, "warfarin", filename="patient.txt")

        assert response.status_code == 400
        assert "Invalid file format" in response.json()["detail"]

    def test_unrecognized_drug(self, client):
        response = _analyze(client, "xqz")

        assert response.status_code == 400
        assert "xqz" in response.json()["detail"]

    def test_blank_drug_list(self, client):
        response = _analyze(client, " , ")

        assert response.status_code == 400
        assert response.json()["detail"] == "No drugs provided."

    def test_empty_vcf(self, client):
        response = _analyze(client, "warfarin", content=b"")

        assert response.status_code == 400
        assert "Invalid VCF" in response.json()["detail"]


    def test_corrupt_gzip_vcf(self, client):
        data = bytearray(gzip.compress(SAMPLE_VCF))
        for i in range(12, len(data) - 8):
            data[i] ^= 0xA5

        response = _analyze(client, "warfarin", content=bytes(data), filename="patient.vcf.gz")

        assert response.status_code == 400
        assert "Corrupt" in response.json()["detail"]


class TestVisualRoute:

    def test_white_pill(self, client):
        response = client.post("/api/v1/identify/visual", json={"pixels": [[250, 250, 250]] * 4})
        body = response.json()

        assert response.status_code == 200
        assert body["bucket"] == "white"
        assert body["drug_id"] == "CODEINE"
        assert 0.82 <= body["confidence"] <= 0.90
        assert body["appearance"]["shape"] == "Round tablet"

    def test_no_pixels(self, client):
        response = client.post("/api/v1/identify/visual", json={"pixels": []})

        assert response.status_code == 400

    @pytest.mark.parametrize("pixel", [[999, 10, 10], [10, -5, 10], [10, 10, 256]])
    def test_channel_out_of_range(self, client, pixel):
        response = client.post("/api/v1/identify/visual", json={"pixels": [pixel]})

        assert response.status_code == 422
