"""
Unit tests for the VCF acceptance check.
"""

import gzip
import re

import pytest
from pharmaguard.services.vcf.validator import (
    VcfValidationError,
    generate_patient_id,
    validate_vcf_text,
)


HEADER = "#CHROM\tPOS\tID\tREF\tALT\tQUAL\tFILTER\tINFO\tFORMAT\tSAMPLE"
RECORD = "10\t96541616\trs4244285\tG\tA\t99\tPASS\t.\tGT\t1/1"


class TestValidateVcfText:

    def test_column_header_only(self):
        check = validate_vcf_text(HEADER + "\n")

        assert check.valid is True
        assert check.variant_count == 0

    def test_data_lines_without_header(self):
        check = validate_vcf_text(f"{RECORD}\n{RECORD}\n")

        assert check.valid is True
        assert check.variant_count == 2

    def test_fileformat_marker_only(self):
        assert validate_vcf_text("##fileformat=VCFv4.2\n").valid is True

    @pytest.mark.parametrize("content", ["", "\n\n", "##comment only\n", "   \n"])
    def test_nothing_recognizable(self, content):
        check = validate_vcf_text(content)

        assert check.valid is False
        assert check.variant_count == 0

    def test_counts_only_data_lines(self):
        content = "\n".join(["##fileformat=VCFv4.2", "##source=test", HEADER, RECORD, "", RECORD])
        assert validate_vcf_text(content).variant_count == 2

    def test_supplied_patient_id(self):
        assert validate_vcf_text(HEADER, patient_id="PT-42").patient_id == "PT-42"

    def test_generated_patient_id(self):
        check = validate_vcf_text(HEADER)
        assert re.fullmatch(r"PATIENT_[0-9A-F]{3}", check.patient_id)

    def test_generate_patient_id_format(self):
        for _ in range(20):
            assert re.fullmatch(r"PATIENT_[0-9A-F]{3}", generate_patient_id())

    # ===== Bytes input =====

    def test_utf8_bytes(self):
        check = validate_vcf_text(f"{HEADER}\n{RECORD}\n".encode("utf-8"))

        assert check.valid is True
        assert check.variant_count == 1

    def test_gzip_bytes(self):
        data = gzip.compress(f"##fileformat=VCFv4.2\n{HEADER}\n{RECORD}\n".encode("utf-8"))
        check = validate_vcf_text(data)

        assert check.valid is True
        assert check.variant_count == 1

    def test_invalid_utf8_raises(self):
        with pytest.raises(VcfValidationError, match="not a valid text-based VCF"):
            validate_vcf_text(b"\xff\xfe\x00binary")

    def test_corrupt_gzip_raises(self):
        with pytest.raises(VcfValidationError, match="Corrupt"):
            validate_vcf_text(b"\x1f\x8b" + b"not really gzip")

    def test_corrupt_gzip_body_raises(self):
        data = bytearray(gzip.compress(f"##fileformat=VCFv4.2\n{HEADER}\n{RECORD}\n".encode("utf-8")))
        for i in range(12, len(data) - 8):
            data[i] ^= 0xA5

        with pytest.raises(VcfValidationError, match="Corrupt"):
            validate_vcf_text(bytes(data))

    def test_validation_error_is_value_error(self):
        assert issubclass(VcfValidationError, ValueError)
