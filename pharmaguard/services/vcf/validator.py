"""
Lightweight VCF acceptance check.

Only the surface of the file is inspected: a #CHROM column header, any
data line, or a ##fileformat=VCF marker makes it acceptable. Variant
content is counted, never interpreted.
"""

from __future__ import annotations

import gzip
import logging
import uuid
import zlib
from dataclasses import dataclass
from typing import Optional, Union

logger = logging.getLogger(__name__)

FILEFORMAT_MARKER = "##fileformat=VCF"
COLUMN_HEADER_PREFIX = "#CHROM"
GZIP_MAGIC = b"\x1f\x8b"


class VcfValidationError(ValueError):
    pass


@dataclass(frozen=True)
class VcfCheck:
    valid: bool
    patient_id: str
    variant_count: int


def generate_patient_id() -> str:
    """Session patient id of the form PATIENT_XXX."""
    return f"PATIENT_{uuid.uuid4().hex[:3].upper()}"


def _decode(content: Union[str, bytes]) -> str:
    if isinstance(content, bytes):
        if content[:2] == GZIP_MAGIC:
            try:
                content = gzip.decompress(content)
            except (OSError, EOFError, zlib.error) as e:
                raise VcfValidationError("Corrupt gzip-compressed VCF.") from e
        try:
            return content.decode("utf-8")
        except UnicodeDecodeError as e:
            raise VcfValidationError("File is not a valid text-based VCF.") from e
    return content


def validate_vcf_text(
    content: Union[str, bytes],
    patient_id: Optional[str] = None,
) -> VcfCheck:
    """
    Check that uploaded text looks like a VCF file.

    Args:
        content:    Raw file text or bytes.
        patient_id: Identifier to report; a session id is generated when omitted.

    Raises:
        VcfValidationError: bytes that are not UTF-8 text.
    """
    text = _decode(content)
    lines = text.split("\n")

    has_column_header = any(line.startswith(COLUMN_HEADER_PREFIX) for line in lines)
    data_lines = [line for line in lines if not line.startswith("#") and line.strip()]

    valid = has_column_header or bool(data_lines) or FILEFORMAT_MARKER in text
    check = VcfCheck(
        valid=valid,
        patient_id=patient_id or generate_patient_id(),
        variant_count=len(data_lines),
    )

    logger.info(
        f"VCF check: valid={check.valid}, data_lines={check.variant_count}, "
        f"patient_id={check.patient_id}"
    )
    return check
