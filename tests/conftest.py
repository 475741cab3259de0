"""
Shared fixtures: in-memory PDF/DOCX builders and fake Eden AI responses.
"""

import io
import json
from unittest.mock import MagicMock

import pytest
import requests
from docx import Document as DocxDocument


def _pdf_bytes(pages):
    """Assemble a minimal PDF with one Helvetica text line per page."""
    page_ids = [4 + 2 * i for i in range(len(pages))]
    kids = " ".join(f"{p} 0 R" for p in page_ids)
    objects = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        f"<< /Type /Pages /Kids [{kids}] /Count {len(pages)} >>".encode(),
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    ]
    for page_id, text in zip(page_ids, pages):
        objects.append(
            f"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
            f"/Resources << /Font << /F1 3 0 R >> >> /Contents {page_id + 1} 0 R >>".encode()
        )
        stream = f"BT /F1 24 Tf 72 700 Td ({text}) Tj ET".encode()
        objects.append(b"<< /Length %d >>\nstream\n" % len(stream) + stream + b"\nendstream")

    out = bytearray(b"%PDF-1.4\n")
    offsets = []
    for number, body in enumerate(objects, start=1):
        offsets.append(len(out))
        out += f"{number} 0 obj\n".encode() + body + b"\nendobj\n"

    xref_offset = len(out)
    out += f"xref\n0 {len(objects) + 1}\n".encode()
    out += b"0000000000 65535 f \n"
    for offset in offsets:
        out += f"{offset:010d} 00000 n \n".encode()
    out += (
        f"trailer\n<< /Size {len(objects) + 1} /Root 1 0 R >>\n"
        f"startxref\n{xref_offset}\n%%EOF\n"
    ).encode()
    return bytes(out)


def _docx_bytes(paragraphs):
    doc = DocxDocument()
    for paragraph in paragraphs:
        doc.add_paragraph(paragraph)
    buf = io.BytesIO()
    doc.save(buf)
    return buf.getvalue()


def _response(status, body=None):
    r = requests.Response()
    r.status_code = status
    r.url = "https://api.edenai.run/v2/text/ai_detection"
    if body is None:
        r._content = b""
    elif isinstance(body, str):
        r._content = body.encode("utf-8")
    else:
        r._content = json.dumps(body).encode("utf-8")
    r.encoding = "utf-8"
    return r


@pytest.fixture
def make_pdf():
    return _pdf_bytes


@pytest.fixture
def make_docx():
    return _docx_bytes


@pytest.fixture
def make_response():
    return _response


@pytest.fixture
def http_error(make_response):
    def _error(status, body=None):
        return requests.HTTPError(f"{status} Error", response=make_response(status, body))
    return _error


@pytest.fixture
def session():
    """requests.Session stand-in; set session.post.return_value / side_effect per test."""
    s = MagicMock(spec=requests.Session)
    s.headers = {}
    return s
