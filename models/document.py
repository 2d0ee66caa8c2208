from __future__ import annotations

import logging
from dataclasses import dataclass, asdict
from enum import Enum
from typing import Dict, Optional

logger = logging.getLogger(__name__)

PDF_SUFFIX = ".pdf"
RAW_SUFFIX = "_asli"
DIAGNOSTIC_SEPARATOR = "<br>================================================<br>"


class Orientation(str, Enum):
    PORTRAIT = "P"
    LANDSCAPE = "L"

    @property
    def wkhtmltopdf_name(self) -> str:
        return "Landscape" if self is Orientation.LANDSCAPE else "Portrait"

    @classmethod
    def coerce(cls, value: "Orientation | str | None") -> "Orientation":
        """Accept ``"P"``/``"L"`` codes or ``portrait``/``landscape`` names.

        Unknown values fall back to :attr:`PORTRAIT`.
        """

        if isinstance(value, cls):
            return value
        key = str(value or "").strip().upper()
        for member in cls:
            if key in (member.value, member.name):
                return member
        if value:
            logger.warning("Unknown orientation %r, using portrait", value)
        return cls.PORTRAIT


class PageSize(str, Enum):
    A3 = "A3"
    A4 = "A4"
    A5 = "A5"
    LETTER = "Letter"
    LEGAL = "Legal"
    F4 = "F4"

    @property
    def wkhtmltopdf_options(self) -> Dict[str, str]:
        # wkhtmltopdf has no named F4 (folio) size
        if self is PageSize.F4:
            return {"page-width": "215mm", "page-height": "330mm"}
        return {"page-size": self.value}

    @classmethod
    def coerce(cls, value: "PageSize | str | None") -> "PageSize":
        """Case-insensitive lookup; unknown values fall back to :attr:`A4`."""

        if isinstance(value, cls):
            return value
        key = str(value or "").strip().lower()
        for member in cls:
            if key == member.value.lower():
                return member
        if value:
            logger.warning("Unknown page size %r, using A4", value)
        return cls.A4


class OutputMode(str, Enum):
    """Where a rendered document goes.

    ``FILE`` saves to disk, ``STRING`` only returns the bytes and
    ``FILE_INLINE`` saves to disk and also returns the bytes so the caller
    can stream them inline.
    """

    FILE = "F"
    STRING = "S"
    FILE_INLINE = "FI"

    @property
    def writes_file(self) -> bool:
        return self is not OutputMode.STRING

    @property
    def returns_bytes(self) -> bool:
        return self is not OutputMode.FILE


@dataclass
class RenderRequest:
    """Everything needed for one HTML to PDF conversion."""

    html_body: str
    output_path: str
    style_sheet: Optional[str] = None
    orientation: Orientation = Orientation.PORTRAIT
    page_size: PageSize = PageSize.A4

    def __post_init__(self) -> None:
        self.output_path = str(self.output_path)
        self.orientation = Orientation.coerce(self.orientation)
        self.page_size = PageSize.coerce(self.page_size)

    @property
    def pdf_path(self) -> str:
        return self.output_path + PDF_SUFFIX

    @property
    def raw_path(self) -> str:
        return self.output_path + RAW_SUFFIX


@dataclass
class RenderResult:
    """Outcome of a render: either a PDF on disk or the preserved raw HTML."""

    ok: bool
    html: str
    pdf_path: Optional[str] = None
    raw_path: Optional[str] = None
    diagnostic: Optional[str] = None
    pdf_bytes: Optional[bytes] = None

    @classmethod
    def succeeded(
        cls, request: RenderRequest, pdf_bytes: Optional[bytes] = None, written: bool = True
    ) -> "RenderResult":
        return cls(
            ok=True,
            html=request.html_body,
            pdf_path=request.pdf_path if written else None,
            pdf_bytes=pdf_bytes,
        )

    @classmethod
    def failed(cls, request: RenderRequest, diagnostic: str) -> "RenderResult":
        return cls(
            ok=False,
            html=request.html_body,
            raw_path=request.raw_path,
            diagnostic=diagnostic,
        )

    def diagnostic_echo(self) -> str:
        """Original HTML, a separator line and the error message."""

        if self.ok:
            return ""
        return f"{self.html}{DIAGNOSTIC_SEPARATOR}{self.diagnostic or ''}"

    def to_dict(self) -> Dict:
        d = asdict(self)
        d.pop("pdf_bytes", None)
        return d
