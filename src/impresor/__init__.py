from __future__ import annotations

from impresor.models.cfdi import Cfdi
from impresor.models.options import Options
from impresor.services.document import generate_pdf_content

__all__ = ["Cfdi", "Options", "generate_pdf_content"]
