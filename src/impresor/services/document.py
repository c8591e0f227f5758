from __future__ import annotations

import logging
from typing import Any

from impresor.config import FOOTER_TEXT
from impresor.models.cfdi import Cfdi
from impresor.models.options import Options
from impresor.services import amount_words
from impresor.services.amount_words import AmountToWords
from impresor.services.content import generate_content
from impresor.services.layout import table, title_row

logger = logging.getLogger(__name__)

STYLES: dict[str, dict[str, Any]] = {
    "tableHeader": {"bold": True, "fontSize": 10, "color": "black"},
    "tableContent": {"fontSize": 8, "color": "black", "alignment": "left"},
    "tableList": {"fontSize": 7, "color": "black", "alignment": "center"},
    "tableSat": {"fontSize": 5, "color": "black", "alignment": "left"},
}


def build_footer() -> dict[str, Any]:
    row = title_row(FOOTER_TEXT, 4)
    row[0]["style"] = "tableList"
    return table([row], ["auto", "*", "auto", "auto"])


async def generate_pdf_content(
    cfdi: Cfdi,
    options: Options | None = None,
    to_words: AmountToWords = amount_words.to_words,
) -> dict[str, Any]:
    """Build the document definition handed to the PDF renderer.

    Applies the fiscal chain override from *options* (on a copy), assembles
    the content and attaches the style presets and footer.
    """
    opts = options or Options()
    if opts.fiscal_chain_override:
        logger.debug("Replacing fiscal chain string with caller-supplied value")
        cfdi = cfdi.with_cadena_original(opts.fiscal_chain_override)
    return {
        "content": await generate_content(cfdi, opts, to_words),
        "styles": {name: dict(style) for name, style in STYLES.items()},
        "defaultStyle": {},
        "footer": build_footer(),
    }
