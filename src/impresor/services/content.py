from __future__ import annotations

import logging
from typing import Any

from impresor.models.cfdi import Cfdi, ReceiptType
from impresor.models.options import Options
from impresor.services import amount_words
from impresor.services.amount_words import AmountToWords
from impresor.services.layout import SPACER
from impresor.services.sections import (
    build_concepts,
    build_general_data,
    build_header,
    build_issuer,
    build_observations,
    build_payments,
    build_recipient,
    build_related,
    build_stamp,
)
from impresor.utils.formatters import to_decimal

logger = logging.getLogger(__name__)


async def generate_content(
    cfdi: Cfdi,
    options: Options | None = None,
    to_words: AmountToWords = amount_words.to_words,
) -> list[Any]:
    """Assemble the document content in print order.

    General data and totals are emitted for Ingreso/Egreso, the payments
    block for Pago; other receipt types get neither. *to_words* is awaited
    once, only for Ingreso/Egreso, and its errors propagate to the caller.
    """
    opts = options or Options()
    receipt_type = cfdi.receipt_type
    logger.debug(
        "Assembling content: type=%s conceptos=%d pagos=%d",
        receipt_type.name,
        len(cfdi.conceptos),
        len(cfdi.pagos),
    )

    content: list[Any] = [
        build_header(cfdi, opts.logo_image),
        SPACER,
        build_issuer(cfdi),
        SPACER,
        build_recipient(cfdi, opts.recipient_address),
        SPACER,
    ]

    match receipt_type:
        case ReceiptType.INGRESO | ReceiptType.EGRESO:
            content += [build_general_data(cfdi), SPACER]
        case ReceiptType.PAGO:
            pass
        case _:
            logger.info(
                "Receipt type %r has no type-specific blocks; emitting reduced document",
                cfdi.tipo_de_comprobante,
            )

    content += [build_concepts(cfdi), SPACER]

    match receipt_type:
        case ReceiptType.INGRESO | ReceiptType.EGRESO:
            amount_in_words = await to_words(to_decimal(cfdi.total), cfdi.moneda)
            content += [build_related(cfdi, amount_in_words), SPACER]
        case ReceiptType.PAGO:
            content += build_payments(cfdi.pagos)

    if opts.observation_text:
        content += [build_observations(opts.observation_text), SPACER]

    content.append(build_stamp(cfdi))
    return content
