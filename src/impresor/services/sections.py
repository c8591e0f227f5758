from __future__ import annotations

from typing import Any

from impresor.config import LOGO_FIT, QR_FIT, SAT_VERIFY_URL, WRAP_WIDTH
from impresor.models.cfdi import Cfdi, ComplementoPago, Concepto, DoctoRelacionado, Impuesto
from impresor.services.layout import SPACER, Row, pad_row, table, title_row, zebra_layout
from impresor.utils.catalogs import Catalog, describe, lookup
from impresor.utils.formatters import break_every_n, format_currency, or_default

# Header rows preceding the logo cell's rowSpan
_HEADER_ROWS = 5
# QR cell spans the six stamp rows plus its own row and the chain row
_QR_ROW_SPAN = 8


def build_header(cfdi: Cfdi, logo_image: str | None = None) -> dict[str, Any]:
    """Series, folio, date, place of issue and receipt type, with an optional logo."""
    body: list[Row] = [
        ["", "SERIE:", or_default(cfdi.serie)],
        ["", "FOLIO:", or_default(cfdi.folio)],
        ["", "FECHA:", or_default(cfdi.fecha)],
        ["", "EXPEDICION:", or_default(cfdi.lugar)],
        ["", "COMPROBANTE:", describe(Catalog.TIPO_COMPROBANTE, cfdi.tipo_de_comprobante)],
    ]
    widths = ["auto", "auto", "auto"]
    if logo_image:
        body[0][0] = {"rowSpan": _HEADER_ROWS, "image": logo_image, "fit": list(LOGO_FIT)}
        widths = ["*", "auto", "auto"]
    return {"alignment": "center", **table(body, widths, fontSize=9)}


def build_issuer(cfdi: Cfdi) -> dict[str, Any]:
    emisor = cfdi.emisor
    body = [
        title_row("EMISOR", 4),
        ["NOMBRE:", or_default(emisor.nombre), "RFC:", or_default(emisor.rfc)],
        pad_row(
            [
                "REGIMEN FISCAL:",
                {"colSpan": 3, "text": describe(Catalog.REGIMEN_FISCAL, emisor.regimen_fiscal)},
            ],
            4,
        ),
    ]
    return table(body, ["auto", "*", "auto", "auto"])


def recipient_address_rows(cfdi: Cfdi, address: str | None = None) -> list[Row]:
    """Address / usage row, plus the foreign residence row when both fields are set."""
    receptor = cfdi.receptor
    uso_cfdi = describe(Catalog.USO_CFDI, receptor.uso_cfdi)
    if address:
        rows = [["DOMICILIO:", address, "USO CFDI:", {"colSpan": 1, "text": uso_cfdi}]]
    else:
        rows = [pad_row(["USO CFDI:", {"colSpan": 3, "text": uso_cfdi}], 4)]
    if receptor.residencia_fiscal and receptor.num_reg_id_trib:
        rows.append(
            [
                "RESIDENCIA FISCAL:",
                receptor.residencia_fiscal,
                "NUMERO ID TRIB.:",
                receptor.num_reg_id_trib,
            ]
        )
    return rows


def build_recipient(cfdi: Cfdi, address: str | None = None) -> dict[str, Any]:
    receptor = cfdi.receptor
    body = [
        title_row("RECEPTOR", 4),
        ["NOMBRE:", or_default(receptor.nombre), "RFC:", or_default(receptor.rfc)],
        *recipient_address_rows(cfdi, address),
    ]
    return table(body, ["auto", "*", "auto", "auto"])


def build_general_data(cfdi: Cfdi) -> dict[str, Any]:
    """Currency, payment form/method and terms. Only for Ingreso and Egreso."""
    body = [
        title_row("DATOS GENERALES DEL COMPROBANTE", 4),
        [
            "MONEDA:",
            describe(Catalog.MONEDA, cfdi.moneda),
            "FORMA PAGO:",
            describe(Catalog.FORMA_PAGO, cfdi.forma_pago),
        ],
        [
            "TIPO DE CAMBIO:",
            or_default(cfdi.tipo_cambio),
            "CONDICIONES DE PAGO:",
            or_default(cfdi.condiciones_de_pago),
        ],
        [
            "CLAVE CONFIRMACION:",
            or_default(cfdi.confirmacion),
            "METODO DE PAGO:",
            describe(Catalog.METODO_PAGO, cfdi.metodo_pago),
        ],
    ]
    return table(body, [95, "*", 95, "*"])


def _tax_rows(impuestos: tuple[Impuesto, ...], *, allow_exento: bool) -> dict[str, Any]:
    rows = []
    for tax in impuestos:
        if allow_exento and tax.is_exento:
            amount = "EXENTO"
        else:
            amount = format_currency(tax.importe)
        rows.append([describe(Catalog.IMPUESTO, tax.impuesto), amount])
    return {"table": {"body": rows}, "layout": "noBorders"}


def build_taxes(concepto: Concepto) -> list[Any]:
    """Traslados / Retenciones stack for one concept; empty groups are left out."""
    stack: list[Any] = []
    if concepto.traslados:
        stack.append("Traslados")
        stack.append(_tax_rows(concepto.traslados, allow_exento=True))
    if concepto.retenciones:
        stack.append("Retenciones")
        stack.append(_tax_rows(concepto.retenciones, allow_exento=False))
    return stack


def _concept_row(concepto: Concepto) -> Row:
    return [
        or_default(concepto.clave),
        or_default(concepto.cantidad),
        or_default(concepto.clave_unidad),
        lookup(Catalog.CLAVE_UNIDAD, concepto.clave_unidad),
        or_default(concepto.descripcion),
        format_currency(concepto.valor_unitario),
        format_currency(concepto.descuento),
        {"colSpan": 2, "stack": build_taxes(concepto)},
        "",
        format_currency(concepto.importe),
    ]


def build_concepts(cfdi: Cfdi) -> dict[str, Any]:
    body = [
        title_row("PARTIDAS DEL COMPROBANTE", 10),
        [
            "ClaveProdServ",
            "Cant",
            "Clave Unidad",
            "Unidad",
            "Descripción",
            "Valor Unitario",
            "Descuento",
            {"colSpan": 2, "text": "Impuesto"},
            "",
            "Importe",
        ],
        *(_concept_row(c) for c in cfdi.conceptos),
    ]
    widths = ["auto", "auto", "auto", "auto", "*", "auto", "auto", "auto", "auto", "auto"]
    return table(body, widths, style="tableList", layout=zebra_layout())


def build_related(cfdi: Cfdi, amount_in_words: str) -> dict[str, Any]:
    """Related CFDI reference and invoice totals. Only for Ingreso and Egreso."""
    relacionado = cfdi.cfdi_relacionado
    tipo_relacion = describe(Catalog.TIPO_RELACION, relacionado.tipo_relacion) if relacionado else ""
    uuid = or_default(relacionado.uuid) if relacionado else ""
    body = [
        title_row("CFDI RELACIONADO", 4),
        ["TIPO RELACION:", tipo_relacion, "CFDI RELACIONADO:", uuid],
        ["SUBTOTAL:", format_currency(cfdi.sub_total), "TOTAL:", format_currency(cfdi.total)],
        [
            "DESCUENTO:",
            format_currency(cfdi.descuento),
            {"text": "IMPORTE CON LETRA:"},
            {"text": amount_in_words},
        ],
        [
            "TOTAL IMP. TRASLADADOS:",
            format_currency(cfdi.total_impuestos_trasladados),
            "TOTAL IMP. RETENIDOS:",
            format_currency(cfdi.total_impuestos_retenidos),
        ],
    ]
    return table(body, ["auto", "*", "auto", "*"])


def build_related_documents(docs: tuple[DoctoRelacionado, ...]) -> list[Row]:
    """Table body listing the invoices a payment settles."""
    rows: list[Row] = [
        title_row("DOCUMENTOS RELACIONADOS", 8),
        [
            "UUID",
            "Método de Pago",
            "Moneda",
            "Tipo de Cambio",
            "Num. Parcialidad",
            "Importe Saldo Anterior",
            "Importe Pagado",
            "Importe Saldo Insoluto",
        ],
    ]
    for doc in docs:
        rows.append(
            [
                or_default(doc.uuid),
                or_default(doc.metodo_pago),
                or_default(doc.moneda),
                or_default(doc.tipo_cambio),
                or_default(doc.num_parcialidad),
                format_currency(doc.saldo_anterior),
                format_currency(doc.importe_pagado),
                format_currency(doc.saldo_insoluto),
            ]
        )
    return rows


def _payment_info(pago: ComplementoPago) -> dict[str, Any]:
    if pago.tipo_cambio:
        exchange_row = pad_row(["TIPO DE CAMBIO:", pago.tipo_cambio], 4)
    else:
        exchange_row = pad_row([], 4)
    body = [
        title_row("INFORMACIÓN DE PAGO", 4),
        [
            "FECHA:",
            or_default(pago.fecha),
            "FORMA PAGO:",
            describe(Catalog.FORMA_PAGO, pago.forma_pago),
        ],
        ["MONEDA:", describe(Catalog.MONEDA, pago.moneda), "MONTO:", format_currency(pago.monto)],
        exchange_row,
    ]
    return table(body, [95, "*", 95, "*"])


def build_payments(pagos: tuple[ComplementoPago, ...]) -> list[Any]:
    """Payment info and related documents for each payment complement. Only for Pago."""
    fragments: list[Any] = []
    for pago in pagos:
        fragments.append(_payment_info(pago))
        fragments.append(SPACER)
        fragments.append(
            table(
                build_related_documents(pago.docto_relacionados),
                ["*", "auto", "auto", 30, 20, "auto", "auto", "auto"],
                style="tableList",
                layout=zebra_layout(),
            )
        )
        fragments.append(SPACER)
    return fragments


def build_observations(text: str) -> dict[str, Any]:
    body = [[{"text": "OBSERVACIONES", "style": "tableHeader"}], [text]]
    return table(body, ["*"])


def build_verification_url(cfdi: Cfdi) -> str:
    """SAT verification URL encoded in the QR code."""
    timbre = cfdi.timbre_fiscal_digital
    uuid = timbre.uuid if timbre else None
    sello = (timbre.sello_cfd if timbre else None) or ""
    return SAT_VERIFY_URL.format(
        id=or_default(uuid),
        re=or_default(cfdi.emisor.rfc),
        rr=or_default(cfdi.receptor.rfc),
        tt=or_default(cfdi.total),
        fe=sello[-8:],
    )


def build_stamp(cfdi: Cfdi) -> dict[str, Any]:
    """QR code and stamp data when stamped; the fiscal chain string always."""
    body: list[Row] = []
    timbre = cfdi.timbre_fiscal_digital
    if timbre is not None:
        qr = {"colSpan": 1, "rowSpan": _QR_ROW_SPAN, "qr": build_verification_url(cfdi), "fit": QR_FIT}
        body.extend(
            [
                pad_row([qr], 3),
                ["", "NUMERO SERIE CERTIFICADO SAT", or_default(timbre.no_certificado_sat)],
                ["", "NUMERO SERIE CERTIFICADO EMISOR", or_default(cfdi.no_certificado)],
                ["", "FECHA HORA CERTIFICACION", or_default(timbre.fecha_timbrado)],
                ["", "FOLIO FISCAL UUID", or_default(timbre.uuid)],
                ["", "SELLO DIGITAL", break_every_n(timbre.sello_cfd, WRAP_WIDTH)],
                ["", "SELLO DEL SAT", break_every_n(timbre.sello_sat, WRAP_WIDTH)],
            ]
        )
    body.append(
        ["", "CADENA ORIGINAL CC:", {"text": break_every_n(cfdi.cadena_original_cc, WRAP_WIDTH)}]
    )
    return table(body, ["auto", "auto", "*"], style="tableSat")
