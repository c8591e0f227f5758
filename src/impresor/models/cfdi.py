from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from enum import Enum


class ReceiptType(Enum):
    """CFDI receipt type (c_TipoDeComprobante), with a fallback for unknown codes."""

    INGRESO = "I"
    EGRESO = "E"
    TRASLADO = "T"
    NOMINA = "N"
    PAGO = "P"
    UNRECOGNIZED = ""

    @classmethod
    def parse(cls, code: str | None) -> ReceiptType:
        """Case-insensitive parse; anything unknown maps to UNRECOGNIZED."""
        if not code:
            return cls.UNRECOGNIZED
        try:
            return cls(code.upper())
        except ValueError:
            return cls.UNRECOGNIZED


@dataclass(frozen=True)
class Emisor:
    """Issuer of the CFDI."""

    rfc: str
    nombre: str | None = None
    regimen_fiscal: str | None = None

    @classmethod
    def from_dict(cls, d: dict) -> Emisor:
        return cls(
            rfc=d["rfc"],
            nombre=d.get("nombre"),
            regimen_fiscal=d.get("regimenFiscal"),
        )


@dataclass(frozen=True)
class Receptor:
    """Recipient of the CFDI; foreign recipients carry residence and tax id."""

    rfc: str
    nombre: str | None = None
    uso_cfdi: str | None = None
    residencia_fiscal: str | None = None
    num_reg_id_trib: str | None = None

    @classmethod
    def from_dict(cls, d: dict) -> Receptor:
        return cls(
            rfc=d["rfc"],
            nombre=d.get("nombre"),
            uso_cfdi=d.get("usoCFDI"),
            residencia_fiscal=d.get("residenciaFiscal"),
            num_reg_id_trib=d.get("numRegIdTrib"),
        )


@dataclass(frozen=True)
class Impuesto:
    """A transferred (traslado) or withheld (retencion) tax on a concept."""

    impuesto: str
    tipo_factor: str | None = None  # Tasa | Cuota | Exento
    importe: str | None = None  # absent when Exento

    @property
    def is_exento(self) -> bool:
        return (self.tipo_factor or "").lower() == "exento"

    @classmethod
    def from_dict(cls, d: dict) -> Impuesto:
        return cls(
            impuesto=str(d.get("impuesto", "")),
            tipo_factor=d.get("tipoFactor"),
            importe=d.get("importe"),
        )


@dataclass(frozen=True)
class Concepto:
    clave: str | None = None
    cantidad: str | None = None
    clave_unidad: str | None = None
    descripcion: str | None = None
    valor_unitario: str | None = None
    descuento: str | None = None
    importe: str | None = None
    traslados: tuple[Impuesto, ...] = ()
    retenciones: tuple[Impuesto, ...] = ()

    @classmethod
    def from_dict(cls, d: dict) -> Concepto:
        return cls(
            clave=d.get("clave"),
            cantidad=d.get("cantidad"),
            clave_unidad=d.get("claveUnidad"),
            descripcion=d.get("descripcion"),
            valor_unitario=d.get("valorUnitario"),
            descuento=d.get("descuento"),
            importe=d.get("importe"),
            traslados=tuple(Impuesto.from_dict(t) for t in d.get("traslados") or []),
            retenciones=tuple(Impuesto.from_dict(r) for r in d.get("retenciones") or []),
        )


@dataclass(frozen=True)
class CfdiRelacionado:
    tipo_relacion: str | None = None
    uuid: str | None = None

    @classmethod
    def from_dict(cls, d: dict) -> CfdiRelacionado:
        return cls(tipo_relacion=d.get("tipoRelacion"), uuid=d.get("uuid"))


@dataclass(frozen=True)
class TimbreFiscalDigital:
    """Digital stamp issued by the certification provider (PAC)."""

    uuid: str | None = None
    fecha_timbrado: str | None = None
    sello_cfd: str | None = None
    sello_sat: str | None = None
    no_certificado_sat: str | None = None

    @classmethod
    def from_dict(cls, d: dict) -> TimbreFiscalDigital:
        return cls(
            uuid=d.get("uuid"),
            fecha_timbrado=d.get("fechaTimbrado"),
            sello_cfd=d.get("selloCFD"),
            sello_sat=d.get("selloSAT"),
            no_certificado_sat=d.get("noCertificadoSAT"),
        )


@dataclass(frozen=True)
class DoctoRelacionado:
    """An invoice settled (fully or partially) by a payment complement."""

    uuid: str | None = None
    metodo_pago: str | None = None
    moneda: str | None = None
    tipo_cambio: str | None = None
    num_parcialidad: str | None = None
    saldo_anterior: str | None = None
    importe_pagado: str | None = None
    saldo_insoluto: str | None = None

    @classmethod
    def from_dict(cls, d: dict) -> DoctoRelacionado:
        return cls(
            uuid=d.get("uuid"),
            metodo_pago=d.get("metodoPago"),
            moneda=d.get("moneda"),
            tipo_cambio=d.get("tipoCambio"),
            num_parcialidad=d.get("numParcialidad"),
            saldo_anterior=d.get("saldoAnterior"),
            importe_pagado=d.get("importePagado"),
            saldo_insoluto=d.get("saldoInsoluto"),
        )


@dataclass(frozen=True)
class ComplementoPago:
    fecha: str | None = None
    forma_pago: str | None = None
    moneda: str | None = None
    monto: str | None = None
    tipo_cambio: str | None = None
    docto_relacionados: tuple[DoctoRelacionado, ...] = ()

    @classmethod
    def from_dict(cls, d: dict) -> ComplementoPago:
        return cls(
            fecha=d.get("fecha"),
            forma_pago=d.get("formaPago"),
            moneda=d.get("moneda"),
            monto=d.get("monto"),
            tipo_cambio=d.get("tipoCambio"),
            docto_relacionados=tuple(
                DoctoRelacionado.from_dict(doc) for doc in d.get("doctoRelacionados") or []
            ),
        )


@dataclass(frozen=True)
class Cfdi:
    """A parsed CFDI, as handed over by the XML parser.

    Monetary values are kept as the parser's strings; formatting happens
    only when the layout is built.
    """

    tipo_de_comprobante: str
    emisor: Emisor
    receptor: Receptor
    serie: str | None = None
    folio: str | None = None
    fecha: str | None = None
    lugar: str | None = None
    moneda: str | None = None
    forma_pago: str | None = None
    metodo_pago: str | None = None
    tipo_cambio: str | None = None
    condiciones_de_pago: str | None = None
    confirmacion: str | None = None
    no_certificado: str | None = None
    sub_total: str | None = None
    descuento: str | None = None
    total: str | None = None
    total_impuestos_trasladados: str | None = None
    total_impuestos_retenidos: str | None = None
    conceptos: tuple[Concepto, ...] = ()
    cfdi_relacionado: CfdiRelacionado | None = None
    timbre_fiscal_digital: TimbreFiscalDigital | None = None
    cadena_original_cc: str | None = None
    pagos: tuple[ComplementoPago, ...] = ()

    @property
    def receipt_type(self) -> ReceiptType:
        return ReceiptType.parse(self.tipo_de_comprobante)

    def with_cadena_original(self, cadena: str) -> Cfdi:
        """Return a copy whose fiscal chain string is replaced by *cadena*."""
        return dataclasses.replace(self, cadena_original_cc=cadena)

    @classmethod
    def from_dict(cls, d: dict) -> Cfdi:
        """Create a Cfdi from the parser's camelCase dict.

        Raises KeyError when emisor, receptor or tipoDeComprobante is missing.
        """
        relacionado = d.get("cfdiRelacionado")
        timbre = d.get("timbreFiscalDigital")
        return cls(
            tipo_de_comprobante=d["tipoDeComprobante"],
            emisor=Emisor.from_dict(d["emisor"]),
            receptor=Receptor.from_dict(d["receptor"]),
            serie=d.get("serie"),
            folio=d.get("folio"),
            fecha=d.get("fecha"),
            lugar=d.get("lugar"),
            moneda=d.get("moneda"),
            forma_pago=d.get("formaPago"),
            metodo_pago=d.get("metodoPago"),
            tipo_cambio=d.get("tipoCambio"),
            condiciones_de_pago=d.get("condicionesDePago"),
            confirmacion=d.get("confirmacion"),
            no_certificado=d.get("noCertificado"),
            sub_total=d.get("subTotal"),
            descuento=d.get("descuento"),
            total=d.get("total"),
            total_impuestos_trasladados=d.get("totalImpuestosTrasladados"),
            total_impuestos_retenidos=d.get("totalImpuestosRetenidos"),
            conceptos=tuple(Concepto.from_dict(c) for c in d.get("conceptos") or []),
            cfdi_relacionado=CfdiRelacionado.from_dict(relacionado) if relacionado else None,
            timbre_fiscal_digital=TimbreFiscalDigital.from_dict(timbre) if timbre else None,
            cadena_original_cc=d.get("cadenaOriginalCC"),
            pagos=tuple(ComplementoPago.from_dict(p) for p in d.get("pagos") or []),
        )
