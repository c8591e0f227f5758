from __future__ import annotations

import pytest

from impresor.models.cfdi import Cfdi
from impresor.utils.catalogs import reload_catalogs

SELLO_CFD = "A" * 150 + "xYz12345"
SELLO_SAT = "S" * 172


async def fake_to_words(amount, currency) -> str:
    return f"WORDS {amount} {currency}"


@pytest.fixture(autouse=True)
def isolated_catalogs(tmp_path, monkeypatch):
    """Point catalog overrides at an empty dir so user config never leaks in."""
    override_dir = tmp_path / "overrides"
    override_dir.mkdir()
    monkeypatch.setenv("IMPRESOR_CATALOG_DIR", str(override_dir))
    reload_catalogs()
    yield override_dir
    reload_catalogs()


# --- CFDI fixtures ---


@pytest.fixture
def ingreso_dict() -> dict:
    return {
        "tipoDeComprobante": "I",
        "serie": "A",
        "folio": "1001",
        "fecha": "2024-03-15T10:30:00",
        "lugar": "64000",
        "moneda": "MXN",
        "formaPago": "03",
        "metodoPago": "PUE",
        "condicionesDePago": "Contado",
        "noCertificado": "30001000000400002434",
        "subTotal": "1000.00",
        "descuento": "0.00",
        "total": "1160.00",
        "totalImpuestosTrasladados": "160.00",
        "emisor": {
            "rfc": "EKU9003173C9",
            "nombre": "ESCUELA KEMPER URGATE",
            "regimenFiscal": "601",
        },
        "receptor": {
            "rfc": "URE180429TM6",
            "nombre": "UNIVERSIDAD ROBOTICA ESPAÑOLA",
            "usoCFDI": "G03",
        },
        "conceptos": [
            {
                "clave": "84111506",
                "cantidad": "1",
                "claveUnidad": "E48",
                "descripcion": "Servicios de facturación",
                "valorUnitario": "1000.00",
                "descuento": "0",
                "importe": "1000.00",
                "traslados": [{"impuesto": "002", "tipoFactor": "Tasa", "importe": "160.00"}],
                "retenciones": [],
            }
        ],
        "cadenaOriginalCC": "||1.1|UUID|2024-03-15T10:31:00||",
    }


@pytest.fixture
def ingreso(ingreso_dict) -> Cfdi:
    return Cfdi.from_dict(ingreso_dict)


@pytest.fixture
def stamped_dict(ingreso_dict) -> dict:
    return {
        **ingreso_dict,
        "timbreFiscalDigital": {
            "uuid": "6C1A5F2E-0D3B-4C7A-9F1E-2B8D4A6C0E11",
            "fechaTimbrado": "2024-03-15T10:31:00",
            "selloCFD": SELLO_CFD,
            "selloSAT": SELLO_SAT,
            "noCertificadoSAT": "30001000000400002495",
        },
    }


@pytest.fixture
def stamped(stamped_dict) -> Cfdi:
    return Cfdi.from_dict(stamped_dict)


@pytest.fixture
def pago_dict(ingreso_dict) -> dict:
    return {
        **ingreso_dict,
        "tipoDeComprobante": "P",
        "moneda": "XXX",
        "subTotal": "0",
        "total": "0",
        "conceptos": [
            {
                "clave": "84111506",
                "cantidad": "1",
                "claveUnidad": "ACT",
                "descripcion": "Pago",
                "valorUnitario": "0",
                "importe": "0",
            }
        ],
        "pagos": [
            {
                "fecha": "2024-04-01T12:00:00",
                "formaPago": "03",
                "moneda": "MXN",
                "monto": "1160.00",
                "doctoRelacionados": [
                    {
                        "uuid": "11111111-2222-3333-4444-555555555555",
                        "metodoPago": "PPD",
                        "moneda": "MXN",
                        "numParcialidad": "1",
                        "saldoAnterior": "2320.00",
                        "importePagado": "1160.00",
                        "saldoInsoluto": "1160.00",
                    }
                ],
            },
            {
                "fecha": "2024-05-01T12:00:00",
                "formaPago": "01",
                "moneda": "USD",
                "monto": "50",
                "tipoCambio": "17.05",
                "doctoRelacionados": [],
            },
        ],
    }


@pytest.fixture
def pago(pago_dict) -> Cfdi:
    return Cfdi.from_dict(pago_dict)
