from __future__ import annotations

import logging
from collections.abc import Mapping
from enum import Enum
from functools import cache
from importlib.resources import files
from types import MappingProxyType

import yaml

from impresor import config

logger = logging.getLogger(__name__)


class Catalog(str, Enum):
    """SAT code catalogs, named after their YAML data file."""

    CLAVE_UNIDAD = "clave_unidad"
    IMPUESTO = "impuesto"
    FORMA_PAGO = "forma_pago"
    METODO_PAGO = "metodo_pago"
    MONEDA = "moneda"
    REGIMEN_FISCAL = "regimen_fiscal"
    TIPO_COMPROBANTE = "tipo_comprobante"
    TIPO_RELACION = "tipo_relacion"
    USO_CFDI = "uso_cfdi"


def _normalize(data: object) -> dict[str, str]:
    return {str(code): str(desc) for code, desc in data.items()}  # type: ignore[attr-defined]


def _load_packaged(catalog: Catalog) -> dict[str, str]:
    resource = files("impresor") / "catalogs" / f"{catalog.value}.yaml"
    return _normalize(yaml.safe_load(resource.read_text(encoding="utf-8")) or {})


def _load_override(catalog: Catalog) -> dict[str, str]:
    """Read the user override for *catalog*, if one exists.

    An unreadable or malformed file, or one whose top level is not a
    mapping, is ignored with a warning.
    """
    path = config.get_catalog_override_dir() / f"{catalog.value}.yaml"
    if not path.is_file():
        return {}
    try:
        data = config.load_yaml(path)
    except (yaml.YAMLError, OSError):
        logger.warning("Ignoring catalog override %s: expected a mapping", path, exc_info=True)
        return {}
    if not isinstance(data, dict):
        logger.warning("Ignoring catalog override %s: expected a mapping", path)
        return {}
    return _normalize(data)


@cache
def get_catalogs() -> Mapping[Catalog, Mapping[str, str]]:
    """Load every catalog once per process and return read-only views."""
    catalogs = {}
    for catalog in Catalog:
        entries = _load_packaged(catalog)
        overrides = _load_override(catalog)
        entries.update(overrides)
        logger.debug(
            "Loaded catalog %s: %d entries (%d overrides)",
            catalog.value,
            len(entries),
            len(overrides),
        )
        catalogs[catalog] = MappingProxyType(entries)
    return MappingProxyType(catalogs)


def reload_catalogs() -> None:
    """Drop the cached catalogs so the next lookup reads the files again."""
    get_catalogs.cache_clear()


def lookup(catalog: Catalog | str, code: str | None) -> str:
    """Return the bare description for *code*, or "" when unknown."""
    try:
        key = Catalog(catalog)
    except ValueError:
        return ""
    if code is None:
        return ""
    return get_catalogs()[key].get(str(code), "")


def describe(catalog: Catalog | str, code: str | None) -> str:
    """Return "<code> - <description>", or "" when the code is not in the catalog."""
    description = lookup(catalog, code)
    if not description:
        return ""
    return f"{code} - {description}"
