from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Options:
    """Caller-supplied extras for the printed representation."""

    logo_image: str | None = None  # data URI or path understood by the renderer
    observation_text: str | None = None
    recipient_address: str | None = None
    fiscal_chain_override: str | None = None

    @classmethod
    def from_dict(cls, d: dict) -> Options:
        """Create Options from a dict; the short keys image/text/address/cadenaOriginal are accepted too."""
        return cls(
            logo_image=d.get("logo_image", d.get("image")),
            observation_text=d.get("observation_text", d.get("text")),
            recipient_address=d.get("recipient_address", d.get("address")),
            fiscal_chain_override=d.get("fiscal_chain_override", d.get("cadenaOriginal")),
        )
