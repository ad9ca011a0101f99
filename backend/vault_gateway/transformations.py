from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict

from vault_gateway.errors import ConfigurationError, ValidationError


class TransformationKind(str, Enum):
    FPE = "fpe"
    TOKENIZE = "tokenize"
    MASK = "mask"

    @property
    def requires_tweak(self) -> bool:
        return self is TransformationKind.FPE

    @property
    def supports_decode(self) -> bool:
        # Masking is one-way.
        return self is not TransformationKind.MASK


@dataclass(frozen=True)
class Transformation:
    name: str
    kind: TransformationKind

    @property
    def requires_tweak(self) -> bool:
        return self.kind.requires_tweak

    @property
    def supports_decode(self) -> bool:
        return self.kind.supports_decode


class TransformCatalog:
    """The transformations configured on the Vault role, keyed by name."""

    def __init__(self, fpe: str, tokenize: str, mask: str) -> None:
        self._by_name: Dict[str, Transformation] = {}
        for name, kind in (
            (fpe, TransformationKind.FPE),
            (tokenize, TransformationKind.TOKENIZE),
            (mask, TransformationKind.MASK),
        ):
            if name in self._by_name:
                raise ConfigurationError(f"transformation name {name!r} configured twice")
            self._by_name[name] = Transformation(name=name, kind=kind)

    def resolve(self, name: str) -> Transformation:
        found = self._by_name.get(name)
        if found is None:
            raise ValidationError(f"unknown transformation: {name}")
        return found


__all__ = ["TransformationKind", "Transformation", "TransformCatalog"]
