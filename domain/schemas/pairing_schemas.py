"""Schemas for breakfast fruit pairing analysis."""

from typing import Dict, Tuple

from pydantic import BaseModel, ConfigDict

from domain.enums import FruitGroup, ViolationType


class PairingViolation(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: ViolationType
    message: str


class PairingAnalysis(BaseModel):
    """Which fruit groups are present and which pairing rules they break."""

    model_config = ConfigDict(frozen=True)

    ok: bool
    fruits: Tuple[str, ...] = ()
    present: Dict[FruitGroup, bool]
    violations: Tuple[PairingViolation, ...] = ()

    def has(self, violation_type: ViolationType) -> bool:
        return any(v.type is violation_type for v in self.violations)
