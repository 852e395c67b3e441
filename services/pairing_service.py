"""Pairing service - breakfast fruit-combining rules.

- Melons must be eaten alone (no mixing with other fruits).
- Never combine sweet fruits with acid fruits.
- Subacid pairs freely with sweet or acid; same-group mixes are fine.
"""

import logging
from typing import Dict, FrozenSet, Iterable, List, Optional

from domain.enums import FruitGroup, ViolationType, fruit_group_for
from domain.schemas.catalog_schemas import Catalog
from domain.schemas.pairing_schemas import PairingAnalysis, PairingViolation

logger = logging.getLogger("mealprotocol.pairing")

VIOLATION_MESSAGES = {
    ViolationType.MELON_MUST_BE_SOLO: "Melons must be eaten alone (no mixing with other fruits).",
    ViolationType.SWEET_WITH_ACID_FORBIDDEN: "Never combine sweet fruits with acid fruits.",
}


class PairingAnalyzer:
    """Detects pairing violations; it never decides what to remove."""

    def __init__(self, catalog: Catalog):
        self.catalog = catalog
        self._group_by_name: Dict[str, FruitGroup] = {}
        for ing in catalog.ingredients:
            group = fruit_group_for(ing.category)
            if group is not None:
                self._group_by_name[ing.name] = group

    def group_of(self, name: str) -> Optional[FruitGroup]:
        return self._group_by_name.get(name)

    def members(self, group: FruitGroup) -> FrozenSet[str]:
        return frozenset(n for n, g in self._group_by_name.items() if g is group)

    def analyze(self, fruits: Iterable[str]) -> PairingAnalysis:
        """
        Analyze canonical fruit names in ingredient order.
        Names outside every fruit group are ignored.
        """
        names = tuple(f for f in fruits if f in self._group_by_name)
        present = {group: False for group in FruitGroup}
        for name in names:
            present[self._group_by_name[name]] = True

        violations: List[PairingViolation] = []
        if present[FruitGroup.MELON] and len(names) > 1:
            violations.append(self._violation(ViolationType.MELON_MUST_BE_SOLO))
        if present[FruitGroup.SWEET] and present[FruitGroup.ACID]:
            violations.append(self._violation(ViolationType.SWEET_WITH_ACID_FORBIDDEN))

        if violations:
            logger.debug(
                f"Fruit pairing violations {[v.type.value for v in violations]} in {list(names)}"
            )
        return PairingAnalysis(
            ok=not violations,
            fruits=names,
            present=present,
            violations=tuple(violations),
        )

    @staticmethod
    def _violation(violation_type: ViolationType) -> PairingViolation:
        return PairingViolation(type=violation_type, message=VIOLATION_MESSAGES[violation_type])
