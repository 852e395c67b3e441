"""Pydantic schemas for recipes moving through the compliance engine."""

from collections.abc import Mapping
from typing import Any, Optional, Tuple

from pydantic import (
    BaseModel,
    ConfigDict,
    computed_field,
    field_validator,
)

from core.utils.helpers import optional_text
from domain.enums import (
    Category,
    MatchKind,
    MealClassification,
    MealType,
    RemovalReason,
    ResolutionStatus,
)


class IngredientLine(BaseModel):
    """Free-text ingredient as entered: {amount, item, raw}."""

    model_config = ConfigDict(frozen=True)

    amount: Optional[str] = None
    item: Optional[str] = None
    raw: Optional[str] = None

    @field_validator("amount", "item", "raw", mode="before")
    @classmethod
    def coerce_field(cls, v):
        return optional_text(v)

    @classmethod
    def coerce(cls, value: Any) -> "IngredientLine":
        """Build a line from a bare string, a mapping or anything else."""
        if isinstance(value, IngredientLine):
            return value
        if isinstance(value, str):
            return cls(amount=None, item=value, raw=value)
        if isinstance(value, Mapping):
            return cls(
                amount=value.get("amount"),
                item=value.get("item"),
                raw=value.get("raw"),
            )
        return cls()

    @property
    def display_text(self) -> str:
        """Text used for matching: item, else raw, else empty."""
        return self.item or self.raw or ""


class SanitizedIngredient(IngredientLine):
    """Kept ingredient line annotated with its resolution."""

    canonical_name: Optional[str] = None
    category: Optional[Category] = None


class Recipe(BaseModel):
    """Recipe input. Unknown keys are carried through untouched."""

    model_config = ConfigDict(frozen=True, extra="allow")

    id: Optional[str] = None
    title: Optional[str] = None
    ingredients: Tuple[IngredientLine, ...] = ()

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v):
        if isinstance(v, bool):
            return None
        if isinstance(v, (int, float)):
            return str(v)
        return optional_text(v)

    @field_validator("title", mode="before")
    @classmethod
    def coerce_title(cls, v):
        return optional_text(v)

    @field_validator("ingredients", mode="before")
    @classmethod
    def coerce_ingredients(cls, v):
        if not isinstance(v, (list, tuple)):
            return ()
        return tuple(IngredientLine.coerce(x) for x in v)

    @classmethod
    def coerce(cls, value: Any) -> "Recipe":
        """Build a recipe from a mapping; anything else becomes an empty recipe."""
        if isinstance(value, Recipe):
            return value
        if isinstance(value, Mapping):
            data = {k: v for k, v in value.items() if isinstance(k, str)}
            return cls.model_validate(data)
        return cls()


class SanitizedRecipe(Recipe):
    """Copy of a recipe holding only surviving, annotated ingredients."""

    ingredients: Tuple[SanitizedIngredient, ...] = ()
    meal_type: Optional[MealType] = None

    @field_validator("ingredients", mode="before")
    @classmethod
    def coerce_ingredients(cls, v):
        if not isinstance(v, (list, tuple)):
            return ()
        return tuple(v)


class IngredientResolution(BaseModel):
    """Result of mapping free text onto the catalog."""

    model_config = ConfigDict(frozen=True)

    source_text: str
    normalized: str
    canonical_name: Optional[str] = None
    category: Optional[Category] = None
    status: ResolutionStatus = ResolutionStatus.UNKNOWN
    match: Optional[MatchKind] = None

    @computed_field  # type: ignore[misc]
    @property
    def is_known(self) -> bool:
        return self.status is ResolutionStatus.KNOWN

    @property
    def is_disallowed(self) -> bool:
        return self.status is ResolutionStatus.EXPLICITLY_DISALLOWED


class RemovalRecord(BaseModel):
    """Audit entry for an ingredient dropped by sanitization."""

    model_config = ConfigDict(frozen=True)

    original_text: str
    resolved_name: Optional[str] = None
    reason_code: RemovalReason
    reason_message: str

    @computed_field  # type: ignore[misc]
    @property
    def display_line(self) -> str:
        if self.resolved_name:
            return f"{self.original_text} -> {self.resolved_name}: {self.reason_message}"
        return f"{self.original_text}: {self.reason_message}"


class SanitizationResult(BaseModel):
    """Cleaned recipe plus removals in discovery order."""

    model_config = ConfigDict(frozen=True)

    meal_type: MealType
    cleaned_recipe: SanitizedRecipe
    removed: Tuple[RemovalRecord, ...] = ()

    @property
    def display_lines(self) -> Tuple[str, ...]:
        return tuple(r.display_line for r in self.removed)


class ScreeningResult(BaseModel):
    """Meal-agnostic catalog filter output."""

    model_config = ConfigDict(frozen=True)

    ingredients: Tuple[SanitizedIngredient, ...] = ()
    removed: Tuple[RemovalRecord, ...] = ()


class InferredSanitization(BaseModel):
    """Classification followed by sanitization for the inferred meal."""

    model_config = ConfigDict(frozen=True)

    classification: MealClassification
    cleaned_recipe: SanitizedRecipe
    removed: Tuple[RemovalRecord, ...] = ()
