"""Request / response schemas for the protocol API"""
from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, List, Optional, Tuple

from domain.enums import Category, MealClassification, MealType
from domain.schemas.catalog_schemas import AllowedIndexEntry
from domain.schemas.recipe_schemas import RemovalRecord, SanitizedRecipe


class RecipePayload(BaseModel):
    """Recipe as sent by clients; ingredients are strings or {amount, item, raw}."""

    model_config = ConfigDict(extra="allow")

    id: Optional[Any] = None
    title: Optional[Any] = None
    ingredients: Optional[Any] = None


class SanitizeRequest(BaseModel):
    recipe: RecipePayload
    meal_type: MealType


class ClassifyRequest(BaseModel):
    recipe: RecipePayload


class OptionsRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    meal_type: MealType
    chosen_items: List[str] = Field(default_factory=list, alias="chosenItems")


class SanitizeResponse(BaseModel):
    meal_type: MealType
    cleaned_recipe: SanitizedRecipe
    removed: Tuple[RemovalRecord, ...] = ()
    removed_count: int
    display_lines: List[str] = []


class ClassifyResponse(BaseModel):
    classification: MealClassification


class ClassifyAndSanitizeResponse(BaseModel):
    classification: MealClassification
    cleaned_recipe: SanitizedRecipe
    removed: Tuple[RemovalRecord, ...] = ()


class CatalogResponse(BaseModel):
    version: str
    count: int
    items: List[AllowedIndexEntry]


class CatalogItemResponse(BaseModel):
    name: str
    category: Category
    aliases: List[str] = []


class MealPolicyResponse(BaseModel):
    meal_type: MealType
    allowed: List[Category]
    blocked: List[Category]
    constraints: Dict[str, Any]
