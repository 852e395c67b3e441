"""
Protocol routes - ingredient resolution, recipe compliance and meal building.
"""

from fastapi import APIRouter, Depends, Query
import logging

from api.dependencies import get_engine
from api.schemas import (
    CatalogItemResponse,
    CatalogResponse,
    ClassifyAndSanitizeResponse,
    ClassifyRequest,
    ClassifyResponse,
    MealPolicyResponse,
    OptionsRequest,
    SanitizeRequest,
    SanitizeResponse,
)
from app.exceptions import NotFoundError
from domain.enums import MealType
from domain.schemas.availability_schemas import AvailabilitySnapshot
from domain.schemas.recipe_schemas import IngredientResolution
from services.protocol_service import ProtocolEngine

router = APIRouter(prefix="/protocol", tags=["Protocol"])
logger = logging.getLogger("mealprotocol.api.protocol")


@router.get("/resolve", response_model=IngredientResolution)
def resolve_ingredient(
    text: str = Query(..., description="Free ingredient text, e.g. 'Cooked Quinoa'"),
    engine: ProtocolEngine = Depends(get_engine),
) -> IngredientResolution:
    """Resolve free text to a canonical protocol ingredient."""
    return engine.resolve(text)


@router.post("/sanitize", response_model=SanitizeResponse)
def sanitize_recipe(
    payload: SanitizeRequest, engine: ProtocolEngine = Depends(get_engine)
) -> SanitizeResponse:
    """
    Strip every ingredient not allowed for the meal.

    - unknown / explicitly disallowed ingredients are removed
    - categories outside the meal policy are removed
    - at breakfast, fruit pairing conflicts are auto-resolved
    """
    result = engine.sanitize(payload.recipe.model_dump(), payload.meal_type)
    if result.removed:
        logger.info(
            f"Removed {len(result.removed)} ingredient(s) for {payload.meal_type.value}"
        )
    return SanitizeResponse(
        meal_type=result.meal_type,
        cleaned_recipe=result.cleaned_recipe,
        removed=result.removed,
        removed_count=len(result.removed),
        display_lines=list(result.display_lines),
    )


@router.post("/classify", response_model=ClassifyResponse)
def classify_recipe(
    payload: ClassifyRequest, engine: ProtocolEngine = Depends(get_engine)
) -> ClassifyResponse:
    """Infer breakfast / lunch / dinner; "unknown" when no rule applies."""
    return ClassifyResponse(classification=engine.classify(payload.recipe.model_dump()))


@router.post("/classify-and-sanitize", response_model=ClassifyAndSanitizeResponse)
def classify_and_sanitize_recipe(
    payload: ClassifyRequest, engine: ProtocolEngine = Depends(get_engine)
) -> ClassifyAndSanitizeResponse:
    """Infer the meal, then sanitize for it. Unclassifiable recipes are returned unchanged."""
    result = engine.classify_and_sanitize(payload.recipe.model_dump())
    return ClassifyAndSanitizeResponse(
        classification=result.classification,
        cleaned_recipe=result.cleaned_recipe,
        removed=result.removed,
    )


@router.post("/options", response_model=AvailabilitySnapshot)
def meal_options(
    payload: OptionsRequest, engine: ProtocolEngine = Depends(get_engine)
) -> AvailabilitySnapshot:
    """Catalog items still selectable for a meal given the current choices."""
    return engine.compute_options(payload.meal_type, payload.chosen_items)


@router.get("/catalog", response_model=CatalogResponse)
def list_catalog(engine: ProtocolEngine = Depends(get_engine)) -> CatalogResponse:
    """Allowed foods reference, sorted by name."""
    items = list(engine.allowed_index())
    return CatalogResponse(version=engine.catalog_version, count=len(items), items=items)


@router.get("/catalog/{name}", response_model=CatalogItemResponse)
def get_catalog_item(
    name: str, engine: ProtocolEngine = Depends(get_engine)
) -> CatalogItemResponse:
    """Single canonical ingredient by name (case and punctuation insensitive)."""
    ingredient = engine.ingredient(name)
    if ingredient is None:
        raise NotFoundError(
            f"Ingredient {name!r} is not in catalog {engine.catalog_version}",
            code="INGREDIENT_NOT_FOUND",
        )
    return CatalogItemResponse(
        name=ingredient.name,
        category=ingredient.category,
        aliases=sorted(ingredient.aliases),
    )


@router.get("/meal-policy/{meal_type}", response_model=MealPolicyResponse)
def get_meal_policy(
    meal_type: MealType, engine: ProtocolEngine = Depends(get_engine)
) -> MealPolicyResponse:
    """Allowed and blocked categories plus selection limits for a meal."""
    return MealPolicyResponse(
        meal_type=meal_type,
        allowed=list(engine.policy.allowed_categories(meal_type)),
        blocked=list(engine.policy.blocked_categories(meal_type)),
        constraints=engine.policy.constraints(meal_type).model_dump(),
    )
