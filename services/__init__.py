"""Services package - Protocol compliance logic"""

from services.resolver_service import IngredientResolver
from services.meal_policy_service import MealPolicy
from services.pairing_service import PairingAnalyzer
from services.compliance_service import ComplianceSanitizer
from services.classifier_service import MealClassifier
from services.availability_service import OptionAvailability
from services.protocol_service import ProtocolEngine

__all__ = [
    "IngredientResolver",
    "MealPolicy",
    "PairingAnalyzer",
    "ComplianceSanitizer",
    "MealClassifier",
    "OptionAvailability",
    "ProtocolEngine",
]
