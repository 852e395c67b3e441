"""
Static protocol food list.

Plain data only; adapters.catalog_adapter turns it into a Catalog.
Names are human-friendly display names; all matching happens on
normalized keys.
"""

from domain.enums import Category

PROTOCOL_FOODS_VERSION = "2025-12-22"

FOODS_BY_CATEGORY = {
    Category.FRUIT_SWEET: (
        "Date fruit",
        "Figs",
        "Grapes",
        "Mango",
    ),
    Category.FRUIT_SUBACID: (
        "Apples",
        "Apricots",
        "Blueberries",
        "Wild Blueberries",
        "Papaya",
    ),
    Category.FRUIT_ACID: (
        "Lemon",
        "Lime",
        "Orange",
        "Pineapple",
        "Pomagranate",  # spelling kept as listed; "pomegranate" is an alias
    ),
    Category.MELON: (
        "Cantaloupe",
        "Honeydew Melon",
    ),
    Category.LEAFY_GREEN: (
        "Iceberg Lettuce",
        "Microgreens",
        "Romaine Lettuce",
        "Spinach",
        "Chard",
    ),
    Category.VEGETABLE: (
        "Asparagus",
        "Broccoli",
        "Carrot",
        "Cauliflower",
        "Celery",
        "Green Beans",
        "Green Cabbage",
        "Green Onion",
        "Green Peas",
        "Kabocha Squash",
        "Leek",
        "Napa Cabbage",
        "Red Cabbage",
        "Red Onion",
        "Snow Peas",
        "Sugar Snap",
        "Summer Squash",
        "Zucchini",
        "Cucumbers",
        "Avocado",
    ),
    Category.SPROUT: (
        "Broccoli Sprouts",
        "Clover Sprouts",
        "Radish Sprouts",
    ),
    Category.SEAWEED: (
        "Dulse",
        "Kombu",
        "Nori",
    ),
    Category.COMPLEX_CARB: (
        "Quinoa",
        "Sweet Potato",
    ),
    Category.BEAN_LEGUME: (
        "Azuki Beans",
        "Black Bean",
        "Chickpeas",
        "Lentils",
        "Pinto Beans",
    ),
    Category.NUT_SEED: (
        "Hemp Seeds",
        "Walnuts",
        "Chia",
        "Pumpkin Seeds",
    ),
    Category.HERB_SPICE: (
        "Allspice",
        "Basil",
        "Bay Leaf",
        "Brown Mustard Seeds",
        "Cilantro",
        "Cinnamon",
        "Clove",
        "Coriander",
        "Cumin",
        "Fennel",
        "Garlic",
        "Lemon Grass",
        "Mustard Seeds",
        "Oregano",
        "Parsley",
        "Sea Salt",
        "Nettle",
        "Dandelion",
        "Horsetail",
    ),
    Category.VINEGAR: (
        "Balsamic Vinegar",
        "Red Wine Vinegar",
        "White Wine Vinegar",
    ),
    Category.OIL: (
        "Coconut Oil",
        "MCT Oil",
    ),
    Category.CONDIMENT: (
        "Coconut Amino",
        "Dijon Mustard",
        "Honey Mustard",
        "Yellow Mustard",
    ),
    Category.SWEETENER: (
        "Honey",
    ),
}

# alias -> canonical display name
ALIASES = {
    "pomegranate": "Pomagranate",
    "pomegranate seeds": "Pomagranate",
    "blueberry": "Blueberries",
    "honeydew": "Honeydew Melon",
    "cantaloupe melon": "Cantaloupe",
    "date": "Date fruit",
    "dates": "Date fruit",
    "fig": "Figs",
    "grape": "Grapes",
    "apple": "Apples",
    "apricot": "Apricots",
    "mangos": "Mango",
    "mangoes": "Mango",
    "lemons": "Lemon",
    "limes": "Lime",
    "oranges": "Orange",
    "garbanzo": "Chickpeas",
    "garbanzo beans": "Chickpeas",
    "chickpea": "Chickpeas",
    "black beans": "Black Bean",
    "pinto bean": "Pinto Beans",
    "lentil": "Lentils",
    "azuki": "Azuki Beans",
    "adzuki beans": "Azuki Beans",
    "walnut": "Walnuts",
    "scallion": "Green Onion",
    "scallions": "Green Onion",
    "spring onion": "Green Onion",
    "spring onions": "Green Onion",
    "iceberg": "Iceberg Lettuce",
    "romaine": "Romaine Lettuce",
    "napa": "Napa Cabbage",
    "zuke": "Zucchini",
    "cucumber": "Cucumbers",
    "carrots": "Carrot",
    "sweet potatoes": "Sweet Potato",
    "lemongrass": "Lemon Grass",
    "white wine vin": "White Wine Vinegar",
    "red wine vin": "Red Wine Vinegar",
    "brown mustard seed": "Brown Mustard Seeds",
    "mustard seed": "Mustard Seeds",
    "kombu seaweed": "Kombu",
    "pumpkin seed": "Pumpkin Seeds",
    "hemp seed": "Hemp Seeds",
    "chia seed": "Chia",
    "chia seeds": "Chia",
    "coconut aminos": "Coconut Amino",
}

# Recognized foods intentionally excluded from the protocol
DISALLOWED_ALIASES = (
    "apple cider vinegar",
    "cider vinegar",
    "acv",
)

# Equal-length "contains" ties resolve to the category listed first here,
# then to declaration order inside FOODS_BY_CATEGORY.
TIE_BREAK_CATEGORY_ORDER = (
    Category.BEAN_LEGUME,
    Category.NUT_SEED,
    Category.COMPLEX_CARB,
    Category.VEGETABLE,
    Category.LEAFY_GREEN,
    Category.SPROUT,
    Category.SEAWEED,
    Category.MELON,
    Category.FRUIT_SWEET,
    Category.FRUIT_SUBACID,
    Category.FRUIT_ACID,
    Category.VINEGAR,
    Category.OIL,
    Category.CONDIMENT,
    Category.SWEETENER,
    Category.HERB_SPICE,
)
