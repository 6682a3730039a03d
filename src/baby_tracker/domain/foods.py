"""Starter food suggestions."""

from dataclasses import dataclass

ALL_CATEGORIES = "All"
FOOD_CATEGORIES = (ALL_CATEGORIES, "Fruits", "Vegetables", "Proteins", "Grains", "Dairy")

_IMAGE_QUERY = "?ixlib=rb-1.2.1&auto=format&fit=crop&w=500&q=60"


@dataclass(frozen=True)
class Food:
    """A suggested food for babies."""

    id: str
    name: str
    description: str
    category: str
    age_range: str
    nutrients: tuple[str, ...]
    image: str


def _image(photo_id: str) -> str:
    return f"https://images.unsplash.com/photo-{photo_id}{_IMAGE_QUERY}"


FOODS: tuple[Food, ...] = (
    Food(
        id="1",
        name="Avocado Puree",
        description="Smooth, creamy puree rich in healthy fats and nutrients.",
        category="Fruits",
        age_range="6+ months",
        nutrients=("Healthy Fats", "Potassium", "Vitamin E"),
        image=_image("1546554137-f86b9593a222"),
    ),
    Food(
        id="2",
        name="Sweet Potato Mash",
        description="Naturally sweet puree packed with beta-carotene.",
        category="Vegetables",
        age_range="6+ months",
        nutrients=("Vitamin A", "Fiber", "Potassium"),
        image=_image("1596451190630-186aff535bf2"),
    ),
    Food(
        id="3",
        name="Banana Oatmeal",
        description="Hearty breakfast with natural sweetness and whole grains.",
        category="Grains",
        age_range="8+ months",
        nutrients=("Fiber", "B Vitamins", "Iron"),
        image=_image("1590137876181-2a5a7e340308"),
    ),
    Food(
        id="4",
        name="Steamed Carrot Sticks",
        description="Soft finger food perfect for developing motor skills.",
        category="Vegetables",
        age_range="9+ months",
        nutrients=("Vitamin A", "Fiber", "Antioxidants"),
        image=_image("1598170845058-32b9d6a5da37"),
    ),
    Food(
        id="5",
        name="Greek Yogurt",
        description="Creamy protein-rich dairy option for older babies.",
        category="Dairy",
        age_range="8+ months",
        nutrients=("Protein", "Calcium", "Probiotics"),
        image=_image("1570696516188-ade861b84a49"),
    ),
    Food(
        id="6",
        name="Soft Cooked Lentils",
        description="Protein-packed legumes that are easily mashable.",
        category="Proteins",
        age_range="8+ months",
        nutrients=("Protein", "Iron", "Zinc"),
        image=_image("1546549032-9571cd6b27df"),
    ),
    Food(
        id="7",
        name="Apple Sauce",
        description="Smooth fruit puree with natural sweetness and vitamin C.",
        category="Fruits",
        age_range="6+ months",
        nutrients=("Vitamin C", "Fiber", "Antioxidants"),
        image=_image("1576697935066-a5bd244ae2dd"),
    ),
    Food(
        id="8",
        name="Mashed Peas",
        description="Nutrient-rich vegetable puree with a vibrant color.",
        category="Vegetables",
        age_range="6+ months",
        nutrients=("Vitamin K", "Folate", "Protein"),
        image=_image("1612505972399-7fda478ea5a6"),
    ),
    Food(
        id="9",
        name="Quinoa Porridge",
        description="Complete protein grain that is gentle on baby digestive system.",
        category="Grains",
        age_range="8+ months",
        nutrients=("Complete Protein", "Iron", "Magnesium"),
        image=_image("1518779618904-a940d8161415"),
    ),
)


def filter_foods(category: str = ALL_CATEGORIES) -> list[Food]:
    """Return foods in a category, or all foods for 'All'."""
    if category not in FOOD_CATEGORIES:
        raise ValueError(f"Unknown food category: {category}")
    if category == ALL_CATEGORIES:
        return list(FOODS)
    return [food for food in FOODS if food.category == category]


def get_food(food_id: str) -> Food | None:
    """Return a food by id, if present."""
    for food in FOODS:
        if food.id == food_id:
            return food
    return None
