from __future__ import annotations

import math
from typing import Any, Optional

from recipe_finder.app.domain.models import Difficulty
from recipe_finder.app.schemas.recipes import PLACEHOLDER_IMAGE, Joke, Recipe

DEFAULT_PREP_MINUTES = 15
DEFAULT_COOK_MINUTES = 20
DEFAULT_SERVINGS = 4
DEFAULT_CUISINE = "International"
DEFAULT_INSTRUCTIONS = "Instructions not available"
DEFAULT_NAME = "Untitled Recipe"

EASY_DISH_KEYWORDS = ("salad", "soup", "sandwich")
HARD_DISH_KEYWORDS = ("cake", "bread", "pastry")


def _clean_str(value: Any) -> Optional[str]:
    if isinstance(value, str):
        stripped = value.strip()
        return stripped or None
    return None


def _positive_int(value: Any, default: int) -> int:
    # bool is an int subclass; upstream never means True as "1 minute"
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return default
    if isinstance(value, float) and not math.isfinite(value):
        return default
    number = int(value)
    return number if number > 0 else default


def _first_str(value: Any) -> Optional[str]:
    if not isinstance(value, list) or not value:
        return None
    return _clean_str(value[0])


def derive_difficulty(dish_types: Any) -> Difficulty:
    """Approximate difficulty from the first listed dish type."""
    first = _first_str(dish_types)
    if first is None:
        return Difficulty.MEDIUM
    dish_type = first.lower()
    if any(keyword in dish_type for keyword in EASY_DISH_KEYWORDS):
        return Difficulty.EASY
    if any(keyword in dish_type for keyword in HARD_DISH_KEYWORDS):
        return Difficulty.HARD
    return Difficulty.MEDIUM


def _ingredient_names(value: Any) -> tuple[str, ...]:
    if not isinstance(value, list):
        return ()
    names: list[str] = []
    for entry in value:
        if not isinstance(entry, dict):
            continue
        name = _clean_str(entry.get("name"))
        if name:
            names.append(name)
    return tuple(names)


def transform_recipe(raw: dict[str, Any]) -> Recipe:
    """Map a Spoonacular recipe object to the internal Recipe shape."""
    recipe_id = raw.get("id")
    if isinstance(recipe_id, bool) or not isinstance(recipe_id, (int, str)):
        recipe_id = str(recipe_id) if recipe_id is not None else ""
    return Recipe(
        id=recipe_id,
        name=_clean_str(raw.get("title")) or DEFAULT_NAME,
        ingredients=_ingredient_names(raw.get("extendedIngredients")),
        instructions=_clean_str(raw.get("instructions")) or DEFAULT_INSTRUCTIONS,
        prepTime=_positive_int(raw.get("preparationMinutes"), DEFAULT_PREP_MINUTES),
        cookTime=_positive_int(raw.get("cookingMinutes"), DEFAULT_COOK_MINUTES),
        servings=_positive_int(raw.get("servings"), DEFAULT_SERVINGS),
        difficulty=derive_difficulty(raw.get("dishTypes")),
        cuisine=_first_str(raw.get("cuisines")) or DEFAULT_CUISINE,
        image=_clean_str(raw.get("image")) or PLACEHOLDER_IMAGE,
    )


def transform_search_results(raw: dict[str, Any]) -> tuple[Recipe, ...]:
    results = raw.get("results")
    if not isinstance(results, list):
        return ()
    return tuple(transform_recipe(item) for item in results if isinstance(item, dict))


def transform_cuisines(raw: Any) -> list[str]:
    if not isinstance(raw, list):
        return []
    cuisines: list[str] = []
    for entry in raw:
        name = _clean_str(entry.get("cuisine")) if isinstance(entry, dict) else _clean_str(entry)
        if name and name not in cuisines:
            cuisines.append(name)
    return cuisines


def transform_joke(raw: dict[str, Any]) -> Optional[Joke]:
    """Return a Joke, or None when the payload is flagged or cannot be shown."""
    if raw.get("error"):
        return None
    category = _clean_str(raw.get("category"))
    joke_id = raw.get("id") if isinstance(raw.get("id"), int) else None
    joke_type = raw.get("type")

    if joke_type == "single":
        text = _clean_str(raw.get("joke"))
        if not text:
            return None
        return Joke(type="single", joke=text, category=category, id=joke_id)

    if joke_type == "twopart":
        setup = _clean_str(raw.get("setup"))
        delivery = _clean_str(raw.get("delivery"))
        if not setup or not delivery:
            return None
        return Joke(type="twopart", setup=setup, delivery=delivery, category=category, id=joke_id)

    return None
