"""Static datasets served when an upstream provider cannot be reached."""
from __future__ import annotations

from recipe_finder.app.domain.models import Difficulty
from recipe_finder.app.schemas.recipes import Joke, Recipe

FALLBACK_RECIPES: tuple[Recipe, ...] = (
    Recipe(
        id=1,
        name="Spaghetti Carbonara",
        ingredients=("pasta", "eggs", "bacon", "parmesan", "black pepper"),
        instructions="Cook pasta, mix eggs with cheese, combine with hot pasta and bacon",
        prepTime=15,
        cookTime=20,
        servings=4,
        difficulty=Difficulty.MEDIUM,
        cuisine="Italian",
        image="https://images.unsplash.com/photo-1621996346565-e3dbc353d2e5?w=400",
    ),
    Recipe(
        id=2,
        name="Chicken Stir Fry",
        ingredients=("chicken breast", "vegetables", "soy sauce", "ginger", "garlic"),
        instructions="Stir fry chicken, add vegetables, season with soy sauce and spices",
        prepTime=10,
        cookTime=15,
        servings=4,
        difficulty=Difficulty.EASY,
        cuisine="Asian",
        image="https://images.unsplash.com/photo-1603133872878-684f208fb84b?w=400",
    ),
    Recipe(
        id=3,
        name="Simple Toast",
        ingredients=("bread", "butter"),
        instructions="Toast bread and spread with butter",
        prepTime=2,
        cookTime=3,
        servings=1,
        difficulty=Difficulty.EASY,
        cuisine="International",
        image="https://images.unsplash.com/photo-1484723091739-30a097e8f929?w=400",
    ),
    Recipe(
        id=4,
        name="Beef Wellington",
        ingredients=(
            "beef fillet",
            "puff pastry",
            "mushrooms",
            "shallots",
            "garlic",
            "prosciutto",
            "dijon mustard",
            "egg wash",
        ),
        instructions="Prepare beef, wrap in mushroom mixture and prosciutto, encase in pastry, bake",
        prepTime=45,
        cookTime=35,
        servings=6,
        difficulty=Difficulty.HARD,
        cuisine="French",
        image="https://images.unsplash.com/photo-1546833999-b9f581a1996d?w=400",
    ),
)

FALLBACK_CUISINES: tuple[str, ...] = (
    "Italian",
    "Asian",
    "American",
    "Mexican",
    "Mediterranean",
    "Indian",
    "French",
    "Japanese",
    "Thai",
    "Greek",
)

FALLBACK_JOKE = Joke(
    type="single",
    joke="Why did the chef go to the doctor? Because he was feeling a little under the weather! 😄",
)
