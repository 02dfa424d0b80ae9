import argparse
import json
import os
import pathlib
import sys

from dotenv import find_dotenv, load_dotenv

ROOT = pathlib.Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from recipe_finder.app.domain.models import RecipeFilter
from recipe_finder.app.infra.cache import MemoryCache
from recipe_finder.app.services.joke_service import JokeService
from recipe_finder.app.services.recipe_catalog import RecipeCatalog
from recipe_finder.services.jokeapi import JokeApiClient
from recipe_finder.services.spoonacular import SpoonacularClient


def run_search(catalog: RecipeCatalog, recipe_filter: RecipeFilter) -> None:
    print("\n===", recipe_filter)
    outcome = catalog.get_recipes(recipe_filter)
    print("source:", outcome.source.value, outcome.reason or "")
    print("has_more:", outcome.data.has_more)
    for recipe in outcome.data.recipes:
        print(f"  [{recipe.difficulty.value:6}] {recipe.id} {recipe.name} ({recipe.cuisine})")


def main() -> None:
    parser = argparse.ArgumentParser(description="Quick smoke test against the live providers")
    parser.add_argument("search", nargs="*", default=["pasta", "soup"])
    parser.add_argument("--cuisine", default=None)
    parser.add_argument("--difficulty", default=None)
    parser.add_argument("--offset", type=int, default=0)
    parser.add_argument("--recipe-id", default=None)
    args = parser.parse_args()

    load_dotenv(find_dotenv())
    api_key = os.getenv("SPOONACULAR_API_KEY")
    if not api_key:
        print("SPOONACULAR_API_KEY not set, expect fallback data")

    with SpoonacularClient(api_key=api_key or "") as client, JokeApiClient() as joke_client:
        catalog = RecipeCatalog(client=client, cache=MemoryCache(ttl_seconds=60))
        for term in args.search:
            run_search(
                catalog,
                RecipeFilter(
                    search=term,
                    cuisine=args.cuisine,
                    difficulty=args.difficulty,
                    offset=args.offset,
                ),
            )

        if args.recipe_id:
            recipe = catalog.get_recipe(args.recipe_id).data
            print("\n=== recipe", args.recipe_id)
            print(json.dumps(recipe.model_dump(mode="json"), indent=2, ensure_ascii=False))

        cuisines = catalog.list_cuisines()
        print("\ncuisines:", cuisines.source.value, ", ".join(cuisines.data))

        joke = JokeService(joke_client).get_joke()
        print("\njoke:", joke.source.value)
        print(json.dumps(joke.data.model_dump(exclude_none=True), indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
