import pytest

from recipe_vault.recipes import Recipe, RecipeMatcher, coverage_ratio, match_recipes

TOMATO_PASTA = [
    "spaghetti", "tomato", "garlic", "olive oil", "basil", "parmesan", "salt", "black pepper",
]
STIR_FRY = [
    "chicken breast", "soy sauce", "ginger", "garlic", "broccoli",
    "bell pepper", "rice", "sesame oil", "cornstarch",
]


@pytest.fixture
def pasta():
    return Recipe(name="Classic Tomato Pasta", normalized_ingredients=list(TOMATO_PASTA))


@pytest.fixture
def stir_fry():
    return Recipe(name="Chicken Stir-Fry", normalized_ingredients=list(STIR_FRY))


def test_full_coverage(pasta):
    results = match_recipes(set(TOMATO_PASTA), [pasta])
    assert len(results) == 1
    assert results[0].recipe is pasta
    assert results[0].coverage_ratio == 1.0
    assert results[0].missing_ingredients == ()
    assert results[0].is_complete


def test_below_default_threshold_is_excluded(stir_fry):
    pantry = {"chicken breast", "soy sauce"}
    assert coverage_ratio(pantry, stir_fry.normalized_ingredients) == pytest.approx(2 / 9)
    assert match_recipes(pantry, [stir_fry]) == []
    assert RecipeMatcher().match(pantry, [stir_fry], threshold=0.3) == []


def test_lower_threshold_includes_with_missing_in_order(stir_fry):
    results = match_recipes({"chicken breast", "soy sauce"}, [stir_fry], threshold=0.2)
    assert len(results) == 1
    assert results[0].coverage_ratio == pytest.approx(0.222, abs=1e-3)
    assert list(results[0].missing_ingredients) == [
        "ginger", "garlic", "broccoli", "bell pepper", "rice", "sesame oil", "cornstarch",
    ]
    assert list(results[0].matched_ingredients) == ["chicken breast", "soy sauce"]
    assert not results[0].is_complete


@pytest.mark.parametrize("threshold", [0.0, 0.3, 1.0])
def test_recipe_without_ingredients_is_always_excluded(threshold):
    empty = Recipe(name="Empty", normalized_ingredients=[])
    assert coverage_ratio({"salt"}, []) == 0.0
    assert match_recipes({"salt"}, [empty], threshold=threshold) == []


def test_threshold_is_inclusive():
    recipe = Recipe(name="Ten", normalized_ingredients=[f"item {n}" for n in range(10)])
    results = match_recipes({"item 0", "item 1", "item 2"}, [recipe], threshold=0.3)
    assert len(results) == 1
    assert results[0].coverage_ratio == 0.3


@pytest.mark.parametrize("threshold", [-0.1, 1.5])
def test_threshold_out_of_range(threshold, pasta):
    with pytest.raises(ValueError):
        match_recipes(set(), [pasta], threshold=threshold)
    with pytest.raises(ValueError):
        RecipeMatcher(threshold)


def test_comparison_is_case_insensitive():
    recipe = Recipe(name="Toast", normalized_ingredients=["Bread", "butter "])
    results = match_recipes({" BREAD", "Butter"}, [recipe])
    assert results[0].coverage_ratio == 1.0


def test_duplicate_ingredients_count_once():
    recipe = Recipe(name="Garlic Bread", normalized_ingredients=["garlic", "bread", "garlic"])
    assert coverage_ratio({"garlic"}, recipe.normalized_ingredients) == 0.5
    results = match_recipes({"garlic"}, [recipe])
    assert results[0].missing_ingredients == ("bread",)


def test_orphaned_names_match_by_string_equality():
    recipe = Recipe(name="Mystery", normalized_ingredients=["unicorn horn", "salt"])
    results = match_recipes({"unicorn horn"}, [recipe])
    assert results[0].coverage_ratio == 0.5


def test_ordering_by_coverage_then_name():
    pantry = {"a", "b"}
    recipes = [
        Recipe(name="zeta", normalized_ingredients=["a", "b"]),
        Recipe(name="Beta", normalized_ingredients=["a", "c"]),
        Recipe(name="alpha", normalized_ingredients=["a", "d"]),
        Recipe(name="Gamma", normalized_ingredients=["a", "b", "c"]),
    ]
    results = match_recipes(pantry, recipes)
    assert [r.recipe.name for r in results] == ["zeta", "Gamma", "alpha", "Beta"]


def test_ordering_is_independent_of_input_order():
    pantry = {"a"}
    recipes = [
        Recipe(name="Same", normalized_ingredients=["a", "b"]),
        Recipe(name="same", normalized_ingredients=["a", "c"]),
        Recipe(name="Other", normalized_ingredients=["a"]),
    ]
    forward = [r.recipe.id for r in match_recipes(pantry, recipes)]
    backward = [r.recipe.id for r in match_recipes(pantry, list(reversed(recipes)))]
    assert forward == backward
    assert forward == [r.recipe.id for r in match_recipes(pantry, recipes)]


def test_coverage_stays_in_range():
    pantry = {"a", "b", "x", "y"}
    for ingredients in (["a"], ["a", "c"], ["c", "d"], ["a", "b"], ["x", "y", "z"]):
        ratio = coverage_ratio(pantry, ingredients)
        assert 0.0 <= ratio <= 1.0
        if set(ingredients) <= pantry:
            assert ratio == 1.0


def test_match_does_not_mutate_inputs(pasta, stir_fry):
    pantry = {"garlic", "salt", "olive oil"}
    recipes = [pasta, stir_fry]
    match_recipes(pantry, recipes, threshold=0.0)
    assert pantry == {"garlic", "salt", "olive oil"}
    assert recipes == [pasta, stir_fry]
    assert pasta.normalized_ingredients == TOMATO_PASTA


def test_match_accepts_generators(pasta):
    results = RecipeMatcher(0.5).match(
        (name for name in TOMATO_PASTA[:4]), (r for r in [pasta])
    )
    assert results[0].coverage_ratio == 0.5


def test_matcher_logs_summary(pasta, mocker):
    spy = mocker.patch("recipe_vault.recipes.matching.logger")
    RecipeMatcher().match(set(TOMATO_PASTA), [pasta])
    spy.debug.assert_called_once()
    assert "Matched 1 of 1 recipes" in spy.debug.call_args[0][0]
