import json

import pytest

from recipe_vault.database import CatalogStore, create_schema, get_connection
from recipe_vault.ingredients import IngredientCatalog, IngredientCategory


@pytest.fixture
def conn(tmp_path):
    conn = get_connection(tmp_path / "test_recipes.db")
    create_schema(conn)
    yield conn
    conn.close()


@pytest.fixture
def store(conn):
    return CatalogStore(conn)


def _insert_row(conn, row_id, name, category=None, aliases="[]"):
    conn.execute(
        "INSERT INTO ingredient (id, name, category, aliases) VALUES (?, ?, ?, ?)",
        (row_id, name, category, aliases),
    )
    conn.commit()


def test_save_and_load(store):
    catalog = IngredientCatalog()
    onion = catalog.add("spring onion", IngredientCategory.VEGETABLE, ["scallion", "green onion"])
    catalog.add("olive oil", IngredientCategory.PANTRY_STAPLE)
    catalog.add("mystery")
    store.save(catalog)

    loaded = store.load()
    assert [i.name for i in loaded] == ["spring onion", "olive oil", "mystery"]
    loaded_onion = loaded.lookup("Scallion")
    assert loaded_onion.id == onion.id
    assert loaded_onion.aliases == ["scallion", "green onion"]
    assert loaded_onion.category == IngredientCategory.VEGETABLE
    assert loaded_onion.created_at == onion.created_at
    assert loaded.lookup("mystery").category is None


def test_aliases_stored_as_json_text(conn, store):
    catalog = IngredientCatalog()
    catalog.add("parmesan", IngredientCategory.DAIRY, ["parmigiano", "parmigiano-reggiano"])
    store.save(catalog)

    row = conn.execute("SELECT category, aliases FROM ingredient").fetchone()
    assert row["category"] == "dairy"
    assert json.loads(row["aliases"]) == ["parmigiano", "parmigiano-reggiano"]


def test_pantry_staple_category_value(conn, store):
    catalog = IngredientCatalog()
    catalog.add("tahini", IngredientCategory.PANTRY_STAPLE)
    store.save(catalog)
    assert conn.execute("SELECT category FROM ingredient").fetchone()[0] == "pantryStaple"


def test_save_removes_deleted_entries(store):
    catalog = IngredientCatalog()
    garlic = catalog.add("garlic")
    catalog.add("salt")
    store.save(catalog)

    catalog.remove(garlic.id)
    store.save(catalog)
    assert [i.name for i in store.load()] == ["salt"]


def test_save_handles_renames(store):
    catalog = IngredientCatalog()
    a = catalog.add("coriander")
    b = catalog.add("cilantro")
    store.save(catalog)

    catalog.update(b.id, name="fresh coriander")
    catalog.update(a.id, name="cilantro")
    store.save(catalog)
    assert sorted(i.name for i in store.load()) == ["cilantro", "fresh coriander"]


@pytest.mark.parametrize("bad_aliases", ["{not json", '"scallion"', "[1, 2]", "null", ""])
def test_corrupt_aliases_degrade_to_empty(conn, store, bad_aliases):
    _insert_row(conn, "1", "spring onion", "vegetable", bad_aliases)
    _insert_row(conn, "2", "garlic", "vegetable", '["garlic clove"]')

    catalog = store.load()
    assert len(catalog) == 2
    assert catalog.get("1").aliases == []
    assert catalog.lookup("garlic clove").id == "2"


def test_corrupt_aliases_log_warning(conn, store, mocker):
    warning = mocker.patch("recipe_vault.database.utils.logger.warning")
    _insert_row(conn, "1", "spring onion", None, "[scallion")
    store.load()
    warning.assert_called_once()


def test_unknown_category_degrades_to_none(conn, store):
    _insert_row(conn, "1", "garlic", "allium")
    assert store.load().get("1").category is None


def test_blank_and_duplicate_names_are_skipped(conn, store):
    _insert_row(conn, "1", "   ")
    _insert_row(conn, "2", "Garlic")
    _insert_row(conn, "3", "garlic")
    _insert_row(conn, "4", "salt")

    catalog = store.load()
    assert [i.id for i in catalog] == ["2", "4"]
    assert catalog.lookup("garlic").id == "2"


def test_load_empty_store(store):
    assert len(store.load()) == 0
