from inventory_backend.schemas.product import ProductUpdate
from inventory_backend.utils import queries
from inventory_backend.utils.mutations import create_product, delete_product, update_product


def test_update_stock_records_history_and_keeps_status(seeded_db):
    updated = update_product(seeded_db, 1, ProductUpdate(stock=0, changedBy="alice"))

    assert updated.id == 1
    assert updated.stock == 0
    assert updated.status == "In Stock"

    [entry] = seeded_db.history.get_for_product(1)
    assert (entry.product_id, entry.old_stock, entry.new_stock, entry.changed_by) == (1, 25, 0, "alice")


def test_update_without_stock_change_records_nothing(seeded_db):
    update_product(seeded_db, 1, ProductUpdate(stock=25, brand="HP"))
    update_product(seeded_db, 1, ProductUpdate(name="Notebook"))

    assert seeded_db.history.get_for_product(1) == []
    product = seeded_db.products.get_by_id(1)
    assert (product.name, product.brand, product.stock) == ("Notebook", "HP", 25)


def test_update_defaults_changed_by_to_unknown(seeded_db):
    update_product(seeded_db, 2, ProductUpdate(stock=149))
    assert seeded_db.history.get_for_product(2)[0].changed_by == "Unknown"


def test_update_preserves_absent_fields(seeded_db):
    before = seeded_db.products.get_by_id(5)
    after = update_product(seeded_db, 5, ProductUpdate(category="Office"))

    assert after.category == "Office"
    assert (after.name, after.brand, after.stock, after.unit) == (before.name, before.brand, before.stock, before.unit)


def test_update_missing_product_returns_none(seeded_db):
    assert update_product(seeded_db, 999, ProductUpdate(stock=1)) is None
    assert len(seeded_db.history) == 0


def test_repeated_updates_build_newest_first_history(seeded_db):
    for stock, who in [(20, "a"), (15, "b"), (10, "c")]:
        update_product(seeded_db, 1, ProductUpdate(stock=stock, changedBy=who))

    entries = seeded_db.history.get_for_product(1)
    assert [e.changed_by for e in entries] == ["c", "b", "a"]
    assert [(e.old_stock, e.new_stock) for e in entries] == [(15, 10), (20, 15), (25, 20)]


def test_history_survives_delete(seeded_db):
    update_product(seeded_db, 3, ProductUpdate(stock=40, changedBy="alice"))
    assert delete_product(seeded_db, 3) is True

    assert seeded_db.products.get_by_id(3) is None
    assert len(seeded_db.history.get_for_product(3)) == 1


def test_delete_missing_returns_false(seeded_db):
    assert delete_product(seeded_db, 999) is False
    assert len(seeded_db.products) == 5


def test_create_product_applies_defaults(db):
    product = create_product(db, {"name": "Webcam", "stock": 3})
    assert product.id == 1
    assert (product.unit, product.category, product.brand, product.status) == ("Piece", "Uncategorized", "", "In Stock")


def test_search_is_case_insensitive_substring(seeded_db):
    names = [p.name for p in queries.find_by_name_substring(seeded_db, "MO")]
    assert names == ["Mouse", "Monitor"]


def test_empty_search_returns_everything(seeded_db):
    assert queries.find_by_name_substring(seeded_db, "") == seeded_db.products.list()
    assert queries.find_by_name_substring(seeded_db, None) == seeded_db.products.list()


def test_category_filter_is_exact(seeded_db):
    assert [p.name for p in queries.find_by_category(seeded_db, "Furniture")] == ["Desk Chair"]
    assert queries.find_by_category(seeded_db, "furniture") == []
    assert len(queries.find_by_category(seeded_db, "")) == 5


def test_combined_filter(seeded_db):
    result = queries.filter_products(seeded_db, search="o", category="Electronics")
    assert [p.name for p in result] == ["Laptop", "Mouse", "Keyboard", "Monitor"]
    assert queries.filter_products(seeded_db, search="chair", category="Electronics") == []


def test_list_categories(seeded_db):
    assert queries.list_categories(seeded_db) == ["Electronics", "Furniture"]
