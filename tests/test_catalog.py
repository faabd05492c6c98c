import pytest

from electrostock.errors import IdentityConflict, InvalidPrice, InvalidQuantity, NotFound
from electrostock.models.enums import Category, Company
from electrostock.services.catalog import Catalog, group_by_company


@pytest.fixture
def catalog(ids, clock):
    return Catalog(id_factory=ids, clock=clock)


def _tv(catalog, name="Crystal 4K", size='43"', stock=5, price=30000):
    return catalog.create(Company.SAMSUNG, Category.TV, name, {"screenSize": size}, price=price, stock=stock)


def test_create_assigns_id_and_timestamp(catalog, clock):
    item = _tv(catalog)
    assert item.id == "id-1"
    assert item.last_updated < clock.now
    assert catalog.get(item.id) == item


def test_create_rejects_negative_stock(catalog):
    with pytest.raises(InvalidQuantity):
        _tv(catalog, stock=-1)
    assert len(catalog) == 0


@pytest.mark.parametrize("price", [-10, float("nan"), float("inf")])
def test_create_rejects_invalid_price(catalog, price):
    with pytest.raises(InvalidPrice):
        _tv(catalog, price=price)
    assert len(catalog) == 0


def test_set_price_rejects_nan(catalog):
    item = _tv(catalog, price=100)
    with pytest.raises(InvalidPrice):
        catalog.set_price(item.id, float("nan"))
    assert catalog.get(item.id).price == 100


def test_find_by_identity_ignores_name_case(catalog):
    item = _tv(catalog, name="Crystal 4K")
    found = catalog.find_by_identity(Company.SAMSUNG, Category.TV, "CRYSTAL 4k", {"screenSize": '43"'})
    assert found == item


def test_find_by_identity_is_exact_on_everything_else(catalog):
    _tv(catalog)
    assert catalog.find_by_identity(Company.LG, Category.TV, "Crystal 4K", {"screenSize": '43"'}) is None
    assert catalog.find_by_identity(Company.SAMSUNG, Category.TV, "Crystal 4K", {"screenSize": '55"'}) is None
    assert catalog.find_by_identity(Company.SAMSUNG, Category.TV, "Crystal 4K", {"screensize": '43"'}) is None
    assert catalog.find_by_identity(Company.SAMSUNG, Category.TV, "Crystal 4K ", {"screenSize": '43"'}) is None


def test_missing_specs_equal_empty_specs(catalog):
    item = catalog.create(Company.KENT, Category.WATER_FILTER, "Grand Plus", None, price=17500, stock=1)
    assert catalog.find_by_identity(Company.KENT, Category.WATER_FILTER, "grand plus", {}) == item
    assert catalog.find_by_identity(Company.KENT, Category.WATER_FILTER, "grand plus", None) == item


def test_spec_comparison_ignores_key_order(catalog):
    item = catalog.create(
        Company.LG, Category.WASHING_MACHINE, "AI DD",
        {"type": "Fully-Automatic", "loadType": "Front Load"}, price=40000, stock=2,
    )
    found = catalog.find_by_identity(
        Company.LG, Category.WASHING_MACHINE, "AI DD", {"loadType": "Front Load", "type": "Fully-Automatic"}
    )
    assert found == item


def test_adjust_stock_clamps_at_zero(catalog):
    item = _tv(catalog, stock=3)
    assert catalog.adjust_stock(item.id, -10).stock == 0
    assert catalog.adjust_stock(item.id, 4).stock == 4


def test_adjust_stock_replaces_record(catalog):
    before = _tv(catalog, stock=3)
    after = catalog.adjust_stock(before.id, 2)
    assert before.stock == 3
    assert after.stock == 5
    assert after.last_updated > before.last_updated


def test_unknown_id_raises_not_found(catalog):
    for call in (
        lambda: catalog.get("nope"),
        lambda: catalog.adjust_stock("nope", 1),
        lambda: catalog.set_price("nope", 1),
        lambda: catalog.edit("nope", {"description": "x"}),
        lambda: catalog.remove("nope"),
    ):
        with pytest.raises(NotFound):
            call()


def test_edit_changes_attributes_but_not_id(catalog):
    item = _tv(catalog)
    edited = catalog.edit(item.id, {"description": "New panel", "price": 28000, "name": "Crystal 4K Pro"})
    assert edited.id == item.id
    assert edited.description == "New panel"
    assert edited.price == 28000
    assert edited.name == "Crystal 4K Pro"
    assert edited.stock == item.stock


def test_edit_does_not_merge_and_rejects_identity_collision(catalog):
    a = _tv(catalog, size='43"')
    b = _tv(catalog, size='55"')
    with pytest.raises(IdentityConflict) as exc:
        catalog.edit(b.id, {"specifications": {"screenSize": '43"'}})
    assert exc.value.existing_id == a.id
    assert len(catalog) == 2
    assert catalog.get(b.id).specifications == {"screenSize": '55"'}


def test_edit_rejects_stock(catalog):
    item = _tv(catalog)
    with pytest.raises(ValueError):
        catalog.edit(item.id, {"stock": 100})


def test_remove(catalog):
    item = _tv(catalog)
    catalog.remove(item.id)
    assert catalog.all() == []
    with pytest.raises(NotFound):
        catalog.remove(item.id)


def test_inventory_screen_queries(catalog):
    _tv(catalog, name="Crystal 4K", size='43"')
    _tv(catalog, name="Neo QLED", size='55"')
    catalog.create(Company.SONY, Category.TV, "Bravia", {"screenSize": '55"'}, price=60000, stock=1)
    catalog.create(Company.VOLTAS, Category.AC, "Split", {"tonnage": "1.5 Ton"}, price=38000, stock=2)

    counts = catalog.category_counts()
    assert counts[Category.TV] == 3
    assert counts[Category.AC] == 1
    assert counts[Category.FRIDGE] == 0

    assert catalog.available_spec_values(Category.TV) == ['43"', '55"']
    assert catalog.available_spec_values(Category.WATER_FILTER) == []

    assert [i.name for i in catalog.search(Category.TV, spec_value='55"')] == ["Neo QLED", "Bravia"]
    assert [i.name for i in catalog.search(Category.TV, term="sony")] == ["Bravia"]
    assert [i.name for i in catalog.search(term="qled")] == ["Neo QLED"]

    assert catalog.suggest_names(Company.SAMSUNG, Category.TV) == ["Crystal 4K", "Neo QLED"]


def test_group_by_company(catalog):
    _tv(catalog, name="Crystal 4K", stock=2)
    _tv(catalog, name="Neo QLED", stock=3)
    catalog.create(Company.SONY, Category.TV, "Bravia", {"screenSize": '55"'}, price=60000, stock=1)

    groups = group_by_company(catalog.all())
    assert [(g.company, g.total_stock, len(g.items)) for g in groups] == [
        (Company.SAMSUNG, 5, 2),
        (Company.SONY, 1, 1),
    ]
