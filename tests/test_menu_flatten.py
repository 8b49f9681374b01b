import pytest

from menu_catalog import (
    GLOBAL_MODULE,
    GROUPS_MODULE,
    LEAF,
    Branch,
    Leaf,
    LeafRef,
    MenuCatalog,
    NotFound,
    build_tree,
    filter_candidates,
    flatten,
    flatten_all,
)


def _small_catalog() -> MenuCatalog:
    return MenuCatalog(
        {
            "A": {"x": {"y": {"z": None}, "w": None}, "v": None},
            "B": {"solo": None},
        }
    )


def test_build_tree_uses_tagged_nodes() -> None:
    tree = build_tree({"Menu": {"Opcion": None}, "Suelta": None})
    assert isinstance(tree, Branch)
    assert isinstance(tree.children["Menu"], Branch)
    assert tree.children["Menu"].children["Opcion"] is LEAF
    assert isinstance(tree.children["Suelta"], Leaf)


def test_build_tree_rejects_other_values() -> None:
    with pytest.raises(TypeError):
        build_tree({"bad": 3})


def test_flatten_emits_one_ref_per_leaf_with_ancestor_path() -> None:
    catalog = _small_catalog()
    leaves = flatten(catalog.tree("A"), "A")
    assert leaves == [
        LeafRef("A", ("x", "y"), "z"),
        LeafRef("A", ("x",), "w"),
        LeafRef("A", (), "v"),
    ]


def test_flatten_is_idempotent() -> None:
    catalog = MenuCatalog()
    tree = catalog.tree("Compras")
    assert flatten(tree, "Compras") == flatten(tree, "Compras")


def test_flatten_all_covers_every_catalog_leaf() -> None:
    catalog = MenuCatalog()
    leaves = flatten_all(catalog)
    assert len(leaves) == 30
    per_module = {module: len(flatten(catalog.tree(module), module)) for module in catalog.modules()}
    assert per_module == {"Compras": 10, "Ventas": 11, "Stock": 9}
    assert LeafRef("Compras", ("Órdenes", "Confirmadas"), "Pagadas") in leaves


def test_leaf_ref_equality_is_structural() -> None:
    first = LeafRef("Ventas", ("Comprobantes", "Comprobantes Detallados"), "Mensuales")
    second = LeafRef("Ventas", ("Comprobantes", "Comprobantes Resumidos"), "Mensuales")
    assert first != second
    assert first == LeafRef("Ventas", ("Comprobantes", "Comprobantes Detallados"), "Mensuales")
    assert len({first, second, first}) == 2


def test_leaf_ref_display_paths() -> None:
    leaf = LeafRef("Compras", ("Órdenes", "Confirmadas"), "Pagadas")
    assert leaf.display_path == "Órdenes > Confirmadas > Pagadas"
    assert leaf.full_path == "Compras > Órdenes > Confirmadas > Pagadas"


def test_leaf_ref_from_dict_validates_shape() -> None:
    assert LeafRef.from_dict({"module": "B", "path": [], "label": "solo"}) == LeafRef("B", (), "solo")
    with pytest.raises(ValueError):
        LeafRef.from_dict({"module": "B", "path": "x", "label": "solo"})
    with pytest.raises(ValueError):
        LeafRef.from_dict({"module": None, "path": [], "label": "solo"})


def test_catalog_unknown_module_raises_not_found() -> None:
    catalog = MenuCatalog()
    with pytest.raises(NotFound):
        catalog.tree("Finanzas")
    with pytest.raises(KeyError):
        catalog.tree(GLOBAL_MODULE)


def test_catalog_global_tree_and_console_modules() -> None:
    catalog = MenuCatalog()
    assert catalog.modules() == ["Compras", "Ventas", "Stock"]
    assert catalog.console_modules() == ["Compras", "Ventas", "Stock", GLOBAL_MODULE, GROUPS_MODULE]
    global_tree = catalog.global_tree()
    assert list(global_tree.children) == ["Compras", "Ventas", "Stock"]
    assert global_tree.children["Stock"] is catalog.tree("Stock")


def test_filter_candidates_matches_path_case_insensitively() -> None:
    leaves = flatten_all(MenuCatalog())
    visible = filter_candidates(leaves, "pagad")
    assert visible == {"Compras": [LeafRef("Compras", ("Órdenes", "Confirmadas"), "Pagadas")]}
    assert filter_candidates(leaves, "  PAGAD ") == visible


def test_filter_candidates_hides_modules_without_matches() -> None:
    leaves = flatten_all(MenuCatalog())
    visible = filter_candidates(leaves, "mensuales")
    assert list(visible) == ["Ventas"]
    assert [leaf.path[-1] for leaf in visible["Ventas"]] == [
        "Comprobantes Detallados",
        "Comprobantes Resumidos",
    ]
    assert filter_candidates(leaves, "no existe") == {}


def test_filter_candidates_matches_ancestor_labels_and_keeps_input() -> None:
    leaves = flatten_all(MenuCatalog())
    before = list(leaves)
    visible = filter_candidates(leaves, "proveedores")
    assert len(visible["Compras"]) == 3
    assert leaves == before


def test_filter_candidates_empty_term_keeps_everything() -> None:
    leaves = flatten_all(MenuCatalog())
    visible = filter_candidates(leaves, "")
    assert list(visible) == ["Compras", "Ventas", "Stock"]
    assert sum(len(items) for items in visible.values()) == 30
