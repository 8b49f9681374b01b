import pytest

from groups import Group, GroupsView, TreeView, ViewFilterState
from groups.collation import collation_key, collate_sorted
from groups.view_filter import EMPTY_GROUPS_MESSAGE, shows_filter, sort_groups
from menu_catalog import GLOBAL_MODULE, GROUPS_MODULE, LeafRef, MenuCatalog, NotFound

PAGADAS = LeafRef("Compras", ("Órdenes", "Confirmadas"), "Pagadas")
ANUALES = LeafRef("Ventas", ("Comprobantes", "Comprobantes Resumidos"), "Anuales")
MERMA = LeafRef("Stock", ("Movimientos", "Salidas"), "Merma")
ESTADISTICAS = LeafRef("Compras", ("Analítica",), "Estadísticas")


def test_collation_orders_accents_and_case_together() -> None:
    names = ["Zapatos", "árbol", "banco"]
    assert collate_sorted(names, key=str) == ["árbol", "banco", "Zapatos"]


def test_collation_keeps_enye_after_n() -> None:
    names = ["ñandú", "oso", "nube", "Nz"]
    assert collate_sorted(names, key=str) == ["nube", "Nz", "ñandú", "oso"]
    assert collation_key("Campaña") != collation_key("Campana")


def test_collation_key_ignores_case_and_marks() -> None:
    assert collation_key("Analítica") == collation_key("ANALITICA")


def test_sort_groups_is_stable_and_keeps_indices() -> None:
    groups = [
        Group("beta", (PAGADAS,)),
        Group("Alfa", (MERMA,)),
        Group("álfa", (ANUALES,)),
        Group("alfa", (ESTADISTICAS,)),
    ]
    entries = sort_groups(groups)
    assert [entry.index for entry in entries] == [1, 2, 3, 0]
    assert [entry.name for entry in entries] == ["Alfa", "álfa", "alfa", "beta"]


def test_sort_groups_sorts_item_copy_only() -> None:
    group = Group("Mixto", (PAGADAS, MERMA, ESTADISTICAS, ANUALES))
    entry = sort_groups([group])[0]
    assert [item.label for item in entry.items] == ["Anuales", "Estadísticas", "Merma", "Pagadas"]
    assert group.items == (PAGADAS, MERMA, ESTADISTICAS, ANUALES)
    assert entry.group is group


def test_default_mode_is_all_for_every_module() -> None:
    state = ViewFilterState()
    for module in MenuCatalog().console_modules():
        assert state.mode(module) == "all"


def test_set_mode_rejects_unknown_mode() -> None:
    state = ViewFilterState()
    with pytest.raises(ValueError):
        state.set_mode("Compras", "some")
    state.set_mode("Compras", "groups")
    assert state.mode("Compras") == "groups"
    assert state.mode("Ventas") == "all"


def test_all_mode_without_groups_renders_tree_only() -> None:
    catalog = MenuCatalog()
    sections = ViewFilterState().current_view("Compras", catalog, [])
    assert sections == [TreeView(module="Compras", node=catalog.tree("Compras"))]


def test_all_mode_appends_groups_after_tree() -> None:
    catalog = MenuCatalog()
    groups = [Group("Zeta", (MERMA,)), Group("alfa", (PAGADAS,))]
    sections = ViewFilterState().current_view("Ventas", catalog, groups)
    assert isinstance(sections[0], TreeView)
    assert sections[0].node is catalog.tree("Ventas")
    trailing = sections[1]
    assert isinstance(trailing, GroupsView)
    assert trailing.trailing is True
    assert trailing.placeholder is None
    assert [entry.name for entry in trailing.entries] == ["alfa", "Zeta"]


def test_groups_mode_shows_groups_only() -> None:
    state = ViewFilterState()
    state.set_mode("Stock", "groups")
    groups = [Group("Uno", (MERMA,))]
    sections = state.current_view("Stock", MenuCatalog(), groups)
    assert len(sections) == 1
    assert isinstance(sections[0], GroupsView)
    assert sections[0].trailing is False


def test_standalone_empty_groups_view_has_placeholder() -> None:
    state = ViewFilterState()
    state.set_mode("Compras", "groups")
    (view,) = state.current_view("Compras", MenuCatalog(), [])
    assert view.entries == ()
    assert view.placeholder == EMPTY_GROUPS_MESSAGE


def test_groups_module_ignores_mode() -> None:
    state = ViewFilterState()
    state.set_mode(GROUPS_MODULE, "all")
    sections = state.current_view(GROUPS_MODULE, MenuCatalog(), [Group("Uno", (MERMA,))])
    assert len(sections) == 1
    assert isinstance(sections[0], GroupsView)
    assert shows_filter(GROUPS_MODULE) is False
    assert shows_filter("Compras") is True


def test_global_module_uses_union_tree() -> None:
    catalog = MenuCatalog()
    (tree_view,) = ViewFilterState().current_view(GLOBAL_MODULE, catalog, [])
    assert list(tree_view.node.children) == ["Compras", "Ventas", "Stock"]


def test_unknown_module_in_all_mode_raises() -> None:
    with pytest.raises(NotFound):
        ViewFilterState().current_view("Finanzas", MenuCatalog(), [])
