import pytest

from groups import (
    EditorStateError,
    GroupEditor,
    GroupStore,
    IndexOutOfRange,
    MemoryBlobStore,
    ValidationError,
    ValidationReason,
)
from menu_catalog import LeafRef, MenuCatalog

PAGADAS = LeafRef("Compras", ("Órdenes", "Confirmadas"), "Pagadas")
CANCELADAS = LeafRef("Compras", ("Órdenes",), "Canceladas")
MERMA = LeafRef("Stock", ("Movimientos", "Salidas"), "Merma")
PROMOCIONES = LeafRef("Ventas", ("Campañas",), "Promociones")


def _editor():
    saved = []
    store = GroupStore(MemoryBlobStore())
    store.load()
    editor = GroupEditor(MenuCatalog(), store, on_saved=saved.append)
    return editor, store, saved


def test_open_create_starts_blank_session() -> None:
    editor, _store, _saved = _editor()
    assert editor.is_editing is False
    session = editor.open_create()
    assert editor.is_editing is True
    assert session.target_index is None
    assert session.selected == set()
    assert session.name_draft == ""


def test_save_with_blank_name_fails_and_keeps_store() -> None:
    editor, store, saved = _editor()
    editor.open_create()
    editor.set_name("   ")
    editor.toggle(PAGADAS)
    with pytest.raises(ValidationError) as excinfo:
        editor.save()
    assert excinfo.value.reason is ValidationReason.EMPTY_NAME
    assert store.all() == ()
    assert saved == []
    assert editor.is_editing is True


def test_save_without_selection_fails() -> None:
    editor, store, _saved = _editor()
    editor.open_create()
    editor.set_name("Vacío")
    with pytest.raises(ValidationError) as excinfo:
        editor.save()
    assert excinfo.value.reason is ValidationReason.NO_SELECTION
    assert "al menos una opción" in excinfo.value.message
    assert store.all() == ()


def test_save_creates_group_in_catalog_order() -> None:
    editor, store, saved = _editor()
    editor.open_create()
    editor.set_name("  Revisión  ")
    editor.toggle(MERMA)
    editor.toggle(PROMOCIONES)
    editor.toggle(PAGADAS)
    index = editor.save()
    assert index == 0
    assert saved == [0]
    assert editor.is_editing is False
    group = store.get(0)
    assert group.name == "Revisión"
    assert group.items == (PAGADAS, PROMOCIONES, MERMA)


def test_toggle_twice_removes_selection() -> None:
    editor, _store, _saved = _editor()
    editor.open_create()
    assert editor.toggle(PAGADAS) is True
    assert editor.is_selected(PAGADAS) is True
    assert editor.toggle(LeafRef("Compras", ("Órdenes", "Confirmadas"), "Pagadas")) is False
    assert editor.is_selected(PAGADAS) is False


def test_open_edit_preloads_and_updates_in_place() -> None:
    editor, store, saved = _editor()
    store.create("Primero", [PAGADAS])
    store.create("Segundo", [MERMA, CANCELADAS])
    session = editor.open_edit(1)
    assert session.target_index == 1
    assert session.name_draft == "Segundo"
    assert session.selected == {MERMA, CANCELADAS}
    editor.toggle(MERMA)
    editor.set_name("Segundo bis")
    assert editor.save() == 1
    assert saved == [1]
    assert [group.name for group in store.all()] == ["Primero", "Segundo bis"]
    assert store.get(1).items == (CANCELADAS,)


def test_open_edit_rejects_invalid_index() -> None:
    editor, _store, _saved = _editor()
    with pytest.raises(IndexOutOfRange):
        editor.open_edit(0)
    assert editor.is_editing is False


def test_save_after_earlier_delete_raises_and_keeps_neighbour() -> None:
    editor, store, saved = _editor()
    store.create("A", [PAGADAS])
    store.create("B", [MERMA])
    store.create("C", [CANCELADAS])
    editor.open_edit(1)
    editor.set_name("B editado")
    store.delete(0)
    with pytest.raises(IndexOutOfRange):
        editor.save()
    assert saved == []
    assert [group.name for group in store.all()] == ["B", "C"]


def test_cancel_discards_draft() -> None:
    editor, store, saved = _editor()
    editor.open_create()
    editor.set_name("Borrador")
    editor.toggle(PAGADAS)
    editor.cancel()
    assert editor.session is None
    assert store.all() == ()
    assert saved == []


def test_operations_while_idle_raise() -> None:
    editor, _store, _saved = _editor()
    with pytest.raises(EditorStateError):
        editor.toggle(PAGADAS)
    with pytest.raises(EditorStateError):
        editor.set_name("x")
    with pytest.raises(EditorStateError):
        editor.save()
    assert editor.is_selected(PAGADAS) is False


def test_selection_outside_catalog_is_kept_last() -> None:
    editor, store, _saved = _editor()
    retired = LeafRef("Compras", ("Antiguo",), "Retirado")
    store.create("Viejo", [retired, MERMA])
    editor.open_edit(0)
    editor.toggle(PAGADAS)
    editor.save()
    assert store.get(0).items == (PAGADAS, MERMA, retired)


def test_candidates_filter_by_term() -> None:
    editor, _store, _saved = _editor()
    assert editor.candidates("pagad") == {"Compras": [PAGADAS]}
    everything = editor.candidates()
    assert list(everything) == ["Compras", "Ventas", "Stock"]
