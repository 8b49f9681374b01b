"""Central UI terminology mapping for user-facing labels."""

from menu_catalog.catalog import GLOBAL_MODULE, GROUPS_MODULE
from menu_catalog.flatten import LeafRef

SHOW_ALL = "Mostrar todo"
SHOW_GROUPS = "Mostrar grupos"
CREATE_GROUP = "Crear grupo"
EDIT_GROUP = "Editar grupo"
DELETE_GROUP = "Eliminar grupo"
GROUP_NAME = "Nombre del grupo"
SEARCH_OPTIONS = "Buscar opciones..."
SAVE = "Guardar"
CANCEL = "Cancelar"

# Font Awesome names from the web console mapped onto Qt standard icons.
_MODULE_ICONS = {
    "Compras": "SP_DialogSaveButton",
    "Ventas": "SP_DialogApplyButton",
    "Stock": "SP_DriveHDIcon",
    GLOBAL_MODULE: "SP_DriveNetIcon",
    GROUPS_MODULE: "SP_FileDialogListView",
}
_DEFAULT_ICON = "SP_DirIcon"


def icon_name_for(module: str) -> str:
    """Return the ``QStyle.StandardPixmap`` name used for a module."""
    return _MODULE_ICONS.get(module, _DEFAULT_ICON)


def group_item_label(item: LeafRef) -> str:
    return f"{item.label} ({item.module})"


def candidate_label(item: LeafRef) -> str:
    return item.display_path
