from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional, Union

GLOBAL_MODULE = "Global"
GROUPS_MODULE = "Mis Grupos"
SYNTHETIC_MODULES = (GLOBAL_MODULE, GROUPS_MODULE)


class NotFound(KeyError):
    """Raised when a module name is not part of the catalog."""

    def __init__(self, module: str) -> None:
        super().__init__(module)
        self.module = module

    def __str__(self) -> str:
        return f"unknown module: {self.module}"


@dataclass(frozen=True)
class Leaf:
    pass


@dataclass(frozen=True)
class Branch:
    children: Dict[str, "MenuNode"] = field(default_factory=dict)


MenuNode = Union[Leaf, Branch]
LEAF = Leaf()


def build_tree(data: Mapping[str, Optional[Mapping]]) -> Branch:
    """Convert the nested ``{label: {...} | None}`` literal into a Branch."""
    children: Dict[str, MenuNode] = {}
    for label, value in data.items():
        if value is None:
            children[label] = LEAF
        elif isinstance(value, Mapping):
            children[label] = build_tree(value)
        else:
            raise TypeError(f"menu entry {label!r} must be a mapping or None")
    return Branch(children)


DEFAULT_MODULES: Dict[str, Dict] = {
    "Compras": {
        "Órdenes": {
            "Pendientes": {
                "Con Factura": None,
                "Sin Factura": None,
            },
            "Confirmadas": {
                "Pagadas": None,
                "Sin Pagar": None,
            },
            "Canceladas": None,
        },
        "Proveedores": {
            "Listado": {
                "Nacionales": None,
                "Internacionales": None,
            },
            "Reporte": None,
        },
        "Analítica": {
            "Estadísticas": None,
            "Historial": None,
        },
    },
    "Ventas": {
        "Comprobantes": {
            "Comprobantes Detallados": {
                "Mensuales": None,
                "Anuales": None,
            },
            "Comprobantes Resumidos": {
                "Mensuales": None,
                "Anuales": None,
            },
        },
        "Informes": {
            "Ventas por Cliente": {
                "Frecuentes": None,
                "Nuevos": None,
            },
            "Ventas por Producto": {
                "Más Vendidos": None,
                "Menos Vendidos": None,
            },
            "Resumen Semanal": None,
        },
        "Campañas": {
            "Promociones": None,
            "Descuentos": None,
        },
    },
    "Stock": {
        "Inventario": {
            "Productos en Stock": {
                "Perecederos": None,
                "No Perecederos": None,
            },
            "Productos Agotados": None,
        },
        "Movimientos": {
            "Entradas": {
                "Compras": None,
                "Producción": None,
            },
            "Salidas": {
                "Ventas": None,
                "Merma": None,
            },
        },
        "Ajustes": {
            "Recuentos": None,
            "Revaluaciones": None,
        },
    },
}


class MenuCatalog:
    """Read-only modules -> topics -> leaves definition."""

    def __init__(self, data: Optional[Mapping[str, Mapping]] = None) -> None:
        source = DEFAULT_MODULES if data is None else data
        self._trees: Dict[str, Branch] = {
            module: build_tree(tree) for module, tree in source.items()
        }

    def modules(self) -> List[str]:
        return list(self._trees.keys())

    def console_modules(self) -> List[str]:
        return self.modules() + list(SYNTHETIC_MODULES)

    def tree(self, module: str) -> Branch:
        try:
            return self._trees[module]
        except KeyError:
            raise NotFound(module) from None

    def global_tree(self) -> Branch:
        return Branch(dict(self._trees))

    def has_module(self, module: str) -> bool:
        return module in self._trees


def is_synthetic(module: str) -> bool:
    return module in SYNTHETIC_MODULES
