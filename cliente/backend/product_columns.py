"""Columnas de la tabla de productos como funciones puras."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from servidor.domain.models import Producto

CellValue = int | float | str


@dataclass(frozen=True, slots=True)
class ColumnBinding:
    """Asocia un encabezado con el valor que muestra para cada producto."""

    header: str
    accessor: Callable[[Producto], CellValue]

    def value_for(self, producto: Producto) -> CellValue:
        return self.accessor(producto)


# La descripcion se captura en el formulario pero no se muestra en la tabla.
PRODUCTO_COLUMNS: tuple[ColumnBinding, ...] = (
    ColumnBinding("ID", lambda producto: producto.id),
    ColumnBinding("Nombre", lambda producto: producto.nombre),
    ColumnBinding("Categoría", lambda producto: producto.categoria),
    ColumnBinding("Precio", lambda producto: producto.precio_unitario),
    ColumnBinding("Stock", lambda producto: producto.stock),
)


def format_cell(value: CellValue) -> str:
    """Formatea una celda; los precios se muestran con dos decimales."""
    if isinstance(value, float):
        return f"{value:.2f}"
    return str(value)
