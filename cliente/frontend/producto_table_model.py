"""Modelo Qt de tabla enlazado a la lista observable de productos."""

from __future__ import annotations

from typing import Any

from PyQt6.QtCore import QAbstractTableModel, QModelIndex, QObject, Qt

from cliente.backend.observable_list import ListChange, ObservableList
from cliente.backend.product_columns import (
    PRODUCTO_COLUMNS,
    ColumnBinding,
    format_cell,
)
from servidor.domain.models import Producto


class ProductoTableModel(QAbstractTableModel):
    """Expone productos a un `QTableView` y se refresca con cada cambio."""

    def __init__(
        self,
        productos: ObservableList[Producto],
        columns: tuple[ColumnBinding, ...] = PRODUCTO_COLUMNS,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._productos = productos
        self._columns = columns
        productos.subscribe(self._on_list_changed, before=self._on_list_about_to_change)

    def set_columns(self, columns: tuple[ColumnBinding, ...]) -> None:
        self.beginResetModel()
        self._columns = columns
        self.endResetModel()

    def rowCount(self, parent: QModelIndex = QModelIndex()) -> int:  # noqa: N802
        if parent.isValid():
            return 0
        return len(self._productos)

    def columnCount(self, parent: QModelIndex = QModelIndex()) -> int:  # noqa: N802
        if parent.isValid():
            return 0
        return len(self._columns)

    def data(self, index: QModelIndex, role: int = Qt.ItemDataRole.DisplayRole) -> Any:
        if not index.isValid():
            return None

        producto = self._productos[index.row()]
        value = self._columns[index.column()].value_for(producto)
        if role == Qt.ItemDataRole.DisplayRole:
            return format_cell(value)
        if role == Qt.ItemDataRole.TextAlignmentRole and isinstance(value, (int, float)):
            return (Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter).value
        return None

    def headerData(  # noqa: N802
        self,
        section: int,
        orientation: Qt.Orientation,
        role: int = Qt.ItemDataRole.DisplayRole,
    ) -> Any:
        if role != Qt.ItemDataRole.DisplayRole:
            return None
        if orientation == Qt.Orientation.Horizontal:
            if not 0 <= section < len(self._columns):
                return None
            return self._columns[section].header
        return str(section + 1)

    def _on_list_about_to_change(self, change: ListChange[Producto]) -> None:
        if change.kind == "append":
            last = change.start + len(change.items) - 1
            self.beginInsertRows(QModelIndex(), change.start, last)
            return

        self.beginResetModel()

    def _on_list_changed(self, change: ListChange[Producto]) -> None:
        if change.kind == "append":
            self.endInsertRows()
            return

        self.endResetModel()
