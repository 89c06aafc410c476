"""Tests de la capa Qt: modelo de tabla y pagina de productos."""

from __future__ import annotations

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import unittest  # noqa: E402
from unittest import mock  # noqa: E402

from PyQt6.QtCore import QModelIndex, Qt, qInstallMessageHandler  # noqa: E402
from PyQt6.QtTest import QAbstractItemModelTester  # noqa: E402
from PyQt6.QtWidgets import QApplication  # noqa: E402

from cliente.backend.observable_list import ObservableList  # noqa: E402
from cliente.frontend.producto_page import ProductoPage  # noqa: E402
from cliente.frontend.producto_table_model import ProductoTableModel  # noqa: E402
from parametros import MENSAJE_DATOS_INVALIDOS, TITULO_DATOS_INVALIDOS  # noqa: E402
from servidor.domain.models import Producto  # noqa: E402


class _InMemoryDAO:
    def __init__(self, productos: list[Producto]) -> None:
        self.productos = list(productos)
        self.saved: list[Producto] = []

    def listar_productos(self) -> list[Producto]:
        return list(self.productos)

    def guardar_producto_db(self, producto: Producto) -> bool:
        self.saved.append(producto)
        return True


def _stored_productos() -> list[Producto]:
    return [
        Producto(1, "Clavo", "", "Ferretería", 0.05, 1000),
        Producto(2, "Sierra", "Acero", "Herramientas", 30.0, 4),
    ]


class _QtTestCase(unittest.TestCase):
    """Comparte una QApplication y captura mensajes de Qt por test."""

    @classmethod
    def setUpClass(cls) -> None:
        cls._app = QApplication.instance() or QApplication([])

    def setUp(self) -> None:
        self.qt_messages: list[str] = []

        def handler(_mode, _context, message: str) -> None:
            self.qt_messages.append(message)

        self._previous_handler = qInstallMessageHandler(handler)

    def tearDown(self) -> None:
        qInstallMessageHandler(self._previous_handler)

    def assert_no_model_failures(self) -> None:
        failures = [message for message in self.qt_messages if "FAIL" in message]
        self.assertEqual(failures, [])


class ProductoTableModelTests(_QtTestCase):
    """Valida la señalizacion de filas del modelo frente a la lista observable."""

    def test_append_signals_rows_before_list_changes(self) -> None:
        """rowsAboutToBeInserted ve el tamano anterior y el tester no reporta fallas."""
        productos = ObservableList([_stored_productos()[0]])
        model = ProductoTableModel(productos)
        tester = QAbstractItemModelTester(
            model,
            QAbstractItemModelTester.FailureReportingMode.Warning,
        )
        sizes_before_insert: list[int] = []
        model.rowsAboutToBeInserted.connect(
            lambda _parent, _first, _last: sizes_before_insert.append(model.rowCount())
        )

        productos.append(_stored_productos()[1])

        self.assertEqual(sizes_before_insert, [1])
        self.assertEqual(model.rowCount(), 2)
        self.assert_no_model_failures()
        self.assertIsNotNone(tester)

    def test_reset_replaces_rows_and_renders_cells(self) -> None:
        """set_all reinicia el modelo y las celdas usan el formato de la tabla."""
        productos: ObservableList[Producto] = ObservableList()
        model = ProductoTableModel(productos)
        tester = QAbstractItemModelTester(
            model,
            QAbstractItemModelTester.FailureReportingMode.Warning,
        )

        productos.set_all(_stored_productos())

        self.assertEqual(model.rowCount(), 2)
        self.assertEqual(model.columnCount(), 5)
        self.assertEqual(model.data(model.index(1, 1)), "Sierra")
        self.assertEqual(model.data(model.index(0, 3)), "0.05")
        self.assertEqual(
            model.headerData(2, Qt.Orientation.Horizontal),
            "Categoría",
        )
        self.assertEqual(model.rowCount(model.index(0, 0)), 0)
        self.assertFalse(model.index(5, 0, QModelIndex()).isValid())
        self.assert_no_model_failures()
        self.assertIsNotNone(tester)


class ProductoPageTests(_QtTestCase):
    """Valida que la pagina conecte sus widgets con el controlador."""

    def setUp(self) -> None:
        super().setUp()
        self.dao = _InMemoryDAO(_stored_productos())
        self.page = ProductoPage(dao=self.dao)
        self.model = self.page._table_model  # noqa: SLF001

    def tearDown(self) -> None:
        self.page.deleteLater()
        super().tearDown()

    def _fill(self, precio: str = "0.15", stock: str = "500") -> None:
        self.page._nombre_input.setText("Tornillo")  # noqa: SLF001
        self.page._descripcion_input.setText("Acero")  # noqa: SLF001
        self.page._categoria_input.setText("Ferretería")  # noqa: SLF001
        self.page._precio_input.setText(precio)  # noqa: SLF001
        self.page._stock_input.setText(stock)  # noqa: SLF001

    def test_page_loads_dao_listing_into_table(self) -> None:
        """Al construirse, la tabla muestra el listado del DAO."""
        self.assertEqual(self.model.rowCount(), 2)
        self.assertEqual(self.model.data(self.model.index(0, 1)), "Clavo")

    def test_insert_button_adds_row_and_clears_form(self) -> None:
        """El boton Insertar guarda, agrega la fila y limpia los campos."""
        self._fill()

        self.page._insert_button.click()  # noqa: SLF001

        self.assertEqual(self.model.rowCount(), 3)
        self.assertEqual(self.model.data(self.model.index(2, 0)), "0")
        self.assertEqual(self.model.data(self.model.index(2, 1)), "Tornillo")
        self.assertEqual(len(self.dao.saved), 1)
        form = self.page.read_form()
        self.assertEqual(
            [form.nombre, form.descripcion, form.categoria, form.precio, form.stock],
            ["", "", "", "", ""],
        )

    def test_invalid_price_shows_error_dialog(self) -> None:
        """Un precio no numerico abre el dialogo de error sin tocar la tabla."""
        self._fill(precio="abc")

        with mock.patch("cliente.frontend.producto_page.show_error") as show_error:
            self.page._insert_button.click()  # noqa: SLF001

        show_error.assert_called_once_with(
            self.page,
            TITULO_DATOS_INVALIDOS,
            MENSAJE_DATOS_INVALIDOS,
        )
        self.assertEqual(self.model.rowCount(), 2)
        self.assertEqual(self.page.read_form().precio, "abc")

    def test_action_combo_dispatches_to_controller(self) -> None:
        """Cambiar el selector ejecuta el handler de la accion elegida."""
        handler = mock.Mock()
        self.page.controller.register_action_handler("Modificar producto", handler)

        self.page._selector_accion.setCurrentText("Modificar producto")  # noqa: SLF001

        handler.assert_called_once_with()
        self.assertEqual(self.page.selected_action(), "Modificar producto")


if __name__ == "__main__":
    unittest.main()
