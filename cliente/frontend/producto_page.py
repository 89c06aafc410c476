"""Pagina de gestion de productos: formulario de alta y tabla."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QColor
from PyQt6.QtWidgets import (
    QAbstractItemView,
    QComboBox,
    QFormLayout,
    QFrame,
    QGraphicsDropShadowEffect,
    QHBoxLayout,
    QHeaderView,
    QLabel,
    QLineEdit,
    QPushButton,
    QTableView,
    QVBoxLayout,
    QWidget,
)

from cliente.backend.controller import ProductoViewController
from cliente.backend.gateway import ProductoRepository
from cliente.frontend.dialogs import show_error
from cliente.frontend.producto_table_model import ProductoTableModel
from parametros import ACCIONES_PRODUCTO
from shared.errors import ServiceError
from shared.protocol import ProductoFormData


class ProductoPage(QWidget):
    """Vista de productos; implementa `ProductoFormView` para el controlador."""

    def __init__(
        self,
        dao: ProductoRepository,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._nombre_input: QLineEdit
        self._descripcion_input: QLineEdit
        self._categoria_input: QLineEdit
        self._precio_input: QLineEdit
        self._stock_input: QLineEdit
        self._selector_accion: QComboBox
        self._insert_button: QPushButton
        self._reload_button: QPushButton
        self._table: QTableView

        self._controller = ProductoViewController(dao=dao, view=self)
        self._table_model = ProductoTableModel(self._controller.productos, parent=self)

        self._build_ui()
        self._apply_styles()
        self._controller.initialize()
        self._table_model.set_columns(self._controller.columns)
        self._connect_signals()

    @property
    def controller(self) -> ProductoViewController:
        return self._controller

    def read_form(self) -> ProductoFormData:
        return ProductoFormData(
            nombre=self._nombre_input.text(),
            descripcion=self._descripcion_input.text(),
            categoria=self._categoria_input.text(),
            precio=self._precio_input.text(),
            stock=self._stock_input.text(),
        )

    def clear_fields(self) -> None:
        for field in self._form_fields():
            field.clear()
        self._nombre_input.setFocus()

    def selected_action(self) -> str:
        return self._selector_accion.currentText()

    def show_alert(self, title: str, message: str) -> None:
        show_error(self, title, message)

    def _form_fields(self) -> tuple[QLineEdit, ...]:
        return (
            self._nombre_input,
            self._descripcion_input,
            self._categoria_input,
            self._precio_input,
            self._stock_input,
        )

    def _build_ui(self) -> None:
        """Construye formulario, selector de accion y tabla."""
        root_layout = QHBoxLayout(self)
        root_layout.setContentsMargins(24, 24, 24, 24)
        root_layout.setSpacing(18)

        form_card = QFrame(self)
        form_card.setObjectName("formCard")
        form_layout = QVBoxLayout(form_card)
        form_layout.setContentsMargins(24, 24, 24, 24)
        form_layout.setSpacing(12)

        title_label = QLabel("Productos", form_card)
        title_label.setObjectName("titleLabel")
        title_label.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self._selector_accion = QComboBox(form_card)
        self._selector_accion.addItems(ACCIONES_PRODUCTO)

        fields_layout = QFormLayout()
        fields_layout.setSpacing(10)
        self._nombre_input = QLineEdit(form_card)
        self._descripcion_input = QLineEdit(form_card)
        self._categoria_input = QLineEdit(form_card)
        self._precio_input = QLineEdit(form_card)
        self._precio_input.setPlaceholderText("0.00")
        self._stock_input = QLineEdit(form_card)
        self._stock_input.setPlaceholderText("0")

        fields_layout.addRow("Nombre", self._nombre_input)
        fields_layout.addRow("Descripción", self._descripcion_input)
        fields_layout.addRow("Categoría", self._categoria_input)
        fields_layout.addRow("Precio unitario", self._precio_input)
        fields_layout.addRow("Stock", self._stock_input)

        buttons_layout = QHBoxLayout()
        buttons_layout.addStretch(1)
        self._reload_button = QPushButton("Recargar", form_card)
        self._reload_button.setObjectName("secondaryButton")
        self._insert_button = QPushButton("Insertar", form_card)
        buttons_layout.addWidget(self._reload_button)
        buttons_layout.addWidget(self._insert_button)

        form_layout.addWidget(title_label)
        form_layout.addWidget(self._selector_accion)
        form_layout.addLayout(fields_layout)
        form_layout.addStretch(1)
        form_layout.addLayout(buttons_layout)

        shadow = QGraphicsDropShadowEffect(form_card)
        shadow.setBlurRadius(30)
        shadow.setOffset(0, 6)
        shadow.setColor(QColor(0, 0, 0, 35))
        form_card.setGraphicsEffect(shadow)

        self._table = QTableView(self)
        self._table.setModel(self._table_model)
        self._table.setSelectionBehavior(QAbstractItemView.SelectionBehavior.SelectRows)
        self._table.setEditTriggers(QAbstractItemView.EditTrigger.NoEditTriggers)
        self._table.verticalHeader().setVisible(False)
        self._table.horizontalHeader().setSectionResizeMode(QHeaderView.ResizeMode.Stretch)

        root_layout.addWidget(form_card, 2)
        root_layout.addWidget(self._table, 3)

    def _apply_styles(self) -> None:
        """Aplica estilos visuales consistentes con la app."""
        self.setStyleSheet(
            """
            QFrame#formCard {
                background-color: #ffffff;
                border-radius: 16px;
            }
            QLabel#titleLabel {
                color: #20232a;
                font-family: "Segoe UI";
                font-size: 22px;
                font-weight: 700;
            }
            QLineEdit, QComboBox {
                background-color: #f8fafc;
                border: 1px solid #d1d5db;
                border-radius: 8px;
                color: #111827;
                font-family: "Segoe UI";
                font-size: 13px;
                padding: 8px;
            }
            QLineEdit:focus {
                border: 1px solid #2563eb;
                background-color: #ffffff;
            }
            QPushButton {
                background-color: #2563eb;
                border: none;
                border-radius: 10px;
                color: #ffffff;
                font-family: "Segoe UI";
                font-size: 13px;
                font-weight: 600;
                min-height: 40px;
                min-width: 100px;
                padding: 8px 12px;
            }
            QPushButton:hover {
                background-color: #1d4ed8;
            }
            QPushButton#secondaryButton {
                background-color: #e5e7eb;
                color: #1f2937;
            }
            QTableView {
                background-color: #ffffff;
                border: 1px solid #d1d5db;
                border-radius: 8px;
                font-family: "Segoe UI";
                font-size: 13px;
            }
            """
        )

    def _connect_signals(self) -> None:
        """Conecta widgets con las acciones del controlador."""
        self._insert_button.clicked.connect(self._on_insert_clicked)
        self._reload_button.clicked.connect(self._on_reload_clicked)
        self._stock_input.returnPressed.connect(self._controller.insertar_producto)
        self._selector_accion.currentTextChanged.connect(self._on_action_changed)

    def _on_insert_clicked(self, _checked: bool = False) -> None:
        self._controller.insertar_producto()

    def _on_reload_clicked(self, _checked: bool = False) -> None:
        try:
            self._controller.recargar_productos()
        except ServiceError as exc:
            show_error(self, "Error al recargar", str(exc))

    def _on_action_changed(self, _text: str) -> None:
        self._controller.cambiar_accion()
