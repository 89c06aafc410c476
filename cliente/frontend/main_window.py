"""Ventana principal del ERP de productos."""

from __future__ import annotations

from PyQt6.QtGui import QGuiApplication
from PyQt6.QtWidgets import QMainWindow

from cliente.backend.gateway import ProductoRepository
from cliente.frontend.producto_page import ProductoPage


class MainWindow(QMainWindow):
    """Ventana que aloja la pagina de gestion de productos."""

    def __init__(self, dao: ProductoRepository) -> None:
        super().__init__()
        self._producto_page: ProductoPage

        self.setWindowTitle("ERP - Productos")
        screen = QGuiApplication.primaryScreen()
        if screen is not None:
            geo = screen.availableGeometry()  # tamaño usable (sin taskbar/dock)
            w = int(geo.width() * 0.65)
            h = int(geo.height() * 0.75)
            self.resize(w, h)
            self.setMinimumSize(int(w * 0.70), int(h * 0.70))

        self._producto_page = ProductoPage(dao=dao, parent=self)
        self.setCentralWidget(self._producto_page)
        self.setStyleSheet("QMainWindow { background-color: #eef1f4; }")

    @property
    def producto_page(self) -> ProductoPage:
        return self._producto_page
