"""Interfaces que el controlador de productos consume."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from servidor.domain.models import Producto
from shared.protocol import ProductoFormData


class ProductoRepository(Protocol):
    """Interfaz de acceso a datos de productos (cumplida por `ProductoDAO`)."""

    def listar_productos(self) -> Sequence[Producto]:
        """Retorna el listado completo de productos almacenados."""

    def guardar_producto_db(self, producto: Producto) -> bool:
        """Persiste un producto. True si quedo guardado."""


class ProductoFormView(Protocol):
    """Vista que expone los campos del formulario y las alertas modales."""

    def read_form(self) -> ProductoFormData:
        """Retorna el texto actual de los cinco campos."""

    def clear_fields(self) -> None:
        """Vacia los cinco campos de texto."""

    def selected_action(self) -> str:
        """Retorna la accion elegida en el selector."""

    def show_alert(self, title: str, message: str) -> None:
        """Muestra una alerta de error y bloquea hasta que se cierre."""
