"""Controlador de la vista de productos."""

from __future__ import annotations

import logging
from collections.abc import Callable

from parametros import (
    ACCION_ANADIR_PRODUCTO,
    ALERTAR_FALLO_GUARDADO,
    MENSAJE_DATOS_INVALIDOS,
    MENSAJE_ERROR_GUARDADO,
    TITULO_DATOS_INVALIDOS,
    TITULO_ERROR_GUARDADO,
)
from servidor.domain.models import Producto

from .gateway import ProductoFormView, ProductoRepository
from .observable_list import ObservableList
from .product_columns import PRODUCTO_COLUMNS, ColumnBinding
from .validators import collect_producto

LOGGER = logging.getLogger(__name__)

ActionHandler = Callable[[], None]


class ProductoViewController:
    """Coordina el formulario de productos, el DAO y la lista de la tabla."""

    def __init__(
        self,
        dao: ProductoRepository,
        view: ProductoFormView,
        productos: ObservableList[Producto] | None = None,
        alertar_fallo_guardado: bool = ALERTAR_FALLO_GUARDADO,
    ) -> None:
        self._dao = dao
        self._view = view
        self._productos: ObservableList[Producto] = (
            productos if productos is not None else ObservableList()
        )
        self._alertar_fallo_guardado = alertar_fallo_guardado
        self._columns: tuple[ColumnBinding, ...] = ()
        self._action_handlers: dict[str, ActionHandler] = {
            ACCION_ANADIR_PRODUCTO: self._on_anadir_producto,
        }

    @property
    def productos(self) -> ObservableList[Producto]:
        """Lista observable que respalda la tabla."""
        return self._productos

    @property
    def columns(self) -> tuple[ColumnBinding, ...]:
        return self._columns

    def initialize(self) -> None:
        """Vincula columnas y carga el listado completo desde el DAO.

        Los errores del DAO no se capturan aqui.
        """
        self._columns = PRODUCTO_COLUMNS
        self.recargar_productos()

    def recargar_productos(self) -> None:
        """Reemplaza la lista visible por el listado actual del DAO."""
        productos = self._dao.listar_productos()
        self._productos.set_all(productos)
        LOGGER.info("Productos cargados en tabla: %s", len(self._productos))

    def insertar_producto(self) -> None:
        """Valida el formulario, guarda el producto y actualiza la tabla."""
        # Cualquier excepcion desde la lectura hasta la limpieza termina en alerta;
        # ninguna debe escapar hacia el slot de Qt.
        try:
            producto = collect_producto(self._view.read_form())
            guardado = self._dao.guardar_producto_db(producto)
            if guardado:
                self._productos.append(producto)
                self.limpiar_campos()
        except Exception:
            LOGGER.exception("No se pudo insertar el producto desde el formulario.")
            self.mostrar_alerta(TITULO_DATOS_INVALIDOS, MENSAJE_DATOS_INVALIDOS)
            return

        if not guardado:
            LOGGER.warning("El DAO rechazo el producto: nombre=%s", producto.nombre)
            if self._alertar_fallo_guardado:
                self.mostrar_alerta(TITULO_ERROR_GUARDADO, MENSAJE_ERROR_GUARDADO)
            return

        LOGGER.info("Producto insertado en tabla: nombre=%s", producto.nombre)

    def cambiar_accion(self) -> None:
        """Ejecuta el handler registrado para la accion seleccionada."""
        seleccion = self._view.selected_action()
        handler = self._action_handlers.get(seleccion)
        if handler is None:
            LOGGER.info("Accion sin handler registrado: %s", seleccion)
            return

        LOGGER.info("Accion seleccionada: %s", seleccion)
        handler()

    def register_action_handler(self, accion: str, handler: ActionHandler) -> None:
        """Asocia (o reemplaza) el handler de una accion del selector."""
        self._action_handlers[accion] = handler

    def limpiar_campos(self) -> None:
        self._view.clear_fields()

    def mostrar_alerta(self, titulo: str, mensaje: str) -> None:
        self._view.show_alert(titulo, mensaje)

    def _on_anadir_producto(self) -> None:
        """Placeholder: el formulario de alta ya es el visible."""
        LOGGER.debug("Accion ejecutada: anadir producto (placeholder)")
