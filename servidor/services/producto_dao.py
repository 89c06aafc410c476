"""Acceso a datos de productos sobre SQLite."""

from __future__ import annotations

import logging
import sqlite3
from collections.abc import Iterator
from contextlib import closing, contextmanager
from pathlib import Path

from parametros import DATABASE_PATH
from servidor.domain.models import Producto
from shared.errors import ServiceError

LOGGER = logging.getLogger(__name__)

_CREATE_TABLE_SQL = """
CREATE TABLE IF NOT EXISTS productos (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    nombre TEXT NOT NULL,
    descripcion TEXT,
    categoria TEXT,
    precio_unitario REAL NOT NULL,
    stock INTEGER NOT NULL
)
"""

_SELECT_ALL_SQL = (
    "SELECT id, nombre, descripcion, categoria, precio_unitario, stock "
    "FROM productos ORDER BY id"
)

_INSERT_SQL = (
    "INSERT INTO productos (nombre, descripcion, categoria, precio_unitario, stock) "
    "VALUES (?, ?, ?, ?, ?)"
)


class ProductoDAO:
    """Lee y persiste productos en una base SQLite local."""

    def __init__(self, db_path: Path = DATABASE_PATH) -> None:
        self._db_path = db_path

    @property
    def db_path(self) -> Path:
        return self._db_path

    def ensure_schema(self) -> None:
        """Crea el directorio de datos y la tabla de productos si no existen."""
        try:
            self._db_path.parent.mkdir(parents=True, exist_ok=True)
            with self._connect() as connection:
                connection.execute(_CREATE_TABLE_SQL)
        except (OSError, sqlite3.Error) as exc:
            LOGGER.exception("Fallo al inicializar base de productos: %s", self._db_path)
            raise ServiceError(
                f"No fue posible inicializar la base de datos: {self._db_path}"
            ) from exc

        LOGGER.info("Base de productos inicializada en: %s", self._db_path)

    def listar_productos(self) -> list[Producto]:
        """Retorna todos los productos almacenados, ordenados por id."""
        try:
            with self._connect() as connection:
                rows = connection.execute(_SELECT_ALL_SQL).fetchall()
        except sqlite3.Error as exc:
            LOGGER.exception("Fallo inesperado al listar productos.")
            raise ServiceError("No fue posible listar los productos.") from exc

        return [self._row_to_producto(row) for row in rows]

    def guardar_producto_db(self, producto: Producto) -> bool:
        """Inserta un producto nuevo. Retorna False si la base no lo acepta.

        El id del producto recibido se ignora: lo asigna SQLite y no se
        informa de vuelta al llamador.
        """
        try:
            with self._connect() as connection:
                connection.execute(
                    _INSERT_SQL,
                    (
                        producto.nombre,
                        producto.descripcion,
                        producto.categoria,
                        producto.precio_unitario,
                        producto.stock,
                    ),
                )
        except (sqlite3.Error, ValueError, OverflowError):
            # ValueError: texto no codificable (ej. surrogates); OverflowError: entero
            # fuera del rango de SQLite.
            LOGGER.exception("No se pudo guardar producto: nombre=%r", producto.nombre)
            return False

        LOGGER.info("Producto guardado: nombre=%s", producto.nombre)
        return True

    @contextmanager
    def _connect(self) -> Iterator[sqlite3.Connection]:
        """Abre una conexion que confirma al salir sin error y siempre se cierra."""
        with closing(sqlite3.connect(self._db_path)) as connection:
            with connection:
                yield connection

    @staticmethod
    def _row_to_producto(row: tuple) -> Producto:
        product_id, nombre, descripcion, categoria, precio_unitario, stock = row
        return Producto(
            id=int(product_id),
            nombre=nombre,
            descripcion=descripcion or "",
            categoria=categoria or "",
            precio_unitario=float(precio_unitario),
            stock=int(stock),
        )
