"""Parametros globales del proyecto."""

from __future__ import annotations

import logging
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent
DATA_DIR = BASE_DIR / "data"
DATABASE_PATH = DATA_DIR / "erp.sqlite3"

ACCION_ANADIR_PRODUCTO = "Añadir producto"
ACCIONES_PRODUCTO: tuple[str, ...] = (
    ACCION_ANADIR_PRODUCTO,
    "Modificar producto",
    "Eliminar producto",
)

TITULO_DATOS_INVALIDOS = "Datos inválidos"
MENSAJE_DATOS_INVALIDOS = "Revisa los campos: precio y stock deben ser numéricos."
TITULO_ERROR_GUARDADO = "Error al guardar"
MENSAJE_ERROR_GUARDADO = "No fue posible guardar el producto en la base de datos."

# Un guardado rechazado por el DAO no muestra alerta salvo que se active.
ALERTAR_FALLO_GUARDADO = False

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
)
