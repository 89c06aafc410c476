"""Modelos de dominio de inventario."""

from __future__ import annotations

from dataclasses import dataclass

NUEVO_PRODUCTO_ID = 0


@dataclass(slots=True)
class Producto:
    """Representa un producto en inventario.

    `id` lo asigna la base de datos; `NUEVO_PRODUCTO_ID` marca un producto aun
    no persistido o insertado en esta sesion sin recargar.
    """

    id: int
    nombre: str
    descripcion: str
    categoria: str
    precio_unitario: float
    stock: int
