"""DTOs intercambiados entre la vista y el controlador."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class ProductoFormData:
    """Textos crudos capturados desde el formulario de producto."""

    nombre: str
    descripcion: str
    categoria: str
    precio: str
    stock: str
