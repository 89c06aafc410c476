"""Validaciones para entradas del cliente."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Generic, TypeVar

from servidor.domain.models import NUEVO_PRODUCTO_ID, Producto
from shared.errors import ValidationError
from shared.protocol import ProductoFormData

T = TypeVar("T")

STOCK_MIN = -(2**31)
STOCK_MAX = 2**31 - 1

_PRECIO_PATTERN = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_STOCK_PATTERN = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True, slots=True)
class ParseResult(Generic[T]):
    """Resultado de interpretar un texto: valor o error, nunca ambos."""

    value: T | None = None
    error: ValidationError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Retorna el valor o levanta el error de validacion."""
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]


def parse_precio(text: str) -> ParseResult[float]:
    """Interpreta el precio unitario como numero decimal finito.

    Solo digitos ASCII con punto decimal y exponente opcional; se rechazan
    separadores `_`, comas y digitos de otros alfabetos.
    """
    clean = text.strip()
    if not _PRECIO_PATTERN.fullmatch(clean):
        return ParseResult(error=ValidationError(f"Precio invalido: {text!r}"))

    value = float(clean)
    if not math.isfinite(value):
        return ParseResult(error=ValidationError(f"Precio no finito: {text!r}"))
    return ParseResult(value=value)


def parse_stock(text: str) -> ParseResult[int]:
    """Interpreta el stock como entero de 32 bits en base 10."""
    clean = text.strip()
    if not _STOCK_PATTERN.fullmatch(clean):
        return ParseResult(error=ValidationError(f"Stock invalido: {text!r}"))

    value = int(clean, 10)
    if not STOCK_MIN <= value <= STOCK_MAX:
        return ParseResult(error=ValidationError(f"Stock fuera de rango: {text!r}"))
    return ParseResult(value=value)


def collect_producto(data: ProductoFormData) -> Producto:
    """Construye un producto nuevo desde el formulario.

    Levanta el primer `ValidationError` encontrado entre precio y stock; en ese
    caso no se construye nada.
    """
    precio = parse_precio(data.precio)
    stock = parse_stock(data.stock)
    for result in (precio, stock):
        if not result.ok:
            result.unwrap()

    return Producto(
        id=NUEVO_PRODUCTO_ID,
        nombre=data.nombre,
        descripcion=data.descripcion,
        categoria=data.categoria,
        precio_unitario=precio.unwrap(),
        stock=stock.unwrap(),
    )
