"""Excepciones compartidas del proyecto."""

from __future__ import annotations


class ValidationError(Exception):
    """Datos del formulario de producto que no se pueden interpretar."""


class ServiceError(Exception):
    """Fallo de la capa de datos (base de productos inaccesible o corrupta)."""
