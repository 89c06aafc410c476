"""Helpers de dialogos para frontend."""

from __future__ import annotations

from PyQt6.QtWidgets import QMessageBox, QWidget


def show_error(parent: QWidget | None, title: str, message: str) -> None:
    """Muestra un dialogo modal de error; retorna al cerrarse."""
    QMessageBox.critical(parent, title, message)
