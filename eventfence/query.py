# query.py
"""Procesamiento genérico del listado: orden y paginación."""
from typing import Dict, List, Optional, Tuple

from eventfence.errors import ValidationError


def parse_sort(sort: Optional[str], allowed, default: str = "-date") -> List[Tuple[str, bool]]:
    """
    Convertir "campo1,-campo2" en [(campo1, False), (campo2, True)].

    El prefijo "-" indica orden descendente.
    """
    order_by = []
    for token in (sort or default).split(","):
        token = token.strip()
        if not token:
            continue
        descending = token.startswith("-")
        field = token.lstrip("-")
        if field not in allowed:
            raise ValidationError(f"No se puede ordenar por '{field}'")
        order_by.append((field, descending))
    return order_by


def page_window(page: int, limit: int) -> int:
    """Offset para la página solicitada (1-indexada)"""
    return (page - 1) * limit


def pagination(page: int, limit: int, total: int) -> Dict[str, Dict[str, int]]:
    """Páginas vecinas que existen, al estilo {next: {...}, prev: {...}}"""
    result = {}
    if page * limit < total:
        result["next"] = {"page": page + 1, "limit": limit}
    if page > 1:
        result["prev"] = {"page": page - 1, "limit": limit}
    return result
