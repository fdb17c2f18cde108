# rubik_term/core/color.py
from __future__ import annotations

from enum import Enum
from typing import Dict, Tuple


class Color(Enum):
    """Color visible en el cubo.

    Corresponde tanto al color de un sticker (facelet) como al color de una cara,
    que es la interpretación geométricamente más correcta (la cara se identifica
    por su pieza central, que nunca se mueve).

    Los valores son letras, igual que en la notación de estados por texto
    ("W", "R", "G", "O", "B", "Y"). El índice de cara NO es el valor del enum:
    se obtiene siempre con `rank()` / `Color.rank`.
    """

    WHITE = "W"
    RED = "R"
    GREEN = "G"
    ORANGE = "O"
    BLUE = "B"
    YELLOW = "Y"

    @property
    def rank(self) -> int:
        """Índice fijo del color (0..5), usado para indexar las caras del cubo."""
        return COLOR_RANK[self]


# Rango de cada color. Es también el índice de su cara en `Cube.faces`,
# por lo que ambos deben mantenerse sincronizados.
COLOR_RANK: Dict[Color, int] = {
    Color.WHITE: 0,
    Color.RED: 1,
    Color.GREEN: 2,
    Color.ORANGE: 3,
    Color.BLUE: 4,
    Color.YELLOW: 5,
}


def _check_ranks(ranks: Dict[Color, int]) -> Tuple[Color, ...]:
    """Valida que el mapeo de rangos sea total y biyectivo sobre 0..5.

    Args:
        ranks: Mapeo color -> rango.

    Returns:
        Tupla de colores ordenada por rango (inversa del mapeo).

    Raises:
        RuntimeError: Si falta algún color o si dos colores comparten rango.
    """
    missing = [c for c in Color if c not in ranks]
    if missing:
        raise RuntimeError(f"Colores sin rango: {missing}")

    if sorted(ranks.values()) != list(range(len(Color))):
        raise RuntimeError(f"Rangos inválidos: {ranks}")

    return tuple(sorted(ranks, key=ranks.__getitem__))


COLORS_BY_RANK: Tuple[Color, ...] = _check_ranks(COLOR_RANK)


def rank(color: Color) -> int:
    """Devuelve el rango (0..5) de un color.

    Args:
        color: Color del sticker o de la cara.

    Returns:
        Rango del color; coincide con el índice de su cara en el cubo.
    """
    return COLOR_RANK[color]
