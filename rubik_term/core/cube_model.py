# rubik_term/core/cube_model.py
from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from typing import Optional, TextIO, Tuple

from rubik_term.core.color import COLORS_BY_RANK, Color, rank
from rubik_term.render.terminal import DEFAULT_GLYPH, format_cube

logger = logging.getLogger(__name__)

CubeHash = Tuple[Tuple[str, ...], ...]

STICKERS_PER_FACE = 9
FACES_PER_CUBE = 6


@dataclass(frozen=True)
class Face:
    """Todos los stickers visibles mirando el cubo desde una dirección.

    Estrictamente, una cara no "existe": las piezas del cubo no se separan.
    Pensar el cubo como seis caras de 9 stickers que se mueven libremente es
    cómodo, pero permite representar estados inválidos.

    Layout:
        - `stickers` tiene 9 colores en orden fila-columna (índice = fila*3 + columna).
        - La fila 0 es la más cercana a la cara blanca. Para la cara blanca,
          la fila 0 es la más cercana a la cara verde.
    """

    stickers: Tuple[Color, ...]

    def __post_init__(self) -> None:
        try:
            stickers = tuple(self.stickers)
        except TypeError as exc:
            raise ValueError(f"Stickers inválidos: {self.stickers!r}") from exc
        if len(stickers) != STICKERS_PER_FACE:
            raise ValueError(
                f"Una cara tiene {STICKERS_PER_FACE} stickers, se recibieron {len(stickers)}"
            )
        for s in stickers:
            if not isinstance(s, Color):
                raise ValueError(f"Sticker inválido: {s!r}")
        object.__setattr__(self, "stickers", stickers)

    @classmethod
    def uniform(cls, color: Color) -> Face:
        """Crea una cara con los 9 stickers del mismo color."""
        return cls((color,) * STICKERS_PER_FACE)

    def at(self, row: int, col: int) -> Color:
        """Devuelve el sticker en (fila, columna).

        Args:
            row: Fila 0..2.
            col: Columna 0..2.

        Returns:
            Color del sticker.

        Raises:
            ValueError: Si la fila o la columna están fuera de 0..2.
        """
        if not (0 <= row < 3 and 0 <= col < 3):
            raise ValueError(f"Posición inválida: ({row}, {col})")
        return self.stickers[row * 3 + col]

    def rows(self) -> Tuple[Tuple[Color, ...], ...]:
        return tuple(self.stickers[r * 3:r * 3 + 3] for r in range(3))


@dataclass(frozen=True)
class Cube:
    """Estado visual de un cubo Rubik 3x3.

    Representación:
        - `faces[i]` es la cara cuyo centro tiene el color de rango `i`
          (ver `rubik_term.core.color.rank`).
        - Cada cara es un `Face` de 9 stickers.

    Esta representación parte de la idea de que los stickers se mueven
    libremente. Es simple y refleja directamente la apariencia del cubo,
    pero admite estados imposibles (por ejemplo, un solo sticker cambiado).
    Cualquier operación que mueva stickers debe modelarse como una
    permutación sobre un estado válido y usar esta grilla sólo como vista.
    """

    faces: Tuple[Face, ...]

    def __post_init__(self) -> None:
        try:
            faces = tuple(self.faces)
        except TypeError as exc:
            raise ValueError(f"Caras inválidas: {self.faces!r}") from exc
        if len(faces) != FACES_PER_CUBE:
            raise ValueError(
                f"Un cubo tiene {FACES_PER_CUBE} caras, se recibieron {len(faces)}"
            )
        for f in faces:
            if not isinstance(f, Face):
                raise ValueError(f"Cara inválida: {f!r}")
        object.__setattr__(self, "faces", faces)

    # --------------------------
    # Public API
    # --------------------------
    @classmethod
    def solved(cls) -> Cube:
        """Construye el cubo resuelto.

        La cara `i` queda completa con el color de rango `i`:
        blanco, rojo, verde, naranja, azul, amarillo.

        Returns:
            Un nuevo `Cube` en estado resuelto.
        """
        cube = cls(tuple(Face.uniform(c) for c in COLORS_BY_RANK))
        logger.debug("Cubo resuelto creado")
        return cube

    def face(self, color: Color) -> Face:
        """Devuelve la cara cuyo centro es `color`."""
        return self.faces[rank(color)]

    def is_solved(self) -> bool:
        """Indica si el cubo está resuelto (cada cara con el color de su rango).

        Returns:
            True si el cubo está resuelto; False en caso contrario.
        """
        for i, face in enumerate(self.faces):
            if any(rank(s) != i for s in face.stickers):
                return False
        return True

    def to_hashable(self) -> CubeHash:
        """Convierte el estado a tuplas de letras, en orden de rango.

        Returns:
            Tupla de 6 tuplas con las letras de los 9 stickers de cada cara.
        """
        return tuple(tuple(s.value for s in face.stickers) for face in self.faces)

    def print(self, file: Optional[TextIO] = None, glyph: str = DEFAULT_GLYPH) -> None:
        """Escribe el cubo en la terminal con glifos de color.

        Args:
            file: Stream de salida. Si es None se usa `sys.stdout`.
            glyph: Carácter usado para cada sticker.

        Raises:
            ValueError: Si `glyph` no es un solo carácter.
        """
        out =sys.stdout if file is None else file
        logger.debug("Dibujando cubo con glifo %r", glyph)
        out.write(format_cube(self, glyph))
