# rubik_term/render/terminal.py
from __future__ import annotations

from typing import TYPE_CHECKING, Dict, List

from colorama import Fore

from rubik_term.core.color import Color

if TYPE_CHECKING:
    from rubik_term.core.cube_model import Cube, Face

DEFAULT_GLYPH = "■"
RESET: str = Fore.RESET

# Secuencia de color por sticker.
# No existe un "naranja" nativo en la terminal: ORANGE se dibuja en magenta.
COLOR_STYLES: Dict[Color, str] = {
    Color.WHITE: Fore.WHITE,
    Color.RED: Fore.RED,
    Color.GREEN: Fore.GREEN,
    Color.ORANGE: Fore.MAGENTA,
    Color.BLUE: Fore.BLUE,
    Color.YELLOW: Fore.YELLOW,
}


def check_glyph(glyph: str) -> str:
    """Valida que el glifo sea exactamente un carácter.

    Args:
        glyph: Carácter usado para representar el sticker.

    Returns:
        El mismo glifo, sin cambios.

    Raises:
        ValueError: Si el glifo está vacío o tiene más de un carácter.
    """
    if not isinstance(glyph, str) or len(glyph) != 1:
        raise ValueError(f"El glifo debe ser un solo carácter: {glyph!r}")
    return glyph


def render_color(color: Color, glyph: str = DEFAULT_GLYPH) -> str:
    """Devuelve el glifo de un color envuelto en su secuencia de color y reset.

    Args:
        color: Color a dibujar.
        glyph: Carácter usado para representar el sticker.

    Returns:
        String con `estilo + glifo + reset`.

    Raises:
        ValueError: Si `glyph` no es un solo carácter.
    """
    check_glyph(glyph)
    return f"{COLOR_STYLES[color]}{glyph}{RESET}"


def render_face(face: Face, glyph: str = DEFAULT_GLYPH) -> List[str]:
    """Dibuja una cara como 3 líneas (fila 0 a fila 2), sin salto de línea."""
    return ["".join(render_color(c, glyph) for c in row) for row in face.rows()]


def format_cube(cube: Cube, glyph: str = DEFAULT_GLYPH) -> str:
    """Genera el texto completo del cubo tal como lo escribe `Cube.print`.

    Las caras se recorren en orden de rango (0..5) y, dentro de cada cara,
    por filas y columnas. Cada fila termina en salto de línea y no hay
    separador entre caras: 18 líneas de 3 glifos.

    Args:
        cube: Cubo a dibujar.
        glyph: Carácter usado para cada sticker.

    Returns:
        Texto listo para escribir en la terminal.

    Raises:
        ValueError: Si `glyph` no es un solo carácter.
    """
    check_glyph(glyph)
    lines: List[str] = []
    for face in cube.faces:
        lines.extend(render_face(face, glyph))
    return "".join(line + "\n" for line in lines)
