# rubik_term/cli.py
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

import colorama

from rubik_term.core.cube_model import Cube
from rubik_term.render.terminal import DEFAULT_GLYPH, check_glyph


def _glyph(value: str) -> str:
    try:
        return check_glyph(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def build_parser() -> argparse.ArgumentParser:
    """Construye el parser de argumentos de la línea de comandos."""
    parser = argparse.ArgumentParser(
        prog="rubik-term",
        description="Dibuja un cubo Rubik resuelto en la terminal.",
    )
    parser.add_argument(
        "--glyph",
        type=_glyph,
        default=DEFAULT_GLYPH,
        help=f"carácter usado para cada sticker (por defecto {DEFAULT_GLYPH!r})",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="muestra mensajes de depuración en stderr",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Punto de entrada de la aplicación.

    Configura el logging, habilita las secuencias ANSI en consolas Windows y
    escribe el cubo resuelto en `sys.stdout`.

    Args:
        argv: Argumentos (sin el nombre del programa). Si es None se usa `sys.argv`.

    Returns:
        Código de salida del proceso.
    """
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    colorama.just_fix_windows_console()

    Cube.solved().print(glyph=args.glyph)
    return 0
