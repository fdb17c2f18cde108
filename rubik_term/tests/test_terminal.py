import unittest

from colorama import Fore

from rubik_term.core.color import COLORS_BY_RANK, Color
from rubik_term.core.cube_model import Cube
from rubik_term.render.terminal import (
    COLOR_STYLES,
    DEFAULT_GLYPH,
    RESET,
    check_glyph,
    format_cube,
    render_color,
    render_face,
)


class TestTerminal(unittest.TestCase):
    def test_every_color_has_a_style(self):
        self.assertEqual(set(COLOR_STYLES), set(Color))
        for c in Color:
            self.assertTrue(COLOR_STYLES[c])

    def test_orange_is_magenta(self):
        self.assertEqual(COLOR_STYLES[Color.ORANGE], Fore.MAGENTA)

    def test_styles_are_distinct(self):
        self.assertEqual(len(set(COLOR_STYLES.values())), 6)

    def test_render_color_wraps_glyph(self):
        self.assertEqual(render_color(Color.RED), Fore.RED + DEFAULT_GLYPH + RESET)
        self.assertEqual(render_color(Color.BLUE, "x"), Fore.BLUE + "x" + RESET)

    def test_rejects_bad_glyph(self):
        for glyph in ("", "ab"):
            with self.assertRaises(ValueError):
                render_color(Color.RED, glyph)
            with self.assertRaises(ValueError):
                format_cube(Cube.solved(), glyph=glyph)

    def test_check_glyph_accepts_single_char(self):
        self.assertEqual(check_glyph("#"), "#")
        self.assertEqual(check_glyph(DEFAULT_GLYPH), DEFAULT_GLYPH)

    def test_render_face(self):
        cube = Cube.solved()
        rows = render_face(cube.face(Color.GREEN))
        self.assertEqual(len(rows), 3)
        for row in rows:
            self.assertEqual(row, render_color(Color.GREEN) * 3)
            self.assertNotIn("\n", row)

    def test_format_solved_transcript(self):
        # Bloques monocromáticos de 3x3 en orden W, R, G, O, B, Y, sin separadores
        expected = "".join(
            (render_color(c) * 3 + "\n") * 3 for c in COLORS_BY_RANK
        )
        self.assertEqual(format_cube(Cube.solved()), expected)

    def test_format_line_groups(self):
        lines = format_cube(Cube.solved(), glyph="o").splitlines()
        self.assertEqual(len(lines), 18)
        for i, line in enumerate(lines):
            self.assertEqual(line.count("o"), 3)
            self.assertEqual(line.count(RESET), 3)
            self.assertTrue(line.startswith(COLOR_STYLES[COLORS_BY_RANK[i // 3]]))


if __name__ == "__main__":
    unittest.main()
