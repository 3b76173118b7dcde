import subprocess
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from turtlesoup.config import CanvasConfig, Config
from turtlesoup.render import HtmlExporter, generate_html, open_html, save_html
from turtlesoup.turtle import Point, Segment


class GenerateHtmlTests(unittest.TestCase):

    def test_single_segment(self):
        html = generate_html([Segment(Point(0, 0), Point(10, 0), "red")])
        self.assertEqual(1, html.count("<line"))
        self.assertIn('<line x1="250" y1="250" x2="260" y2="250" stroke="red" stroke-width="2"/>', html)

    def test_document_frame(self):
        html = generate_html([])
        self.assertTrue(html.startswith("<!DOCTYPE html>"))
        self.assertIn("<title>Turtle Graphics Output</title>", html)
        self.assertIn('<svg width="500" height="500" style="background-color:#f0f0f0;">', html)
        self.assertNotIn("<line", html)

    def test_fractional_and_nan_coordinates(self):
        html = generate_html([
            Segment(Point(0.5, -1.25), Point(float("nan"), 0), "blue"),
        ])
        self.assertIn('x1="250.5" y1="248.75" x2="NaN" y2="250"', html)

    def test_infinite_coordinates(self):
        inf = float("inf")
        html = generate_html([Segment(Point(inf, -inf), Point(0, 0), "blue")])
        self.assertIn('x1="Infinity" y1="-Infinity" x2="250" y2="250"', html)

    def test_one_line_per_segment_in_order(self):
        segments = [
            Segment(Point(0, 0), Point(1, 0), "red"),
            Segment(Point(1, 0), Point(1, 1), "green"),
        ]
        html = generate_html(segments)
        self.assertLess(html.index('stroke="red"'), html.index('stroke="green"'))

    def test_custom_canvas(self):
        config = Config(canvas=CanvasConfig(width=200, height=100, scale=2, stroke_width=1))
        html = HtmlExporter(config).export([Segment(Point(0, 0), Point(10, 5), "black")])
        self.assertIn('x1="100" y1="50" x2="120" y2="60" stroke="black" stroke-width="1"', html)
        self.assertIn('<svg width="200" height="100"', html)


class SaveHtmlTests(unittest.TestCase):

    def test_writes_and_overwrites(self):
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "out.html"
            target.write_text("old")
            with patch("turtlesoup.render.click.echo") as echo:
                saved = save_html("<html>é</html>", target)
            self.assertEqual(target, saved)
            self.assertEqual("<html>é</html>", target.read_text(encoding="utf-8"))
            echo.assert_called_once_with(f"Drawing saved to {target}")

    def test_write_failure_propagates(self):
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(OSError):
                save_html("x", Path(tmp) / "missing" / "out.html")


class OpenHtmlTests(unittest.TestCase):

    def test_first_success_wins(self):
        with patch("turtlesoup.render.subprocess.run") as run:
            self.assertTrue(open_html("a.html"))
        self.assertEqual(1, run.call_count)
        self.assertEqual(["open", "a.html"], run.call_args.args[0])

    def test_falls_through(self):
        side_effects = [FileNotFoundError(), subprocess.CalledProcessError(1, "start"), None]
        with patch("turtlesoup.render.subprocess.run", side_effect=side_effects) as run:
            self.assertTrue(open_html("a.html"))
        self.assertEqual(3, run.call_count)
        self.assertEqual(["xdg-open", "a.html"], run.call_args.args[0])

    def test_all_fail_is_not_fatal(self):
        with patch("turtlesoup.render.subprocess.run", side_effect=OSError()) as run, \
                patch("turtlesoup.render.click.echo") as echo:
            self.assertFalse(open_html("a.html"))
        self.assertEqual(3, run.call_count)
        self.assertIn("Could not open the file automatically", echo.call_args.args[0])


if __name__ == '__main__':
    unittest.main()
