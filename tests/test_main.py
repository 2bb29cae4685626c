"""Tests for the command line entry point.

Tests cover:
- Argument defaults
- Small end-to-end renders to PNG and PPM
- Unseeded runs print a seed that reproduces the image
- Exit codes for bad arguments and missing textures
"""

from PIL import Image

from pathtracer.config import DEFAULT_HEIGHT, DEFAULT_WIDTH, MAX_DEPTH, SAMPLES_PER_PIXEL
from pathtracer.main import main, parse_args

TINY = ["--scene", "stars", "--width", "4", "--height", "3", "--samples", "1",
        "--max-depth", "5", "--workers", "1", "--seed", "11"]


class TestParseArgs:
    def test_defaults(self):
        args = parse_args([])
        assert args.scene == "cover"
        assert args.width == DEFAULT_WIDTH
        assert args.height == DEFAULT_HEIGHT
        assert args.samples == SAMPLES_PER_PIXEL
        assert args.max_depth == MAX_DEPTH
        assert args.seed is None
        assert args.workers is None
        assert args.output == "image.png"
        assert not args.emission
        assert not args.preview

    def test_overrides(self):
        args = parse_args(TINY + ["--emission", "--output", "x.ppm"])
        assert args.scene == "stars"
        assert args.width == 4
        assert args.seed == 11
        assert args.emission
        assert args.output == "x.ppm"


class TestMain:
    def test_render_png(self, tmp_path):
        out = tmp_path / "stars.png"
        assert main(TINY + ["--output", str(out)]) == 0
        with Image.open(out) as img:
            assert img.size == (4, 3)

    def test_render_ppm(self, tmp_path):
        out = tmp_path / "stars.ppm"
        assert main(TINY + ["--output", str(out)]) == 0
        assert out.read_text().startswith("P3\n4 3\n255\n")

    def test_seeded_runs_match(self, tmp_path):
        a = tmp_path / "a.ppm"
        b = tmp_path / "b.ppm"
        main(TINY + ["--output", str(a)])
        main(TINY + ["--output", str(b)])
        assert a.read_text() == b.read_text()

    def test_bad_size(self, tmp_path, capsys):
        assert main(["--width", "1", "--output", str(tmp_path / "x.png")]) == 2
        assert "Error" in capsys.readouterr().err

    def test_missing_texture(self, tmp_path, capsys):
        argv = ["--scene", "earth", "--texture", str(tmp_path / "nope.jpg"),
                "--width", "4", "--height", "3", "--output", str(tmp_path / "x.png")]
        assert main(argv) == 1
        assert "nope.jpg" in capsys.readouterr().err

    def test_unseeded_run_reports_reusable_seed(self, tmp_path, capsys):
        unseeded = [a for a in TINY if a not in ("--seed", "11")]
        first = tmp_path / "first.ppm"
        assert main(unseeded + ["--output", str(first)]) == 0
        seed_line = next(line for line in capsys.readouterr().out.splitlines()
                         if line.startswith("Seed: "))
        seed = seed_line.split()[1]

        again = tmp_path / "again.ppm"
        assert main(unseeded + ["--seed", seed, "--output", str(again)]) == 0
        assert first.read_text() == again.read_text()
