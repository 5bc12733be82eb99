"""
Output targets (path resolution, objc expansion, writes) and the pipeline that
drives them over a whole palette.
"""
import os
import sys
import tempfile
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from spectra.formatters import PaletteFormatter, UnknownFormatKind
from spectra.palette import OutputRequest, Palette
from spectra.pipeline import build_targets, emit_outputs, generate, render_outputs
from spectra.serializer import OutputTarget, targets_for_request


def _palette(n: int = 3) -> Palette:
    palette = Palette(prefix="sp")
    for i in range(n):
        palette.add_color(f"tone_{i}", {"hex": 0x102030 * (i + 1)})
    return palette


class TestOutputTarget(unittest.TestCase):

    def test_resolve_path_uses_formatter_default(self):
        target = OutputTarget(PaletteFormatter(home="/Users/me"))
        self.assertEqual(target.resolve_path(_palette()), "/Users/me/Library/Colors/sp-palette.clr")

    def test_resolve_path_adds_trailing_separator_once(self):
        palette = _palette()
        for base in ("out", "out/"):
            target = OutputTarget(PaletteFormatter(home="/h"), base_path=base)
            self.assertEqual(target.resolve_path(palette), "out/sp-palette.clr")
        # base_path is left as given
        self.assertEqual(target.base_path, "out/")

    def test_objc_request_yields_header_then_implementation(self):
        rename = lambda name, prefix: name.upper()
        targets = targets_for_request(OutputRequest(kind="objc", path="gen", naming=rename))
        self.assertEqual([t.formatter.kind for t in targets], ["objc-header", "objc-impl"])
        self.assertTrue(all(t.formatter.naming is rename for t in targets))
        self.assertEqual([t.resolve_path(_palette()) for t in targets], ["gen/UIColor+SPColor.h", "gen/UIColor+SPColor.m"])

    def test_other_requests_yield_one_target(self):
        for kind in ("palette", "swift"):
            self.assertEqual(len(targets_for_request(OutputRequest(kind=kind), home="/h")), 1)

    def test_unknown_request_kind(self):
        with self.assertRaises(UnknownFormatKind):
            targets_for_request(OutputRequest(kind="android"))

    def test_objc_targets_each_render_n_color_lines(self):
        palette = _palette(4)
        header, impl = targets_for_request(OutputRequest(kind="objc"))
        header_text = header.render(palette)
        impl_text = impl.render(palette)
        self.assertEqual(header_text.count("+ (UIColor *)"), 4)
        self.assertEqual(impl_text.count("+ (UIColor *)"), 4)
        # 1 newline between header declarations, 2 between implementations
        self.assertIn("sp_tone0Color;\n+ (UIColor *)sp_tone1Color;", header_text)
        self.assertIn("}\n\n+ (UIColor *)sp_tone1Color\n{", impl_text)

    def test_emit_writes_and_overwrites(self):
        with tempfile.TemporaryDirectory() as tmp:
            target = OutputTarget(PaletteFormatter(home="/h"), base_path=tmp)
            stale = Path(tmp) / "sp-palette.clr"
            stale.write_text("old content that is longer than the new content" * 10, encoding="utf-8")
            path = target.emit(_palette(1))
            self.assertEqual(path, f"{tmp}/sp-palette.clr")
            self.assertEqual(Path(path).read_text(encoding="utf-8"), target.render(_palette(1)))

    def test_emit_missing_directory_propagates_os_error(self):
        with tempfile.TemporaryDirectory() as tmp:
            target = OutputTarget(PaletteFormatter(home="/h"), base_path=os.path.join(tmp, "missing"))
            with self.assertRaises(FileNotFoundError):
                target.emit(_palette())


class TestPipeline(unittest.TestCase):

    def test_default_formats_when_none_requested(self):
        targets = build_targets(_palette(), home="/h")
        self.assertEqual([t.formatter.kind for t in targets], ["palette", "objc-header", "objc-impl"])

    def test_explicit_requests_in_order(self):
        palette = _palette()
        palette.add_output("swift")
        palette.add_output("palette", path="colors")
        targets = build_targets(palette, home="/h")
        self.assertEqual([t.formatter.kind for t in targets], ["swift", "palette"])

    def test_unknown_kind_fails_before_rendering(self):
        palette = _palette()
        palette.add_output("palette")
        palette.add_output("android")
        with self.assertRaises(UnknownFormatKind):
            render_outputs(palette, home="/h")

    def test_render_outputs_pairs(self):
        outputs = render_outputs(_palette(2), home="/Users/me")
        self.assertEqual(
            [path for path, _ in outputs],
            ["/Users/me/Library/Colors/sp-palette.clr", "./UIColor+SPColor.h", "./UIColor+SPColor.m"],
        )
        self.assertTrue(outputs[0][1].startswith("11\n"))
        self.assertEqual(render_outputs(_palette(2), home="/Users/me"), outputs)

    def test_emit_outputs(self):
        with tempfile.TemporaryDirectory() as tmp:
            palette = _palette(2)
            palette.add_output("palette", path=tmp)
            palette.add_output("objc", path=tmp)
            written = emit_outputs(palette, home="/unused")
            self.assertEqual(
                sorted(os.path.basename(p) for p in written),
                ["UIColor+SPColor.h", "UIColor+SPColor.m", "sp-palette.clr"],
            )
            for path in written:
                self.assertTrue(Path(path).exists())

    def test_generate_from_definition(self):
        with tempfile.TemporaryDirectory() as tmp:
            definition = Path(tmp) / "colors.yaml"
            definition.write_text(
                f"prefix: brand\n"
                f"formats:\n"
                f"  - kind: palette\n"
                f"  - kind: objc\n"
                f"    path: {tmp}\n"
                f"colors:\n"
                f"  hotPink: {{hex: 0xFF69B4}}\n"
                f"  shadow: {{white: [0.2, 0.5]}}\n",
                encoding="utf-8",
            )
            (Path(tmp) / "Library" / "Colors").mkdir(parents=True)
            config = {"formats": ["palette"], "paths": {"home": tmp}}
            written = generate(definition, config=config)
            self.assertEqual(len(written), 3)
            clr = (Path(tmp) / "Library" / "Colors" / "brand-palette.clr").read_text(encoding="utf-8")
            self.assertEqual(clr, "11\n1.000 0.412 0.706 1.000 HotPink\n0.200 0.200 0.200 0.500 Shadow\n")
            impl = (Path(tmp) / "UIColor+BRANDColor.m").read_text(encoding="utf-8")
            self.assertIn("+ (UIColor *)brand_shadowColor\n{\n    return [UIColor colorWithWhite:0.20f alpha:0.50f];\n}", impl)


if __name__ == "__main__":
    unittest.main()
