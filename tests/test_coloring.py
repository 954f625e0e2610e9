import xml.etree.ElementTree as ET
from urllib.parse import unquote

from coloring import color_index, number_to_color_svg, svg_data_uri
from config import ColoringConfig

SVG_NS = "{http://www.w3.org/2000/svg}"


def test_svg_is_well_formed_with_one_rect_per_cell():
    for grid in (1, 8, 16):
        root = ET.fromstring(number_to_color_svg(grid))
        assert root.tag == f"{SVG_NS}svg"
        assert root.attrib["viewBox"] == f"0 0 {grid} {grid}"
        assert root.attrib["width"] == str(ColoringConfig.CANVAS_PX)
        assert len(root.findall(f"{SVG_NS}rect")) == grid * grid


def test_cell_colors_follow_formula():
    palette = ColoringConfig.PALETTE
    root = ET.fromstring(number_to_color_svg(4))
    for rect in root.findall(f"{SVG_NS}rect"):
        x, y = int(rect.attrib["x"]), int(rect.attrib["y"])
        assert rect.attrib["fill"] == palette[((x + 1) * (y + 2)) % len(palette)]


def test_color_index_examples():
    assert color_index(0, 0, 5) == 2
    assert color_index(4, 0, 5) == 0
    assert color_index(1, 1, 5) == 1


def test_custom_palette():
    root = ET.fromstring(number_to_color_svg(3, palette=["#000"]))
    assert {r.attrib["fill"] for r in root.findall(f"{SVG_NS}rect")} == {"#000"}


def test_invalid_inputs():
    for kwargs in (dict(grid_size=0), dict(grid_size=4, palette=[])):
        failed = False
        try:
            number_to_color_svg(**kwargs)
        except ValueError:
            failed = True
        assert failed, f"Expected ValueError for {kwargs}"


def test_data_uri_round_trips():
    svg = number_to_color_svg(2)
    uri = svg_data_uri(svg)
    assert uri.startswith("data:image/svg+xml;utf8,")
    payload = uri.split(",", 1)[1]
    assert "<" not in payload and " " not in payload and "#" not in payload
    assert unquote(payload) == svg


if __name__ == "__main__":
    test_svg_is_well_formed_with_one_rect_per_cell()
    test_cell_colors_follow_formula()
    test_color_index_examples()
    test_custom_palette()
    test_invalid_inputs()
    test_data_uri_round_trips()
    print("test_coloring.py: PASS")
