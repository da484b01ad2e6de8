"""Actor images in rendered SVG"""

from yuml2dot.renderer.embedded_images import process_embedded_images

ACTOR_TEXT = (
    '<text text-anchor="middle" x="27" y="-14.3" '
    'font-family="Helvetica,sans-Serif" font-size="10.00">{img:actor} Customer</text>'
)


def test_actor_marker_becomes_figure():
    svg = process_embedded_images(f"<g>\n{ACTOR_TEXT}\n</g>")

    assert '<g transform="translate(27, -14.3)"' in svg
    assert "stroke:black" in svg
    assert '<circle cx="0" cy="-20" r="7.5" />' in svg
    assert '<text text-anchor="middle" x="27" y="10.7" ' in svg
    assert ">Customer</text>" in svg
    assert "{img:" not in svg


def test_dark_figure():
    assert "stroke:white" in process_embedded_images(ACTOR_TEXT, is_dark=True)


def test_unknown_image_only_drops_marker():
    svg = process_embedded_images('<text x="1" y="2">{img:robot} R2</text>')
    assert svg == '<text x="1" y="2">R2</text>'


def test_plain_text_untouched():
    svg = '<text x="1" y="2">Customer</text>'
    assert process_embedded_images(svg) == svg
