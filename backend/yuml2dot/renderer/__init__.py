from yuml2dot.renderer.embedded_images import process_embedded_images
from yuml2dot.renderer.sequence_renderer import render_sequence_svg
from yuml2dot.renderer.svg_renderer import render_dot_to_svg, render_dot_to_svg_async

__all__ = [
    "process_embedded_images",
    "render_dot_to_svg",
    "render_dot_to_svg_async",
    "render_sequence_svg",
]
