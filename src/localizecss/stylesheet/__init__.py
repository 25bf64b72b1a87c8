from localizecss.stylesheet.builder import build_declaration, build_style_map
from localizecss.stylesheet.emitter import render_css, scope_prefix, write_stylesheet

__all__ = [
    "build_declaration",
    "build_style_map",
    "render_css",
    "scope_prefix",
    "write_stylesheet",
]
