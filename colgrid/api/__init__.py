from .generate import MIXINS, GeneratedCss, generate_css, generate_css_from_file

__all__ = [
    "MIXINS",
    "GeneratedCss",
    "generate_css",
    "generate_css_from_file",
]
