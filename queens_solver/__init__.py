"""Read a colour-region queens board from HTML or a screenshot and solve it."""

__version__ = "0.1.0"
__all__ = ["game_logic", "html_parser", "image_processor"]