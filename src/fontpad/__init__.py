"""Font Pad - Design bitmap glyphs on a small toggle grid.

Font Pad keeps a single fixed-size glyph ("pad") of on/off dots. Dots are
toggled by position, the pad can be flipped and scrolled, and the whole pad
is exchanged with other tools as plain text through the clipboard.

Example:
    $ fontpad toggle 2 2
    $ fontpad copy

This will set the center dot of the default 5x5 pad and place the pad's
text form on the clipboard.
"""

__version__ = "0.1.0"
__author__ = "Emma Britton"

__all__ = ["__author__", "__version__"]
