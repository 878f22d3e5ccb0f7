"""vie: a modal terminal text editor core.

The package is split into the frame-buffer renderer (:mod:`vie.ui`), the
modal input engine (:mod:`vie.modes`, :mod:`vie.keymaps`) and a blessed
terminal backend (:mod:`vie.backend`).
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
