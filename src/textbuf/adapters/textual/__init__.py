"""Textual front end for the rotation ciphers."""

from .controller import RotterController, RotterHooks, apply_rot13, apply_rot13n5

__all__ = ["RotterController", "RotterHooks", "apply_rot13", "apply_rot13n5"]
