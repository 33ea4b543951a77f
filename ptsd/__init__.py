"""A small 2D game framework built on pygame: scene objects, images, text, animation, input, timing and audio."""

__version__ = "0.1.0"