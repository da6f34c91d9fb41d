"""A small path tracer that writes PPM images, with Sobel edge detection and circle packing tools."""

__version__ = "0.1.0"