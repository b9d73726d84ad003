"""Load, save and display grayscale and RGB images as plain pixel grids, with a demo command."""

__version__ = "0.1.0"
__all__ = ["data_loader", "demo"]