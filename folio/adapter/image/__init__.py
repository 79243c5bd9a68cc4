"""Image probe adapter."""

from .probe import HttpImageProbe, MockImageProbe, describe_image

__all__ = ["HttpImageProbe", "MockImageProbe", "describe_image"]
