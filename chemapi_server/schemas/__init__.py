"""Response schemas."""

from .models import DescriptorResponse


__all__ = ["DescriptorResponse"]
