"""
Reorder-and-renumber transforms.

Modules:
- forward.py: Top→Bottom code (reorder top, renumber, read bottom)
- inverse.py: Bottom→Top code (rank bottom by top, read through A⁻¹)

Both are pure and share validation from cts_core.validation.
"""

from .forward import forward_transform
from .inverse import inverse_transform

__all__ = [
    "forward_transform",
    "inverse_transform",
]
