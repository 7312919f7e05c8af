"""
PyTorch Reference Implementation
================================

The same feed-forward network expressed with PyTorch.
This serves as a cross-check of the from-scratch NumPy implementation.
"""

from .mlp_pytorch import MLPPyTorch

__all__ = ['MLPPyTorch']
