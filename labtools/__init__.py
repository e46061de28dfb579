"""Console calculator, staff table and employee register, with a linked list and validated prompts."""

__version__ = "0.1.0"
__all__ = ["__version__"]