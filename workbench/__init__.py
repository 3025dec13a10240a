"""Console workbench that runs line-based scripts for logging and printing."""

__version__ = "0.1.0"
__all__ = ["chemistry", "cli", "environment", "interpreter"]