"""Console multiple-choice quiz runner with student registration and scoring."""

__version__ = "0.1.0"
__all__ = ["__version__"]