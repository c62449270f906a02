"""Investment growth projections for a fixed catalog of allocation strategies."""

__version__ = "0.1.0"
