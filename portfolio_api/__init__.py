"""Portfolio API: blogs, CVs, hobbies, categories and quotes over FastAPI."""

__version__ = "1.0.0"
