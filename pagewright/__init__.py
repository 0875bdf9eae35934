"""pagewright - CMS pages for multi-site FastAPI applications."""

__version__ = "0.1.0"
