"""pagewright models."""
from pagewright.models.page import Page
from pagewright.models.response import ErrorResponse, HealthResponse

__all__ = ["Page", "ErrorResponse", "HealthResponse"]
