"""swag-oas: generate OpenAPI 3.0 documents from swag annotations."""

__version__ = "1.0.0"
