"""
Shared module package.

Contains cross-cutting concerns:
- JSON validation failure middleware and response start hooks
- Cache prevention headers
- Error handling
- Logging configuration
"""
