"""
Solarcast - space weather forecasting service.

Layer Structure:
- Domain: Forecasting pipeline, entities, ports and gateway contracts
- Application: Use cases and DTOs
- Infrastructure: NOAA SWPC gateway, inference models, health checks
- Presentation: FastAPI routers
- Shared: Cross-cutting concerns and shared utilities
- Main: Composition root, application entry point and configuration
"""
