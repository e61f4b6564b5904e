"""
Source Code Root Module

This module serves as the root for the source code of the ISS flyover finder.

Layer Structure:
- Domain: Entities, stage gateway contracts and the rise-time formatter
- Application: The pipeline use case and DTOs
- Infrastructure: httpx implementations of the stage gateways
- Presentation: API routes and console rendering
- Shared: Cross-cutting concerns and shared utilities
- Main: Composition root, entry points and configuration
"""
