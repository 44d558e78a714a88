"""
healthboard - REST service with built-in health diagnostics.

Layer Structure:
- Domain: Metric readings, severity buckets, scoring and history contracts
- Application: Use cases and DTOs
- Infrastructure: psutil, MongoDB and HTTP probes, sampler, history store
- Presentation: Help endpoints and the HTML status page
- Shared: Constants and logging
- Main: Composition root, application entry point and configuration
"""
