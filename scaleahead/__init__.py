"""
ScaleAhead - predictive utilization signal for autoscaling control loops.

Layer Structure:
- Domain: observation window, boot latency, trend and prediction services
- Application: annotation codec, DTOs and the predictive scaling use case
- Infrastructure: Annotation Bridge adapters
- Shared: Cross-cutting concerns (logging, constants)
- Main: Configuration and composition root
"""

__version__ = "0.1.0"
