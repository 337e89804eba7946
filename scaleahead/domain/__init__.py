"""
Domain Layer

Entities and pure services of the predictive utilization signal. Nothing in
this package performs I/O or depends on the outer layers.
"""
