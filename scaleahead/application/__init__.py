"""
Application Layer

DTOs, the annotation codec and the use case that runs one predictive tick.
"""
