"""
Infrastructure Layer

Adapters implementing the domain gateways.
"""
