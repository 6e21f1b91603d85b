"""
Infrastructure adapters for the motorcycles bounded context.
"""
