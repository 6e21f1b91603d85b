"""
Application layer for the motorcycles bounded context.

One interactor per use case; each takes a request DTO and
returns a response DTO.
"""
