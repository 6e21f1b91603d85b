"""
MotoMinder: a layered CRUD library for tracking motorcycles.

Application package root. This is a modular monolith using
hexagonal architecture (ports & adapters) with domain-driven design.

Bounded contexts:
    - motorcycles: Motorcycle inventory with authenticated, role-gated writes.

Layers:
    - domain: Pure business logic, entities, ports (ABCs), errors.
    - application: Use cases (interactors), request/response DTOs.
    - infrastructure: Adapters implementing domain ports.
    - interfaces: View models, dependency wiring, command-line caller.
    - shared: Cross-cutting concerns (logging).
"""

__version__ = "0.1.0"
