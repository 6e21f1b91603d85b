"""
Motorcycles bounded context: domain layer.

- Motorcycle entity and its validation rules
- Authorization roles and ID constants
- Repository and auth service ports
- Domain errors
"""
