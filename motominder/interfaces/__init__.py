"""
Interfaces layer package.

Contains view models, dependency wiring and the command-line caller.
No business logic belongs here. Callers build requests, run
use cases and render view models.
"""
