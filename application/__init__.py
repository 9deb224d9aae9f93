"""
Application Layer for the Liftlog API.

This package contains:
- ports/: Abstract repository interfaces (what the core needs)
- use_cases/: Orchestration of fetch -> compute -> write back
- exceptions.py: Errors shared by the application and infrastructure layers
"""
