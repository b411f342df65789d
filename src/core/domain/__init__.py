"""Domain models and input rules.

Pure data structures (Pydantic v2) and validators: no HTTP, no CLI.
"""
