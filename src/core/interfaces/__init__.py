"""Core interfaces/abstractions.

Why:
- Defines contracts (Protocol) implemented by concrete adapters and services.
- Inverts dependencies: the Core depends on abstractions, tests on fakes.
"""
