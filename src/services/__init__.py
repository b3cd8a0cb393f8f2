"""
Application services layer (use cases).

- catalog/ : catalog synchronization engine (discovery import, resync,
  single-title import, provider search, audit history)

Services depend on ports (interfaces) from core/, never on concrete
implementations from adapters/. Concrete clients and repositories are
injected by the container.
"""
