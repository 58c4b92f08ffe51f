"""Infrastructure layer — filesystem repository, HTTP client, manifest store.

This layer depends on stdlib, domain, and third-party libs (httpx, pydantic).
It must never import from services, commands, or output.
"""
