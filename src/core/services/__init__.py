"""Application services: orchestration on top of domain and adapters."""
