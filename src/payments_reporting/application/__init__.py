"""Application layer - Query services and port definitions.

This layer contains:
- Services: Read-only reporting queries over the payment dataset
- Ports: Abstract interfaces (protocols) for external dependencies

The application layer depends only on the domain layer.
Infrastructure implementations are injected via ports.
"""
