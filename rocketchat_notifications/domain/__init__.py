"""Domain layer - message model, errors and host-facing interfaces.

This layer contains:
- Domain entities (messages, attachments)
- Interfaces implemented by the host notification framework
- The error taxonomy
"""
