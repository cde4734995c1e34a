"""Infrastructure layer — filesystem, templates, symbol index.

This layer depends on stdlib and third-party libs (Jinja2, pluggy).
It must never import from services, commands, or output.
The service layer bridges between domain rules and infrastructure.
"""
