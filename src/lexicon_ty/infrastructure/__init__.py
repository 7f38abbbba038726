"""Infrastructure layer: filesystem access.

This layer depends only on stdlib. It must never import from domain,
services, commands, or output. The decoder never sees paths; services
read text here and hand it to the domain layer.
"""
