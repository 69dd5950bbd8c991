"""Endpoint definitions.

Each module declares one ``RestEndpointSpec`` per API route plus the
adapters that shape its responses; ``MALClient`` pairs them and hands them
to the ``RestRunner``.
"""

from . import anime, forum, manga, user

__all__ = ["anime", "forum", "manga", "user"]
