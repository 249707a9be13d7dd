"""Queue API package.

- routes: list tickets, issue/advance actions, display board
- schemas: camelCase request/response bodies used by the display client
- dependencies: QueueService injection
"""

from queueboard.api.v1.queue.routes import router

__all__ = ["router"]
