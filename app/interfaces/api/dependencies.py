"""FastAPI dependency utilities."""

from fastapi import HTTPException, Request, status

from app.infrastructure.dispatch import DispatchQueue, DispatchWorker


def get_dispatch_queue(request: Request) -> DispatchQueue:
    """Return the dispatch queue owned by the running application."""

    queue = getattr(request.app.state, "dispatch_queue", None)
    if queue is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Dispatch queue is not available",
        )
    return queue


def get_dispatch_worker(request: Request) -> DispatchWorker | None:
    """Return the dispatcher worker, if the application created one."""

    return getattr(request.app.state, "dispatch_worker", None)
