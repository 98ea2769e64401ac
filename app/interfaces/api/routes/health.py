from fastapi import APIRouter, Depends

from app.infrastructure.dispatch import DispatchQueue, DispatchWorker
from app.interfaces.api.dependencies import get_dispatch_queue, get_dispatch_worker
from app.interfaces.api.schemas import HealthRead, MessageResponse

router = APIRouter(tags=["health"])

LIVENESS_MESSAGE = "App is working"


@router.get("/", response_model=MessageResponse)
async def root() -> MessageResponse:
    return MessageResponse(message=LIVENESS_MESSAGE)


@router.get("/health", response_model=HealthRead)
async def health(
    queue: DispatchQueue = Depends(get_dispatch_queue),
    worker: DispatchWorker | None = Depends(get_dispatch_worker),
) -> HealthRead:
    return HealthRead(
        status="ok",
        queue_size=len(queue),
        dispatcher_running=bool(worker and worker.is_running),
    )
