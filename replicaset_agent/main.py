import logging
from contextlib import asynccontextmanager
from dotenv import load_dotenv
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from replicaset_agent.api.v1.replicasets import router as replicasets_router
from replicaset_agent.config import get_log_level
from replicaset_agent.services.k8s_client import (
    K8sClientNotInitializedError,
    initialize_kubernetes_client,
)

load_dotenv()


# Define a filter to exclude /health endpoint from logs
class HealthCheckFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        return "GET /health" not in record.getMessage()


logging.basicConfig(
    level=get_log_level(), format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

logging.getLogger("uvicorn.access").addFilter(HealthCheckFilter())


@asynccontextmanager
async def lifespan(app: FastAPI):
    if not initialize_kubernetes_client():
        logger.warning("Kubernetes client unavailable, replica set requests will return 503.")
    yield


app = FastAPI(lifespan=lifespan)


@app.exception_handler(K8sClientNotInitializedError)
async def k8s_client_not_initialized_handler(
    request: Request, exc: K8sClientNotInitializedError
):
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": "Kubernetes client not initialized"},
    )


@app.get("/health")
def read_health():
    return {"status": "ok"}


app.include_router(replicasets_router, prefix="/api/v1")
