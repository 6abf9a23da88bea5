from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from framework.config import settings
from framework.database.manager import DatabaseManager
from framework.middleware.logging_md import LoggingMiddleware
from framework.logging.logger import LogConfig
from framework.exceptions.errors import DataError
from framework.exceptions.handler import BusinessException, global_exception_handler
from apps.catalog.api.router import router as catalog_router

# Initialize logging configuration
LogConfig.setup_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Connect to the document store on startup; close the client on shutdown."""
    manager = DatabaseManager.get_instance()
    await manager.mongo.connect()
    try:
        yield
    finally:
        await manager.mongo.disconnect()


app = FastAPI(
    title=settings.APP_NAME,
    description=settings.APP_DESCRIPTION,
    version=settings.APP_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan,
)

# Register global exception handlers
app.add_exception_handler(BusinessException, global_exception_handler)
app.add_exception_handler(DataError, global_exception_handler)
app.add_exception_handler(RequestValidationError, global_exception_handler)
app.add_exception_handler(Exception, global_exception_handler)

app.add_middleware(LoggingMiddleware)

# Mount routers (prefix from config for easy override in private projects)
app.include_router(
    catalog_router,
    prefix=settings.API_V1_PRODUCTS_PREFIX,
    tags=["Products"]
)

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
