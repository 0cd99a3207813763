from textwrap import dedent
import logging
import pydantic
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse
from fastapi.routing import APIRoute

from cloud_api.config.settings import Settings
from cloud_api.errors import (
    CloudApiError,
    handle_broad_exceptions,
    handle_cloud_api_errors,
    handle_pydantic_validation_errors,
)
from cloud_api.routers.buckets import router as buckets_router
from cloud_api.routers.health import router as health_router
from cloud_api.routers.items import router as items_router
from cloud_api.routers.objects import router as objects_router

# Set up logging
logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create a FastAPI application."""
    settings = settings or Settings()
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)
    logging.getLogger("cloud_api").setLevel(settings.log_level)

    app = FastAPI(
        title="Cloud CRUD API",
        summary="Buckets, objects and DynamoDB items over plain HTTP",
        version="v1",
        description=dedent(
            """\
        | Resource | Backend | Notes |
        | --- | --- | --- |
        | `/s3/buckets` | S3 | list, create, delete buckets |
        | `/s3/objects` | S3 | list (first 100 keys), upload, delete objects |
        | `/dynamodb/items` | DynamoDB | scan, upsert, delete items in one fixed table |
        """
        ),
        generate_unique_id_function=custom_generate_unique_id,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.state.settings = settings
    logger.info(
        f"Serving S3 in {settings.aws_region} and DynamoDB table {settings.dynamodb_table_name}"
    )

    app.include_router(buckets_router, tags=["Buckets"])
    app.include_router(objects_router, tags=["Objects"])
    app.include_router(items_router, tags=["DynamoDB"])
    app.include_router(health_router, tags=["health"])

    @app.get("/", include_in_schema=False, tags=["docs"])
    async def redirect_to_docs():
        # the interactive docs are the landing page
        return RedirectResponse(url=app.docs_url)

    app.add_exception_handler(
        exc_class_or_status_code=CloudApiError,
        handler=handle_cloud_api_errors,
    )
    app.add_exception_handler(
        exc_class_or_status_code=pydantic.ValidationError,
        handler=handle_pydantic_validation_errors,
    )
    app.middleware("http")(handle_broad_exceptions)

    return app


def custom_generate_unique_id(route: APIRoute):
    """
    Generate prettier `operationId`s in the OpenAPI schema.

    These become the function names in generated client SDKs.
    """
    return f"{route.tags[0]}-{route.name}"


if __name__ == "__main__":
    import uvicorn

    app = create_app()
    uvicorn.run(app, host="0.0.0.0", port=8000)
