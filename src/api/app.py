import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlmodel import SQLModel
from strawberry.fastapi import GraphQLRouter

logger = logging.getLogger(__name__)


def create_app(ApplicationConfig) -> FastAPI:
    # Imported here so tests can swap dependencies before the app is built
    from src import depends
    from src.api.routes import health_check
    from src.api.schema.context import get_context
    from src.api.schema.schema import schema

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Starting application...")
        if ApplicationConfig.AUTO_CREATE_TABLES:
            async with depends.engine.begin() as conn:
                await conn.run_sync(SQLModel.metadata.create_all)
            logger.info("Database tables ensured")

        yield

        logger.info("Shutting down application...")
        await depends.key_value_store.close()
        await depends.mailer.close()
        await depends.engine.dispose()

    app = FastAPI(title="Link Board API", version="0.1.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    graphql_router = GraphQLRouter(
        schema,
        context_getter=get_context,
        graphql_ide="graphiql" if ApplicationConfig.GRAPHIQL else None,
    )

    app.include_router(health_check.router, tags=["Health"])
    app.include_router(graphql_router, prefix="/graphql", tags=["GraphQL"])

    return app
