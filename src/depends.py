from fastapi import Depends, Request, Response
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from src.adapter.services.cookie_session import CookieSession
from src.adapter.services.log_mailer import LogMailer
from src.adapter.services.memory_key_value_store import InMemoryKeyValueStore
from src.adapter.services.redis_key_value_store import RedisKeyValueStore
from src.adapter.services.smtp_mailer import SmtpMailer
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.services.key_value_store import IKeyValueStore
from src.app.services.mailer import IMailer

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)


def build_key_value_store(config) -> IKeyValueStore:
    if config.CACHE_BACKEND == "memory":
        return InMemoryKeyValueStore()
    return RedisKeyValueStore.from_url(config.REDIS_URL)


def build_mailer(config) -> IMailer:
    if config.MAIL_BACKEND == "smtp":
        return SmtpMailer(
            host=config.SMTP_HOST,
            port=config.SMTP_PORT,
            username=config.SMTP_USERNAME,
            password=config.SMTP_PASSWORD,
            from_email=config.MAIL_FROM,
            use_tls=config.SMTP_USE_TLS,
        )
    return LogMailer()


# Process-wide clients, closed by the app lifespan
key_value_store = build_key_value_store(ApplicationConfig)
mailer = build_mailer(ApplicationConfig)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_key_value_store() -> IKeyValueStore:
    return key_value_store


def get_mailer() -> IMailer:
    return mailer


async def get_user_session(
    request: Request,
    response: Response,
    store: IKeyValueStore = Depends(get_key_value_store),
) -> CookieSession:
    """
    Dependency to load the caller's server-side session from its cookie.

    Returns:
        CookieSession, with user_id None when not logged in
    """
    return await CookieSession.load(
        store,
        request,
        response,
        cookie_name=ApplicationConfig.SESSION_COOKIE_NAME,
        ttl_seconds=ApplicationConfig.SESSION_TTL_SECONDS,
        secure=ApplicationConfig.COOKIE_SECURE,
    )
