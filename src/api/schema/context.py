from fastapi import Depends
from strawberry.fastapi import BaseContext

from src.app.services.key_value_store import IKeyValueStore
from src.app.services.mailer import IMailer
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.user_session import UserSession
from src.depends import get_key_value_store, get_mailer, get_unit_of_work, get_user_session


class GraphQLContext(BaseContext):
    """
    Per-request handles passed to every resolver.

    request/response/background_tasks are filled in by strawberry.
    """

    def __init__(
        self,
        uow: UnitOfWork,
        store: IKeyValueStore,
        mailer: IMailer,
        session: UserSession,
    ):
        super().__init__()
        self.uow = uow
        self.store = store
        self.mailer = mailer
        self.session = session


async def get_context(
    uow: UnitOfWork = Depends(get_unit_of_work),
    store: IKeyValueStore = Depends(get_key_value_store),
    mailer: IMailer = Depends(get_mailer),
    session: UserSession = Depends(get_user_session),
) -> GraphQLContext:
    return GraphQLContext(uow=uow, store=store, mailer=mailer, session=session)
