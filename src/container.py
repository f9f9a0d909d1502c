"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour les interfaces CLI et Web.
L'engine et le session factory sont partages (pool de connexions) par tous
les repositories ; les services sont crees a la demande.
"""

from dependency_injector import containers, providers

from .config import Settings
from .infrastructure.persistence.database import (
    create_db_engine,
    create_session_factory,
)
from .infrastructure.persistence.repositories import (
    SQLModelOrderRepository,
    SQLModelProductRepository,
    SQLModelUserRepository,
)
from .services.orders import OrderService
from .services.products import ProductService
from .services.users import UserService


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        await init_db(container.engine())  # Cree les tables une fois
        order_service = container.order_service()

    Pour les tests, les repositories peuvent etre remplaces :
        container.order_repository.override(providers.Object(fake_repo))
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Engine asynchrone et session factory - partages par tous les repositories
    engine = providers.Singleton(
        create_db_engine,
        database_url=config.provided.database_url,
        echo=config.provided.database_echo,
    )
    session_factory = providers.Singleton(create_session_factory, engine=engine)

    # Repositories - Singletons sans etat (une session par operation)
    user_repository = providers.Singleton(
        SQLModelUserRepository,
        session_factory=session_factory,
    )
    product_repository = providers.Singleton(
        SQLModelProductRepository,
        session_factory=session_factory,
    )
    order_repository = providers.Singleton(
        SQLModelOrderRepository,
        session_factory=session_factory,
    )

    # Services - Factory, dependent uniquement des ports
    user_service = providers.Factory(UserService, user_repo=user_repository)
    product_service = providers.Factory(ProductService, product_repo=product_repository)
    order_service = providers.Factory(
        OrderService,
        order_repo=order_repository,
        user_repo=user_repository,
        product_repo=product_repository,
    )
