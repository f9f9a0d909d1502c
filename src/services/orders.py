"""
Service de gestion des commandes.

Orchestre la creation d'une commande sans transaction multi-documents :
1. Validation de l'utilisateur
2. Validation du produit et lecture du prix
3. Verification indicative du stock (echec rapide avec un message precis)
4. Calcul du prix total, fige pour toujours
5. Reservation du stock par une mise a jour atomique conditionnelle
6. Persistance de la commande
7. Retour de la commande avec son ID genere

La seule garantie de non-negativite du stock sous concurrence est l'etape 5.
Si l'appel est annule entre les etapes 5 et 6, le stock reserve n'est pas
restitue.
"""

from datetime import datetime, timezone

from loguru import logger

from src.core.entities.order import Order
from src.core.errors import (
    BusinessRuleError,
    InternalError,
    InvalidError,
    NotFoundError,
    as_database_error,
)
from src.core.ports.repositories import (
    IOrderRepository,
    IProductRepository,
    IUserRepository,
)
from src.core.value_objects.identifiers import OrderId, ProductId, UserId
from src.core.value_objects.pagination import Pagination

STOCK_RESERVATION_FAILED = (
    "Failed to reserve stock — product may have been modified concurrently"
)


class OrderService:
    """
    Service de creation et de consultation des commandes.

    Ne prend aucun verrou applicatif : les repositories sont partages entre
    toutes les requetes concurrentes.
    """

    def __init__(
        self,
        order_repo: IOrderRepository,
        user_repo: IUserRepository,
        product_repo: IProductRepository,
    ) -> None:
        """
        Initialise le service de commandes.

        Args:
            order_repo: Repository des commandes
            user_repo: Repository des utilisateurs (validation)
            product_repo: Repository des produits (prix et stock)
        """
        self._order_repo = order_repo
        self._user_repo = user_repo
        self._product_repo = product_repo

    async def create_order(
        self, user_id: UserId, product_id: ProductId, quantity: int
    ) -> Order:
        """
        Cree une commande et reserve le stock correspondant.

        Args:
            user_id: Utilisateur passant la commande
            product_id: Produit commande
            quantity: Quantite demandee (> 0)

        Returns:
            La commande persistee avec son ID

        Raises:
            InvalidError: Si quantity <= 0
            NotFoundError: Si l'utilisateur ou le produit n'existe pas
            BusinessRuleError: Si le stock est insuffisant ou n'a pas pu etre reserve
            DatabaseError: Si le stockage echoue
        """
        if quantity <= 0:
            raise InvalidError("quantity", "must be a positive integer")

        await self._ensure_user_exists(user_id)

        with as_database_error("find product"):
            product = await self._product_repo.find_by_id(product_id)
        if product is None:
            raise NotFoundError("Product", str(product_id))

        # Indicatif uniquement : le stock peut deja etre perime a l'etape suivante
        if quantity > product.stock:
            raise BusinessRuleError(
                f"Insufficient stock: requested {quantity}, available {product.stock}",
                {"requested": quantity, "available": product.stock},
            )

        total_price = product.price * quantity

        with as_database_error("reserve stock"):
            reserved = await self._product_repo.update_stock(product_id, -quantity)
        if not reserved:
            logger.warning(
                "Reservation de stock refusee",
                product_id=str(product_id),
                quantity=quantity,
            )
            raise BusinessRuleError(
                STOCK_RESERVATION_FAILED,
                {"product_id": str(product_id), "requested": quantity},
            )

        now = datetime.now(timezone.utc)
        order = Order(
            user_id=user_id,
            product_id=product_id,
            quantity=quantity,
            total_price=total_price,
            created_at=now,
            updated_at=now,
        )
        with as_database_error("create order"):
            order_id = await self._order_repo.create(order)
        if not order_id:
            raise InternalError("Order insert returned no generated id")
        order.id = order_id

        logger.info(
            "Commande creee",
            order_id=str(order.id),
            user_id=str(user_id),
            product_id=str(product_id),
            quantity=quantity,
            total_price=total_price,
        )
        return order

    async def get_order(self, order_id: OrderId) -> Order:
        """Recupere une commande active ou leve NotFoundError."""
        with as_database_error("find order"):
            order = await self._order_repo.find_by_id(order_id)
        if order is None:
            raise NotFoundError("Order", str(order_id))
        return order

    async def list_orders(self, pagination: Pagination) -> list[Order]:
        """Liste les commandes actives, les plus recentes d'abord."""
        with as_database_error("list orders"):
            return await self._order_repo.find_all(pagination)

    async def list_orders_by_user(
        self, user_id: UserId, pagination: Pagination
    ) -> list[Order]:
        """Liste les commandes d'un utilisateur apres avoir verifie qu'il existe."""
        await self._ensure_user_exists(user_id)
        with as_database_error("list user orders"):
            return await self._order_repo.find_by_user_id(user_id, pagination)

    async def delete_order(self, order_id: OrderId) -> None:
        """
        Supprime logiquement une commande.

        Le stock reserve n'est pas restitue.

        Raises:
            NotFoundError: Si la commande est inexistante ou deja supprimee
        """
        with as_database_error("delete order"):
            deleted = await self._order_repo.delete(order_id)
        if not deleted:
            raise NotFoundError("Order", str(order_id))
        logger.info("Commande supprimee", order_id=str(order_id))

    async def count_orders(self) -> int:
        """Compte les commandes actives."""
        with as_database_error("count orders"):
            return await self._order_repo.count()

    async def _ensure_user_exists(self, user_id: UserId) -> None:
        with as_database_error("find user"):
            user = await self._user_repo.find_by_id(user_id)
        if user is None:
            raise NotFoundError("User", str(user_id))
