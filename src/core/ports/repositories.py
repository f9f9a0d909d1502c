"""
Interfaces ports pour les repositories.

Interfaces abstraites (ports) definissant les contrats pour la persistance des donnees.
Les implementations (adaptateurs) fournissent les mecanismes de stockage concrets
(SQLModel asynchrone, en memoire pour les tests, etc.).

Conventions communes a tous les repositories :
- Toutes les operations sont asynchrones (les appels au stockage sont les
  seuls points de suspension).
- Les enregistrements dont deleted_at est renseigne sont invisibles pour les
  lectures, listings, comptages et mises a jour.
- delete() pose deleted_at et retourne False si aucun enregistrement actif
  ne correspond (deja supprime ou inexistant).
- Les erreurs sont toujours des DomainError (DatabaseError pour un echec
  du stockage, AlreadyExistsError pour une violation d'unicite).
"""

from abc import ABC, abstractmethod
from typing import Optional

from src.core.entities.order import Order
from src.core.entities.product import Product, ProductMetadata
from src.core.entities.user import User
from src.core.value_objects.identifiers import OrderId, ProductId, UserId
from src.core.value_objects.pagination import Pagination


class IUserRepository(ABC):
    """
    Interface de stockage des utilisateurs.

    Definit les operations pour persister et recuperer les entites User.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Recupere un utilisateur actif par son ID."""
        ...

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Recupere un utilisateur actif par son email."""
        ...

    @abstractmethod
    async def create(self, user: User) -> UserId:
        """Insere un utilisateur et retourne l'ID genere."""
        ...

    @abstractmethod
    async def update(self, user_id: UserId, user: User) -> bool:
        """Met a jour nom et email. Retourne False si aucun utilisateur actif."""
        ...

    @abstractmethod
    async def delete(self, user_id: UserId) -> bool:
        """Supprime logiquement un utilisateur. Retourne True si supprime maintenant."""
        ...

    @abstractmethod
    async def find_all(self, pagination: Pagination) -> list[User]:
        """Liste les utilisateurs actifs, du plus recent au plus ancien."""
        ...

    @abstractmethod
    async def count(self) -> int:
        """Compte les utilisateurs actifs."""
        ...


class IProductRepository(ABC):
    """
    Interface de stockage des produits.

    Definit les operations pour persister et recuperer les entites Product,
    dont la mise a jour atomique du stock.
    """

    @abstractmethod
    async def find_by_id(self, product_id: ProductId) -> Optional[Product]:
        """Recupere un produit actif par son ID."""
        ...

    @abstractmethod
    async def find_all(self, pagination: Pagination) -> list[Product]:
        """Liste les produits actifs, du plus recent au plus ancien."""
        ...

    @abstractmethod
    async def create(self, product: Product) -> ProductId:
        """Insere un produit et retourne l'ID genere."""
        ...

    @abstractmethod
    async def update_metadata(
        self, product_id: ProductId, metadata: ProductMetadata
    ) -> bool:
        """Remplace les metadonnees. Retourne False si aucun produit actif."""
        ...

    @abstractmethod
    async def update_stock(self, product_id: ProductId, delta: int) -> bool:
        """
        Ajoute delta (positif ou negatif) au stock en une seule ecriture atomique.

        La mise a jour ne s'applique que si le produit est actif et que le
        stock resultant reste >= 0. Aucune lecture prealable n'est faite :
        l'atomicite repose entierement sur la mise a jour conditionnelle du
        moteur de stockage.

        Retourne :
            True si un enregistrement a ete modifie, False sinon
        """
        ...

    @abstractmethod
    async def delete(self, product_id: ProductId) -> bool:
        """Supprime logiquement un produit. Retourne True si supprime maintenant."""
        ...

    @abstractmethod
    async def count(self) -> int:
        """Compte les produits actifs."""
        ...


class IOrderRepository(ABC):
    """
    Interface de stockage des commandes.

    Definit les operations pour persister et recuperer les entites Order.
    """

    @abstractmethod
    async def create(self, order: Order) -> OrderId:
        """Insere une commande et retourne l'ID genere."""
        ...

    @abstractmethod
    async def find_by_id(self, order_id: OrderId) -> Optional[Order]:
        """Recupere une commande active par son ID."""
        ...

    @abstractmethod
    async def find_all(self, pagination: Pagination) -> list[Order]:
        """Liste les commandes actives, de la plus recente a la plus ancienne."""
        ...

    @abstractmethod
    async def find_by_user_id(
        self, user_id: UserId, pagination: Pagination
    ) -> list[Order]:
        """
        Liste les commandes actives d'un utilisateur.

        Args :
            user_id : L'ID de l'utilisateur
            pagination : Page et taille de page

        Retourne :
            Commandes de l'utilisateur, de la plus recente a la plus ancienne
        """
        ...

    @abstractmethod
    async def delete(self, order_id: OrderId) -> bool:
        """Supprime logiquement une commande. Retourne True si supprimee maintenant."""
        ...

    @abstractmethod
    async def count(self) -> int:
        """Compte les commandes actives."""
        ...
