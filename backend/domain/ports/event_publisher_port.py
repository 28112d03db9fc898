"""Port abstrait pour la publication des evenements de mutation."""

from abc import ABC, abstractmethod


class EventPublisherPort(ABC):
    """
    Interface abstraite pour un publisher d'evenements.

    La livraison est asynchrone, par lots et au plus une fois:
    un retour sans erreur de publish() ne garantit pas la livraison.

    Implementations possibles:
    - ArqEventPublisher (ARQ + Redis)
    - AsyncMock(spec=EventPublisherPort) (pour tests)
    """

    @abstractmethod
    async def publish(self, *messages: bytes) -> None:
        """
        Confie zero ou plusieurs messages deja serialises au publisher.

        Args:
            *messages: Payloads JSON encodes
        """
        ...

    @abstractmethod
    async def close(self) -> None:
        """Vide le tampon et libere les ressources."""
        ...
