"""Abstract port for the blocking dialogs a screen raises."""

from abc import ABC, abstractmethod


class UserPrompt(ABC):
    """Blocking confirm/alert dialogs shown to the operator."""

    @abstractmethod
    def confirm(self, message: str) -> bool:
        """Ask a yes/no question; ``True`` means the operator confirmed."""
        ...

    @abstractmethod
    def alert(self, message: str) -> None:
        """Show a message the operator has to acknowledge."""
        ...
