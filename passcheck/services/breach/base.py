from abc import ABC, abstractmethod


class BreachClient(ABC):

    @abstractmethod
    def check_digest(self, digest: str) -> int:
        """
        Returns how many times the full SHA-1 digest appears in the corpus,
        0 when it does not.

        Only the 5-character prefix may leave the process (k-anonymity).
        Raises BreachCheckFailed when the lookup itself fails.
        """
        pass
