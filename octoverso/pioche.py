"""The draw pile of letters."""

from __future__ import annotations

import random
from collections.abc import Iterator

NB_LETTRES_TOTAL = 88

DISTRIBUTION: tuple[tuple[str, int], ...] = (
    ("A", 9), ("B", 1), ("C", 2), ("D", 3), ("E", 14), ("F", 1),
    ("G", 1), ("H", 1), ("I", 7), ("J", 1), ("L", 5), ("M", 3),
    ("N", 6), ("O", 5), ("P", 2), ("Q", 1), ("R", 6), ("S", 7),
    ("T", 6), ("U", 5), ("V", 2),
)

LETTRES_INITIALES: tuple[str, ...] = tuple(
    lettre for lettre, nombre in DISTRIBUTION for _ in range(nombre)
)


class PiocheVide(IndexError):
    """Raised when a letter is drawn from an empty pile."""


class Pioche:
    """A pile of letters from which players draw at random."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._lettres: list[str] = []
        self.reinitialiser()

    def reinitialiser(self) -> None:
        """Refill the pile with the full, ordered set of letters."""
        self._lettres = list(LETTRES_INITIALES)

    def melanger(self) -> None:
        """Shuffle the remaining letters in place."""
        self._rng.shuffle(self._lettres)

    def tirer(self) -> str:
        """Remove and return a random letter from the pile."""
        if not self._lettres:
            raise PiocheVide("la pioche est vide")
        i = self._rng.randrange(len(self._lettres))
        lettre = self._lettres[i]
        self._lettres[i] = self._lettres[-1]
        self._lettres.pop()
        return lettre

    def remettre(self, lettre: str) -> None:
        """Put a letter back at the end of the pile."""
        self._lettres.append(lettre)

    def __len__(self) -> int:
        return len(self._lettres)

    def __iter__(self) -> Iterator[str]:
        return iter(self._lettres)