"""The word list and the record of words already played."""

from __future__ import annotations

from collections.abc import Iterable
from os import PathLike

MOT_LONGUEUR_MAX = 8


class Dictionnaire:
    """A set of accepted words; only words of at most eight letters count."""

    def __init__(self, mots: Iterable[str] = ()) -> None:
        self._mots: frozenset[str] = frozenset(
            mot for mot in (m.strip() for m in mots)
            if mot and len(mot) <= MOT_LONGUEUR_MAX
        )

    @classmethod
    def charger(cls, chemin: str | PathLike[str]) -> Dictionnaire:
        """Read a word list, one word per line.

        Raises OSError (FileNotFoundError in particular) if the file cannot be opened.
        """
        with open(chemin, encoding="utf-8") as fichier:
            return cls(fichier)

    def __contains__(self, mot: object) -> bool:
        return isinstance(mot, str) and mot in self._mots

    def __len__(self) -> int:
        return len(self._mots)


class MotsUtilises:
    """The words already played during a game, in the order they were played."""

    def __init__(self) -> None:
        self._mots: list[str] = []

    def est_disponible(self, mot: str) -> bool:
        """Tell whether the word has not been played yet."""
        return mot not in self._mots

    def ajouter(self, mot: str) -> None:
        """Record a word as played."""
        self._mots.append(mot)

    def __contains__(self, mot: object) -> bool:
        return mot in self._mots

    def __len__(self) -> int:
        return len(self._mots)