"""A player's rack of letters."""

from __future__ import annotations

from collections import Counter

from octoverso.pioche import Pioche

TAILLE_CHEVALET_MAX = 16
MAX_DISTRIBUTION_LETTRES = 12


class Chevalet:
    """The letters held by one player."""

    def __init__(self, pioche: Pioche, id_joueur: int = 0) -> None:
        self.id_joueur = id_joueur
        self.lettres: list[str] = [pioche.tirer() for _ in range(MAX_DISTRIBUTION_LETTRES)]

    def peut_former(self, mot: str) -> bool:
        """Tell whether every letter of the word appears on the rack."""
        return all(lettre in self.lettres for lettre in mot)

    def echanger(self, lettre: str, pioche: Pioche) -> str:
        """Swap a letter of the rack for one drawn from the pile; return the new letter."""
        try:
            i = self.lettres.index(lettre)
        except ValueError:
            raise ValueError(f"la lettre {lettre!r} n'est pas sur le chevalet") from None
        nouvelle = pioche.tirer()
        pioche.remettre(lettre)
        self.lettres[i] = nouvelle
        return nouvelle

    def poser_mot(self, mot: str) -> None:
        """Remove the letters of the word from the rack."""
        manque = Counter(mot) - Counter(self.lettres)
        if manque:
            raise ValueError(
                f"lettres absentes du chevalet : {''.join(sorted(manque.elements()))}"
            )
        for lettre in mot:
            self.lettres.remove(lettre)

    def __len__(self) -> int:
        return len(self.lettres)

    def __str__(self) -> str:
        return f"{self.id_joueur} : {''.join(self.lettres)}"