"""The rail: the shared line of letters, readable on both faces."""

from __future__ import annotations

TAILLE_RAIL = 9
PREMIER_MOT = 5
MOT_MAX = 6


def premier_mot(mot1: str, mot2: str) -> int:
    """Compare the first letters of two words.

    Return 1 if the first word comes first, 2 if the second does, 0 if equal.
    """
    debut1, debut2 = mot1[:PREMIER_MOT], mot2[:PREMIER_MOT]
    if debut1 == debut2:
        return 0
    return 1 if debut1 < debut2 else 2


def detecter_mot(mot1: str, mot2: str) -> str:
    """Return the letters between parentheses in whichever word carries them."""
    for mot in (mot1, mot2):
        if mot.startswith("("):
            interieur = mot[1:]
            if interieur.endswith(")"):
                interieur = interieur[:-1]
            return interieur
    raise ValueError("aucun mot entre parenthèses")


class Rail:
    """A sequence of letters with a front (recto) and a back (verso)."""

    def __init__(self, lettres: str = "") -> None:
        self._lettres: list[str] = list(lettres)

    def contient(self, mot: str) -> bool:
        """Tell whether the word appears on the rail's front face."""
        return mot in self.recto()[:TAILLE_RAIL]

    def ajouter_mot(self, mot: str) -> None:
        """Append the letters of a word to the rail."""
        self._lettres.extend(mot)

    def inserer_mot(self, cote: str, mot1: str, mot2: str) -> bool:
        """Play a word on side 'R' or 'V'.

        The letters in parentheses must already be on the rail; they are then
        appended to the chosen face. Return False if they are not on the rail.
        """
        if cote not in ("R", "V"):
            raise ValueError(f"côté invalide : {cote!r}")
        mot = detecter_mot(mot1, mot2)
        if not self.contient(mot):
            return False
        base = self._lettres if cote == "R" else self._lettres[::-1]
        self._lettres = base + list(mot)
        return True

    def pivoter(self) -> Rail:
        """Return a new rail with the letters reversed."""
        return Rail(self.verso())

    def recto(self) -> str:
        return "".join(self._lettres)

    def verso(self) -> str:
        return "".join(reversed(self._lettres))

    def __len__(self) -> int:
        return len(self._lettres)

    def __str__(self) -> str:
        return f"Recto : {self.recto()}\nVerso : {self.verso()}"