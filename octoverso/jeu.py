"""Setting up a game and the command that starts it."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Sequence
from os import PathLike

from octoverso.chevalet import Chevalet
from octoverso.dico import Dictionnaire, MotsUtilises
from octoverso.pioche import Pioche
from octoverso.rail import Rail

DICTIONNAIRE_PAR_DEFAUT = "ods4.txt"


class Partie:
    """A two-player game: shuffled pile, two racks, an empty rail and the word list."""

    def __init__(
        self,
        chemin_dictionnaire: str | PathLike[str] = DICTIONNAIRE_PAR_DEFAUT,
        rng: random.Random | None = None,
    ) -> None:
        self.pioche = Pioche(rng)
        self.pioche.melanger()
        self.joueur1 = Chevalet(self.pioche, 1)
        self.joueur2 = Chevalet(self.pioche, 2)
        self.rail = Rail()
        self.mots_utilises = MotsUtilises()
        self.dictionnaire = Dictionnaire.charger(chemin_dictionnaire)

    def __str__(self) -> str:
        return "\n".join(str(partie) for partie in (self.joueur1, self.joueur2, self.rail))

    def afficher(self) -> str:
        """Print both racks and the two faces of the rail; return the printed text."""
        texte = str(self)
        print(texte)
        return texte


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="octoverso", description="Jeu de lettres à deux joueurs.")
    parser.add_argument(
        "-d", "--dictionnaire",
        default=DICTIONNAIRE_PAR_DEFAUT,
        help="fichier de mots, un par ligne",
    )
    args = parser.parse_args(argv)

    mots = sys.stdin.read().split()
    if len(mots) < 2:
        print("deux mots de départ sont attendus", file=sys.stderr)
        return 1

    try:
        partie = Partie(args.dictionnaire)
    except OSError as erreur:
        print(f"dictionnaire illisible : {erreur}", file=sys.stderr)
        return 1

    partie.afficher()
    return 0


if __name__ == "__main__":
    sys.exit(main())