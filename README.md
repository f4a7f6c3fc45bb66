# octoverso

The pieces of a two-player word game played with letter tiles. Each player
holds a rack (*chevalet*) of letters drawn from a shared bag (*pioche*), and
words are built onto a rail that can be read from either side (*recto* and
*verso*).

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## The `octoverso` command

```
echo "ARBRE BATON" | octoverso --dictionnaire mots.txt
```

The command reads the players' two starting words from standard input and
stops with exit status 1 if fewer than two are given. It then sets up a game:
the bag is shuffled, each player is dealt 12 letters, the rail starts empty
and the word list is loaded from the file given with `-d` / `--dictionnaire`
(one word per line, `ods4.txt` in the current directory by default). If that
file cannot be read, it reports the error and exits with status 1. Otherwise
it prints both racks (`1 : ...`, `2 : ...`) and the two faces of the rail,
and exits with status 0.

### What the command does not do

It only sets a game up and shows it. The starting words are checked for
count only; they are not placed on the rail. There is no turn loop: players
cannot play words, exchange letters or win, and nothing is scored or saved
between runs. The classes below provide the individual moves.

## Using the library

```python
import random

from octoverso.pioche import Pioche
from octoverso.chevalet import Chevalet
from octoverso.rail import Rail, premier_mot

pioche = Pioche(random.Random(42))
print(len(pioche))          # 88 letters in a full bag

joueur = Chevalet(pioche, 1)
print(len(joueur))          # 12 letters dealt to the player
print(joueur)               # "1 : " followed by the player's letters

joueur.peut_former("MER")   # True if every letter is on the rack

# Which of two opening words comes first (compares the first five letters):
premier_mot("ARBRE", "BATON")   # 1

rail = Rail("ARBRE")
print(rail.recto())         # ARBRE
print(rail.verso())         # ERBRA
```

### `octoverso.pioche`

- `Pioche(rng=None)` — the bag, filled with the 88 letters in order. `rng` is
  an optional `random.Random`.
- `melanger()` shuffles the bag; `reinitialiser()` refills it in order.
- `tirer()` removes and returns a random letter; it raises `PiocheVide` (an
  `IndexError`) when the bag is empty.
- `remettre(lettre)` puts a letter back. `len()` and iteration give the
  letters left.

### `octoverso.chevalet`

- `Chevalet(pioche, id_joueur=0)` — a rack of 12 letters drawn from the bag.
- `peut_former(mot)` tells whether every letter of the word is on the rack
  (each letter is checked on its own, without counting repeats).
- `echanger(lettre, pioche)` swaps a letter of the rack for one drawn from
  the bag, puts the old letter back in the bag and returns the new one; it
  raises `ValueError` if the letter is not on the rack.
- `poser_mot(mot)` removes the word's letters from the rack; it raises
  `ValueError`, leaving the rack unchanged, if any are missing.
- `str()` gives `"<id> : <letters>"`.

### `octoverso.rail`

- `premier_mot(mot1, mot2)` compares the first five letters of two words:
  1 if the first comes first, 2 if the second does, 0 if they are equal.
- `detecter_mot(mot1, mot2)` returns the letters of whichever word starts
  with `(`, without the parentheses; `ValueError` if neither does.
- `Rail(lettres="")` — `recto()` and `verso()` give the two faces,
  `pivoter()` returns a reversed copy, `contient(mot)` looks for a word in
  the first nine letters of the front face, `ajouter_mot(mot)` appends
  letters.
- `inserer_mot(cote, mot1, mot2)` takes the word in parentheses; if it is on
  the rail, it is appended to the front (`"R"`) or to the reversed rail
  (`"V"`) and `True` is returned, otherwise `False`. Any other side raises
  `ValueError`.

### `octoverso.dico`

- `Dictionnaire(mots=())` — a set of words, stripped of surrounding
  whitespace; words longer than eight letters are left out.
  `Dictionnaire.charger(chemin)` reads one word per line and raises `OSError`
  if the file cannot be opened. Use `mot in dictionnaire`.
- `MotsUtilises()` — the words already played: `ajouter(mot)`,
  `est_disponible(mot)`, `in` and `len()`.

### `octoverso.jeu`

- `Partie(chemin_dictionnaire="ods4.txt", rng=None)` — a game set up as the
  command does it, with `pioche`, `joueur1`, `joueur2`, `rail`,
  `mots_utilises` and `dictionnaire`. `afficher()` prints the racks and the
  rail and returns the printed text.
- `main(argv=None)` — the `octoverso` command.