import io
import random
from collections import Counter

import pytest

from octoverso.chevalet import MAX_DISTRIBUTION_LETTRES
from octoverso.jeu import Partie, main
from octoverso.pioche import LETTRES_INITIALES, NB_LETTRES_TOTAL


@pytest.fixture
def dico_path(tmp_path):
    chemin = tmp_path / "ods4.txt"
    chemin.write_text("CHAT\nCHIEN\n", encoding="utf-8")
    return chemin


def test_partie_deals_two_racks(dico_path):
    partie = Partie(dico_path, random.Random(0))
    assert len(partie.joueur1) == MAX_DISTRIBUTION_LETTRES
    assert len(partie.joueur2) == MAX_DISTRIBUTION_LETTRES
    assert len(partie.pioche) == NB_LETTRES_TOTAL - 2 * MAX_DISTRIBUTION_LETTRES


def test_partie_conserves_letters(dico_path):
    partie = Partie(dico_path, random.Random(1))
    toutes = Counter(partie.pioche) + Counter(partie.joueur1.lettres) + Counter(partie.joueur2.lettres)
    assert toutes == Counter(LETTRES_INITIALES)


def test_partie_player_ids_and_empty_state(dico_path):
    partie = Partie(dico_path, random.Random(2))
    assert partie.joueur1.id_joueur == 1
    assert partie.joueur2.id_joueur == 2
    assert len(partie.rail) == 0
    assert len(partie.mots_utilises) == 0


def test_partie_loads_dictionary(dico_path):
    partie = Partie(dico_path, random.Random(3))
    assert "CHAT" in partie.dictionnaire
    assert "LOUP" not in partie.dictionnaire


def test_partie_same_seed_same_deal(dico_path):
    a = Partie(dico_path, random.Random(7))
    b = Partie(dico_path, random.Random(7))
    assert a.joueur1.lettres == b.joueur1.lettres
    assert a.joueur2.lettres == b.joueur2.lettres


def test_partie_missing_dictionary_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        Partie(tmp_path / "absent.txt", random.Random(0))


def test_afficher_prints_racks_and_rail(dico_path, capsys):
    partie = Partie(dico_path, random.Random(4))
    partie.afficher()
    lignes = capsys.readouterr().out.splitlines()
    assert lignes[0] == str(partie.joueur1)
    assert lignes[1] == str(partie.joueur2)
    assert lignes[2] == "Recto : "
    assert lignes[3] == "Verso : "


def test_main_success(dico_path, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("CHAT CHIEN\n"))
    assert main(["--dictionnaire", str(dico_path)]) == 0
    sortie = capsys.readouterr().out
    assert sortie.startswith("1 : ")
    assert "Recto : " in sortie


def test_main_missing_dictionary(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("CHAT CHIEN\n"))
    assert main(["-d", str(tmp_path / "absent.txt")]) == 1
    assert "dictionnaire" in capsys.readouterr().err


def test_main_needs_two_words(dico_path, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("CHAT\n"))
    assert main(["-d", str(dico_path)]) == 1