"""Pieces of a two-player letter game: bag, racks, two-sided rail and word list."""

__version__ = "0.1.0"
__all__ = ["chevalet", "dico", "jeu", "pioche", "rail"]