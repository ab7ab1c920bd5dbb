from openingstats.models.opening_entry import OpeningEntry
from openingstats.models.raw_game import Accuracies, PlayerRecord, RawGame

__all__ = ["Accuracies", "OpeningEntry", "PlayerRecord", "RawGame"]
