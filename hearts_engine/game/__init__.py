from .hearts_game import HeartsGame
