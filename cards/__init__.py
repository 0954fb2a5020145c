from .blackjack import BlackjackCard

__all__ = ["BlackjackCard"]
