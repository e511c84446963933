from .validator import GcrValidator

__all__ = ['GcrValidator']
