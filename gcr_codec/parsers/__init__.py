from .gcr_parser import GcrParser

__all__ = ['GcrParser']
