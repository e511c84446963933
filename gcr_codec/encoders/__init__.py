from .gcr_encoder import GcrEncoder

__all__ = ['GcrEncoder']
