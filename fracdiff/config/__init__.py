from .schema import FilterConfig

__all__ = ['FilterConfig']
