from .context import CallerContext

__all__ = ['CallerContext']
