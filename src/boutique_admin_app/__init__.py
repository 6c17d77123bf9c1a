from .bootstrap import AdminAppBootstrap

__all__ = ["AdminAppBootstrap"]
