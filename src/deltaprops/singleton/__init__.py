from .singleton import Singleton

__all__ = ["Singleton"]
