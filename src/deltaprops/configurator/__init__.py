from .configurator import Configurator

__all__ = ["Configurator"]
