from .formatter_base import ConsoleRenderer

__all__ = ['ConsoleRenderer']
