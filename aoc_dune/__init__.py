from .scaffold import create, init

__version__ = "0.1.0"

__all__ = ["create", "init"]
