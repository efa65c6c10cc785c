"""
Repositorios de datos
"""
from .config_repository import ConfigRepository

__all__ = ['ConfigRepository']
