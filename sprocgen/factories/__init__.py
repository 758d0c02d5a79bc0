"""
Factories del generador
"""
from .workspace_factory import WorkspaceRepositoryFactory

__all__ = ['WorkspaceRepositoryFactory']
