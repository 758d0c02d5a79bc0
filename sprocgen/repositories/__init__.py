"""
Repositorios de lectura del espacio de trabajo
"""
from .base_repository import WorkspaceRepository
from .directory_repository import DirectoryWorkspaceRepository
from .solution_repository import SolutionFileRepository

__all__ = [
    'WorkspaceRepository',
    'DirectoryWorkspaceRepository',
    'SolutionFileRepository'
]
