"""
Factory para crear repositorios de espacio de trabajo
"""
from pathlib import Path
from typing import Optional
from ..config import Config
from ..errors import HostEnvironmentError
from ..repositories.base_repository import WorkspaceRepository
from ..repositories.directory_repository import DirectoryWorkspaceRepository
from ..repositories.solution_repository import SolutionFileRepository


class WorkspaceRepositoryFactory:
    """Factory para crear repositorios de espacio de trabajo (Factory Pattern)"""

    # Límite de niveles al buscar la solución hacia arriba
    MAX_SEARCH_DEPTH = 20

    @classmethod
    def create(cls, path: Optional[Path] = None) -> WorkspaceRepository:
        """
        Crea el repositorio adecuado para la ruta

        Args:
            path: Archivo .sln o directorio. Si es None, se busca la solución
                  más cercana desde el directorio actual hacia arriba

        Returns:
            Instancia de WorkspaceRepository

        Raises:
            HostEnvironmentError: Si no hay espacio de trabajo utilizable
        """
        if path is None:
            path = cls.find_solution()
            if path is None:
                raise HostEnvironmentError(
                    "No se encontró ninguna solución (.sln). Usa --solution para indicarla."
                )

        path = Path(path)
        if path.is_file() and path.suffix.lower() == Config.SOLUTION_FILE_SUFFIX:
            return SolutionFileRepository(path)
        if path.is_dir():
            return DirectoryWorkspaceRepository(path)

        raise HostEnvironmentError(f"Espacio de trabajo no válido: {path}")

    @classmethod
    def find_solution(cls, start_dir: Optional[Path] = None) -> Optional[Path]:
        """
        Busca un archivo .sln desde start_dir hacia la raíz

        Args:
            start_dir: Directorio inicial (por defecto el actual)

        Returns:
            Ruta a la primera solución encontrada, o None
        """
        current = (start_dir or Path.cwd()).resolve()

        for _ in range(cls.MAX_SEARCH_DEPTH):
            solutions = sorted(current.glob(f"*{Config.SOLUTION_FILE_SUFFIX}"))
            if solutions:
                return solutions[0]
            if current.parent == current:
                break
            current = current.parent

        return None
