"""
Repositorio base del espacio de trabajo (Dependency Inversion)
"""
from abc import ABC, abstractmethod
from pathlib import Path
from ..errors import HostEnvironmentError
from ..logger import LoggerService
from ..models import Workspace


class WorkspaceRepository(ABC):
    """Interfaz de solo lectura sobre la solución o espacio de trabajo"""

    def __init__(self, path: Path):
        """
        Inicializa el repositorio

        Args:
            path: Archivo de solución o directorio raíz
        """
        self.path = Path(path)
        self.logger = LoggerService.get_logger(self.__class__.__name__)

    @abstractmethod
    def _read(self) -> Workspace:
        """
        Lee los proyectos del espacio de trabajo

        Returns:
            Workspace con sus descriptores de proyecto
        """
        pass

    def load(self) -> Workspace:
        """
        Template method: valida que el espacio de trabajo exista y lo lee

        Returns:
            Workspace cargado

        Raises:
            HostEnvironmentError: Si la ruta no existe o no se puede leer
        """
        if not self.path.exists():
            raise HostEnvironmentError(f"No existe el espacio de trabajo: {self.path}")

        try:
            workspace = self._read()
        except OSError as e:
            raise HostEnvironmentError(f"No se pudo leer el espacio de trabajo {self.path}: {e}") from e
        except UnicodeDecodeError as e:
            raise HostEnvironmentError(f"{self.path} no está codificado en UTF-8: {e}") from e

        self.logger.debug(
            f"Espacio de trabajo '{workspace.name}' cargado con "
            f"{len(workspace.projects)} elemento(s) raíz"
        )
        return workspace
