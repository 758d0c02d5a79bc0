"""
Servicio para localizar el proyecto destino dentro del espacio de trabajo
"""
from typing import Iterable, Iterator, List, Optional
from ..config import Config
from ..errors import HostEnvironmentError, ProjectNotFoundError
from ..logger import LoggerService
from ..models import ProjectDescriptor, Workspace


class HostDetectionService:
    """Detecta el proyecto que tiene una carpeta Migrations al lado"""

    def __init__(self, marker: str = Config.MIGRATIONS_MARKER):
        """
        Inicializa el servicio de detección

        Args:
            marker: Nombre de la carpeta que marca el proyecto destino
        """
        self.marker = marker
        self.logger = LoggerService.get_logger("HostDetectionService")

    @classmethod
    def flatten(cls, projects: Iterable[ProjectDescriptor]) -> Iterator[ProjectDescriptor]:
        """
        Recorre en profundidad los contenedores y devuelve solo proyectos hoja

        Args:
            projects: Descriptores en el orden del host

        Returns:
            Iterador de proyectos hoja, en el mismo orden
        """
        for project in projects:
            if project.is_container:
                yield from cls.flatten(project.children)
            else:
                yield project

    def is_target(self, project: ProjectDescriptor) -> bool:
        """True si el proyecto tiene la carpeta marcador como hermana"""
        directory = project.directory
        return directory is not None and (directory / self.marker).is_dir()

    def find_target(self, workspace: Optional[Workspace]) -> ProjectDescriptor:
        """
        Devuelve el primer proyecto hoja con carpeta marcador.
        Si varios califican gana el primero en el orden del host.

        Args:
            workspace: Espacio de trabajo activo

        Returns:
            Descriptor del proyecto destino

        Raises:
            HostEnvironmentError: Si no hay espacio de trabajo
            ProjectNotFoundError: Si ningún proyecto califica
        """
        if workspace is None or not workspace.path.exists():
            raise HostEnvironmentError("No hay una solución o espacio de trabajo activo")

        matches: List[ProjectDescriptor] = [p for p in self.flatten(workspace.projects) if self.is_target(p)]

        if not matches:
            raise ProjectNotFoundError(f"No hay ningún proyecto con carpeta {self.marker} en '{workspace.name}'")

        if len(matches) > 1:
            self.logger.warning(
                f"{len(matches)} proyectos tienen carpeta {self.marker}; "
                f"se usa el primero: {matches[0].name}"
            )

        self.logger.debug(f"Proyecto destino: {matches[0].name} ({matches[0].path})")
        return matches[0]
