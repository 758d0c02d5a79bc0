"""
Espacio de trabajo a partir de un directorio sin archivo de solución
"""
from ..config import Config
from ..models import ProjectDescriptor, Workspace
from .base_repository import WorkspaceRepository

_SKIPPED_DIRS = {'bin', 'obj', 'node_modules'}


class DirectoryWorkspaceRepository(WorkspaceRepository):
    """Busca archivos de proyecto en un árbol de directorios"""

    def _read(self) -> Workspace:
        projects = []
        for candidate in sorted(self.path.rglob('*')):
            if candidate.suffix.lower() not in Config.PROJECT_FILE_SUFFIXES or not candidate.is_file():
                continue
            relative_parts = candidate.relative_to(self.path).parts[:-1]
            if any(part in _SKIPPED_DIRS or part.startswith('.') for part in relative_parts):
                continue
            projects.append(ProjectDescriptor(name=candidate.stem, path=candidate))

        return Workspace(name=self.path.name, path=self.path, projects=projects)
