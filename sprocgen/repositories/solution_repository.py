"""
Lectura de archivos de solución de Visual Studio (.sln)
"""
import re
from pathlib import Path
from typing import Dict, List
from ..config import Config
from ..models import ProjectDescriptor, Workspace
from .base_repository import WorkspaceRepository

_PROJECT_LINE = re.compile(
    r'^Project\("\{(?P<type>[^}]+)\}"\)\s*=\s*"(?P<name>[^"]*)"\s*,\s*"(?P<path>[^"]*)"\s*,\s*"\{(?P<guid>[^}]+)\}"',
    re.MULTILINE
)
_NESTED_SECTION = re.compile(
    r'GlobalSection\(NestedProjects\)[^\n]*\n(?P<body>.*?)EndGlobalSection',
    re.DOTALL
)
_NESTED_LINE = re.compile(r'^\s*\{(?P<child>[^}]+)\}\s*=\s*\{(?P<parent>[^}]+)\}', re.MULTILINE)


class SolutionFileRepository(WorkspaceRepository):
    """Espacio de trabajo definido por un archivo .sln"""

    def _read(self) -> Workspace:
        text = self.path.read_text(encoding='utf-8-sig')
        root = self.path.parent

        descriptors: Dict[str, ProjectDescriptor] = {}
        order: List[str] = []

        for match in _PROJECT_LINE.finditer(text):
            guid = match.group('guid').upper()
            is_container = match.group('type').upper() == Config.SOLUTION_FOLDER_TYPE
            path = None
            if not is_container:
                path = root / Path(*re.split(r'[\\/]', match.group('path')))
            descriptors[guid] = ProjectDescriptor(
                name=match.group('name'),
                path=path,
                is_container=is_container
            )
            order.append(guid)

        nested = self._parse_nesting(text)
        top_level = []
        for guid in order:
            parent = nested.get(guid)
            if parent in descriptors and descriptors[parent].is_container:
                descriptors[parent].children.append(descriptors[guid])
            else:
                if parent is not None:
                    self.logger.warning(f"Contenedor desconocido {parent} para {descriptors[guid].name}")
                top_level.append(descriptors[guid])

        return Workspace(name=self.path.stem, path=self.path, projects=top_level)

    @staticmethod
    def _parse_nesting(text: str) -> Dict[str, str]:
        """
        Lee la sección NestedProjects

        Args:
            text: Contenido del .sln

        Returns:
            Diccionario GUID hijo -> GUID contenedor
        """
        section = _NESTED_SECTION.search(text)
        if not section:
            return {}
        return {
            m.group('child').upper(): m.group('parent').upper()
            for m in _NESTED_LINE.finditer(section.group('body'))
        }
