"""
Modelos de datos del sistema
"""
import re
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import List, Optional
from .errors import ValidationError

# Caracteres que no pueden aparecer en un nombre de archivo ni en un identificador entre corchetes
_INVALID_NAME_CHARS = re.compile(r"[\\/:*?\"'<>|\[\]]")


def _validate_identifier(label: str, value: Optional[str]) -> str:
    """Valida y normaliza un nombre obligatorio"""
    value = (value or "").strip()
    if not value:
        raise ValidationError(f"El parámetro {label} es obligatorio")
    if _INVALID_NAME_CHARS.search(value):
        raise ValidationError(f"El parámetro {label} contiene caracteres no válidos: {value}")
    if value in (".", ".."):
        raise ValidationError(f"El parámetro {label} no puede ser {value}")
    return value


@dataclass(frozen=True)
class GenerationRequest:
    """Parámetros de una generación de procedimiento"""
    name: str
    schema: str
    module: Optional[str] = None
    author: Optional[str] = None
    anonymize: bool = False
    preview: bool = False

    def __post_init__(self):
        """Validación después de inicialización"""
        object.__setattr__(self, 'name', _validate_identifier('name', self.name))
        object.__setattr__(self, 'schema', _validate_identifier('schema', self.schema))
        if self.module is None or not self.module.strip():
            object.__setattr__(self, 'module', self.schema)
        else:
            object.__setattr__(self, 'module', _validate_identifier('module', self.module))
        if self.author is not None:
            object.__setattr__(self, 'author', self.author.strip() or None)


@dataclass
class ProjectDescriptor:
    """Proyecto del espacio de trabajo, o carpeta de solución si is_container"""
    name: str
    path: Optional[Path] = None
    is_container: bool = False
    children: List['ProjectDescriptor'] = field(default_factory=list)

    @property
    def directory(self) -> Optional[Path]:
        """Directorio que contiene el archivo de proyecto"""
        return self.path.parent if self.path is not None else None


@dataclass
class Workspace:
    """Solución o directorio raíz con sus proyectos"""
    name: str
    path: Path
    projects: List[ProjectDescriptor] = field(default_factory=list)

    @property
    def root(self) -> Path:
        """Directorio raíz del espacio de trabajo"""
        return self.path if self.path.is_dir() else self.path.parent


@dataclass
class ResolvedContext:
    """Todo lo que se deriva de la petición, el entorno y el reloj"""
    project: ProjectDescriptor
    target_directory: Path
    target_file: Path
    config_file: Path
    author: str
    timestamp: str
    date: str
    created_at: datetime


@dataclass
class StubFile:
    """Contenido renderizado del archivo .sql"""
    file_name: str
    header: str
    body: str

    @property
    def content(self) -> str:
        return self.header + self.body


@dataclass(frozen=True)
class RegistrationEntry:
    """Entrada EmbeddedResource a insertar en el archivo de proyecto"""
    relative_path: str
    schema: str
    module: str

    @property
    def label(self) -> str:
        return f"Stored Procedures - {self.schema}/{self.module}"


@dataclass
class GenerationResult:
    """Resultado de una generación"""
    status: str
    file_path: Path
    config_path: Optional[Path] = None
    registered: bool = False
    author: Optional[str] = None

    CREATED = "created"
    EXISTS = "exists"
    PREVIEW = "preview"

    def __str__(self):
        if self.status == self.CREATED:
            text = f"✓ Creado: {self.file_path}"
            if self.registered and self.config_path is not None:
                text += f"\n  Registrado en: {self.config_path}"
            return text
        if self.status == self.EXISTS:
            return f"• Ya existe: {self.file_path}"
        return f"? Se crearía: {self.file_path}\n  Se registraría en: {self.config_path}"
