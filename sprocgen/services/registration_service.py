"""
Registro del stub como EmbeddedResource en el archivo de proyecto.

No es un parser de XML: son sustituciones de texto sobre el formato que
produce esta misma herramienta, para conservar byte a byte comentarios,
sangrías y saltos de línea del resto del documento:

    <ItemGroup>
      <!-- Stored Procedures - dbo/Reports -->
      <EmbeddedResource Include="Database\\StoredProcedures\\Reports\\20240101120000_usp_X.sql" />
    </ItemGroup>
"""
import codecs
import os
import re
import shutil
import tempfile
from pathlib import Path
from ..errors import RegistrationError
from ..logger import LoggerService
from ..models import RegistrationEntry

GROUP_PREFIX = "Stored Procedures - "
DEFAULT_ITEM_INDENT = "    "
DEFAULT_GROUP_INDENT = "  "

_ENTRY = re.compile(r'^(?P<indent>[ \t]*)<EmbeddedResource\b[^>]*/>', re.MULTILINE)
_ANY_GROUP = re.compile(r'^(?P<indent>[ \t]*)<!--\s*' + re.escape(GROUP_PREFIX) + r'[^\r\n]*?-->', re.MULTILINE)
_PROJECT_CLOSE = re.compile(r'^[ \t]*</Project>', re.MULTILINE)


def _newline(document: str) -> str:
    return "\r\n" if "\r\n" in document else "\n"


def _group_pattern(label: str) -> re.Pattern:
    return re.compile(
        r'^(?P<indent>[ \t]*)<!--\s*' + re.escape(label) + r'\s*-->'
        r'(?P<entries>(?:\r?\n[ \t]*<EmbeddedResource\b[^>]*/>)*)',
        re.MULTILINE
    )


def entry_markup(entry: RegistrationEntry) -> str:
    return f'<EmbeddedResource Include="{entry.relative_path}" />'


def comment_markup(entry: RegistrationEntry) -> str:
    return f'<!-- {entry.label} -->'


def contains_entry(document: str, entry: RegistrationEntry) -> bool:
    """True si el documento ya incluye la ruta (MSBuild no distingue mayúsculas)"""
    pattern = r'<EmbeddedResource\s+Include="' + re.escape(entry.relative_path) + r'"'
    return re.search(pattern, document, re.IGNORECASE) is not None


def insert_entry_under_label(document: str, entry: RegistrationEntry) -> str:
    """
    Inserta la entrada en su grupo, creando el grupo si no existe

    - Grupo existente: la entrada queda como último miembro del grupo.
    - Grupo nuevo: comentario + entrada justo después del último bloque de
      entradas, es decir, antes del comentario del grupo siguiente si lo hay
      o antes del cierre </ItemGroup>.
    - Sin entradas previas: detrás del último comentario de grupo vacío, o en
      un <ItemGroup> nuevo antes de </Project>.

    Args:
        document: Texto del archivo de proyecto
        entry: Entrada a registrar

    Returns:
        Documento modificado, o el mismo si la entrada ya existía

    Raises:
        RegistrationError: Si el documento no tiene la forma esperada
    """
    if contains_entry(document, entry):
        return document

    nl = _newline(document)

    group = _group_pattern(entry.label).search(document)
    if group:
        indents = re.findall(r'\n([ \t]*)<EmbeddedResource', group.group('entries'))
        indent = indents[-1] if indents else group.group('indent')
        position = group.end()
        return document[:position] + nl + indent + entry_markup(entry) + document[position:]

    block_end = None
    indent = DEFAULT_ITEM_INDENT
    entries = list(_ENTRY.finditer(document))
    if entries:
        block_end = entries[-1].end()
        indent = entries[-1].group('indent')
    else:
        groups = list(_ANY_GROUP.finditer(document))
        if groups:
            block_end = groups[-1].end()
            indent = groups[-1].group('indent')

    if block_end is not None:
        block = nl + indent + comment_markup(entry) + nl + indent + entry_markup(entry)
        return document[:block_end] + block + document[block_end:]

    closing = None
    for closing in _PROJECT_CLOSE.finditer(document):
        pass
    if closing is None:
        raise RegistrationError("El archivo de proyecto no contiene </Project>")

    item_group = (
        f"{DEFAULT_GROUP_INDENT}<ItemGroup>{nl}"
        f"{DEFAULT_ITEM_INDENT}{comment_markup(entry)}{nl}"
        f"{DEFAULT_ITEM_INDENT}{entry_markup(entry)}{nl}"
        f"{DEFAULT_GROUP_INDENT}</ItemGroup>{nl}"
    )
    position = closing.start()
    return document[:position] + item_group + document[position:]


class RegistrationService:
    """Lee, modifica y guarda el archivo de proyecto"""

    def __init__(self):
        self.logger = LoggerService.get_logger("RegistrationService")

    @staticmethod
    def relative_path(target_file: Path, project_dir: Path) -> str:
        """Ruta relativa al proyecto con separadores de MSBuild"""
        return "\\".join(target_file.relative_to(project_dir).parts)

    def register(self, config_file: Path, entry: RegistrationEntry) -> bool:
        """
        Registra la entrada en el archivo de proyecto

        Args:
            config_file: Archivo .csproj (o equivalente)
            entry: Entrada a registrar

        Returns:
            True si se insertó, False si ya estaba registrada

        Raises:
            RegistrationError: Si no se puede leer o escribir el archivo
        """
        try:
            raw = config_file.read_bytes()
        except OSError as e:
            raise RegistrationError(f"No se pudo leer {config_file}: {e}") from e

        bom = codecs.BOM_UTF8 if raw.startswith(codecs.BOM_UTF8) else b""
        try:
            document = raw[len(bom):].decode('utf-8')
        except UnicodeDecodeError as e:
            raise RegistrationError(f"{config_file} no está codificado en UTF-8: {e}") from e

        updated = insert_entry_under_label(document, entry)
        if updated == document:
            self.logger.info(f"La entrada ya estaba registrada: {entry.relative_path}")
            return False

        self._write(config_file, bom + updated.encode('utf-8'))
        self.logger.info(f"Registrado en {config_file.name} bajo '{entry.label}'")
        return True

    def _write(self, path: Path, content: bytes):
        """
        Escritura atómica: archivo temporal en el mismo directorio y rename.
        El rename solo necesita permiso sobre el directorio, así que un
        archivo de solo lectura se rechaza antes
        """
        if not os.access(path, os.W_OK):
            raise RegistrationError(f"No se pudo escribir {path}: el archivo es de solo lectura")

        try:
            fd, tmp_path = tempfile.mkstemp(dir=path.parent, prefix=f".tmp_{path.name}_")
        except OSError as e:
            raise RegistrationError(f"No se pudo escribir {path}: {e}") from e

        try:
            with os.fdopen(fd, 'wb') as f:
                f.write(content)
            shutil.copymode(path, tmp_path)
            os.replace(tmp_path, path)
        except OSError as e:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise RegistrationError(f"No se pudo escribir {path}: {e}") from e
