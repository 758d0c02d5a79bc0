"""
Servicio para resolver el autor del procedimiento
"""
import os
import shutil
import subprocess
from pathlib import Path
from typing import Mapping, Optional
from ..config import Config
from ..logger import LoggerService
from ..models import GenerationRequest, Workspace


class AuthorService:
    """Resuelve el autor: argumento, CI, git o nombre de la solución"""

    def __init__(self, environ: Optional[Mapping[str, str]] = None, git_timeout: Optional[float] = None):
        """
        Inicializa el servicio de autor

        Args:
            environ: Variables de entorno (por defecto os.environ)
            git_timeout: Segundos máximos para git; 0 desactiva el límite
        """
        self.environ = os.environ if environ is None else environ
        self.git_timeout = Config.GIT_TIMEOUT if git_timeout is None else git_timeout
        self.logger = LoggerService.get_logger("AuthorService")

    def resolve(self, request: GenerationRequest, workspace: Workspace) -> str:
        """
        Devuelve el primer autor no vacío según la prioridad

        Args:
            request: Petición de generación
            workspace: Espacio de trabajo activo

        Returns:
            Autor resuelto
        """
        if request.anonymize:
            self.logger.debug("Modo anónimo: se usa el nombre de la solución")
            return workspace.name

        if request.author:
            return request.author

        for source, value in (
            (Config.CI_ACTOR_VAR, self._from_env(Config.CI_ACTOR_VAR)),
            (Config.CI_REQUESTER_VAR, self._from_env(Config.CI_REQUESTER_VAR)),
        ):
            if value:
                self.logger.debug(f"Autor tomado de {source}")
                return value

        git_user = self.git_user_name(workspace.root)
        if git_user:
            self.logger.debug("Autor tomado de git config user.name")
            return git_user

        return workspace.name

    def _from_env(self, variable: str) -> Optional[str]:
        value = self.environ.get(variable, "").strip()
        return value or None

    def git_user_name(self, cwd: Path) -> Optional[str]:
        """
        Consulta git config user.name. Cualquier fallo equivale a "sin valor"

        Args:
            cwd: Directorio donde ejecutar git

        Returns:
            Nombre configurado o None
        """
        if not shutil.which(Config.GIT_EXECUTABLE):
            self.logger.debug("git no está instalado")
            return None

        try:
            result = subprocess.run(
                [Config.GIT_EXECUTABLE, 'config', 'user.name'],
                cwd=str(cwd),
                capture_output=True,
                text=True,
                timeout=self.git_timeout or None
            )
        except subprocess.TimeoutExpired:
            self.logger.debug(f"git config excedió {self.git_timeout}s")
            return None
        except OSError as e:
            self.logger.debug(f"No se pudo ejecutar git: {e}")
            return None

        if result.returncode != 0:
            self.logger.debug(f"git config user.name terminó con código {result.returncode}")
            return None

        return result.stdout.strip() or None
