"""
Configuración centralizada del generador de procedimientos almacenados
"""
import logging
import os
from pathlib import Path
from dotenv import load_dotenv, find_dotenv


def env_float(name: str, default: float) -> float:
    """
    Lee un número de una variable de entorno

    Args:
        name: Nombre de la variable
        default: Valor si no existe, no es numérico o es negativo

    Returns:
        Valor leído o default
    """
    try:
        value = float(os.getenv(name, default))
    except ValueError:
        return default
    return value if value >= 0 else default


class Config:
    """Configuración centralizada del sistema"""

    ENV_FILE = find_dotenv(usecwd=True)

    # Cargar variables de entorno desde el directorio de trabajo
    load_dotenv(ENV_FILE)

    LOG_DIR = Path(os.getenv("SPROCGEN_LOG_DIR")) if os.getenv("SPROCGEN_LOG_DIR") else None
    LOG_LEVEL = getattr(logging, os.getenv("SPROCGEN_LOG_LEVEL", "INFO").upper(), logging.INFO)
    LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

    # Carpeta hermana del proyecto que lo marca como destino
    MIGRATIONS_MARKER = "Migrations"
    STORED_PROCEDURES_DIR = Path("Database") / "StoredProcedures"

    PROJECT_FILE_SUFFIXES = ['.csproj', '.vbproj', '.fsproj', '.sqlproj']
    SOLUTION_FILE_SUFFIX = ".sln"
    SOLUTION_FOLDER_TYPE = "2150E333-8FDC-42A3-9474-1A3956D46DE8"

    # Orígenes del autor
    CI_ACTOR_VAR = os.getenv("SPROCGEN_CI_ACTOR_VAR", "GITHUB_ACTOR")
    CI_REQUESTER_VAR = os.getenv("SPROCGEN_CI_REQUESTER_VAR", "BUILD_REQUESTEDFOR")
    GIT_EXECUTABLE = "git"
    GIT_TIMEOUT = env_float("SPROCGEN_GIT_TIMEOUT", 10.0)  # 0 = sin límite

    TIMESTAMP_FORMAT = "%Y%m%d%H%M%S"
    DATE_FORMAT = "%m/%d/%Y"

    @classmethod
    def ensure_directories(cls):
        """Crea el directorio de logs si está configurado"""
        if cls.LOG_DIR is not None:
            cls.LOG_DIR.mkdir(parents=True, exist_ok=True)
