"""
Interfaz de línea de comandos del generador
"""
import argparse
import logging
from pathlib import Path
from typing import List, Optional
from .errors import GeneratorError
from .factories.workspace_factory import WorkspaceRepositoryFactory
from .logger import LoggerService
from .models import GenerationRequest, GenerationResult
from .services.generator_service import GeneratorService


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parsea argumentos de línea de comandos

    Args:
        argv: Argumentos (por defecto sys.argv)

    Returns:
        Namespace con los argumentos parseados
    """
    parser = argparse.ArgumentParser(
        prog='sprocgen',
        description='Crea un stub de procedimiento almacenado y lo registra en el proyecto',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Ejemplos:
  sprocgen -n usp_Users_GetAll -s WIRE              # Database/StoredProcedures/WIRE/
  sprocgen -n usp_Report -s dbo -m Reports          # Database/StoredProcedures/Reports/
  sprocgen -n usp_Report -s dbo --preview           # Solo muestra lo que haría
  sprocgen -n usp_Report -s dbo --solution App.sln  # Solución explícita
        """
    )

    parser.add_argument('-n', '--name', metavar='NOMBRE', help='Nombre del procedimiento (obligatorio)')
    parser.add_argument('-s', '--schema', metavar='ESQUEMA', help='Esquema del procedimiento (obligatorio)')
    parser.add_argument('-m', '--module', metavar='MODULO', help='Carpeta de agrupación (default: el esquema)')
    parser.add_argument('-a', '--author', metavar='AUTOR', help='Autor explícito')
    parser.add_argument(
        '--anonymize',
        action='store_true',
        help='Usar el nombre de la solución como autor'
    )
    parser.add_argument(
        '--preview', '--what-if',
        dest='preview',
        action='store_true',
        help='Resolver y mostrar el resultado sin escribir nada'
    )
    parser.add_argument(
        '--solution',
        type=Path,
        metavar='RUTA',
        help='Archivo .sln o directorio del espacio de trabajo (default: la .sln más cercana)'
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Logging detallado')

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Función principal

    Returns:
        Código de salida (0 éxito, 1 error)
    """
    args = parse_arguments(argv)
    if args.verbose:
        LoggerService.set_level(logging.DEBUG)

    logger = LoggerService.get_logger("Main")

    try:
        request = GenerationRequest(
            name=args.name,
            schema=args.schema,
            module=args.module,
            author=args.author,
            anonymize=args.anonymize,
            preview=args.preview
        )
        workspace = WorkspaceRepositoryFactory.create(args.solution).load()
        result = GeneratorService().generate(request, workspace)
    except GeneratorError as e:
        logger.error(f"✗ {e}")
        return 1

    for line in str(result).splitlines():
        logger.info(line)
    if result.status == GenerationResult.CREATED and not result.registered:
        logger.warning("El archivo de proyecto ya contenía la entrada; no se modificó")
    return 0
