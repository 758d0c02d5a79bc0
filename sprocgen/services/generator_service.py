"""
Servicio principal que orquesta la generación del procedimiento
"""
from typing import Optional
from ..config import Config
from ..errors import GenerationIOError
from ..logger import LoggerService
from ..models import GenerationRequest, GenerationResult, RegistrationEntry, ResolvedContext, Workspace
from .author_service import AuthorService
from .host_detection_service import HostDetectionService
from .registration_service import RegistrationService
from .stub_renderer import StubRenderer


class GeneratorService:
    """Valida, resuelve, escribe el stub y lo registra en el proyecto"""

    def __init__(
        self,
        detection_service: Optional[HostDetectionService] = None,
        author_service: Optional[AuthorService] = None,
        renderer: Optional[StubRenderer] = None,
        registration_service: Optional[RegistrationService] = None
    ):
        """
        Inicializa el servicio de generación

        Args:
            detection_service: Detección del proyecto destino
            author_service: Resolución del autor
            renderer: Renderizado del stub (permite inyectar el reloj)
            registration_service: Registro en el archivo de proyecto
        """
        self.detection_service = detection_service or HostDetectionService()
        self.author_service = author_service or AuthorService()
        self.renderer = renderer or StubRenderer()
        self.registration_service = registration_service or RegistrationService()
        self.logger = LoggerService.get_logger("GeneratorService")

    def resolve(self, request: GenerationRequest, workspace: Optional[Workspace]) -> ResolvedContext:
        """
        Resuelve proyecto, rutas, autor y marca de tiempo sin tocar el disco

        Args:
            request: Petición validada
            workspace: Espacio de trabajo activo

        Returns:
            Contexto resuelto
        """
        project = self.detection_service.find_target(workspace)
        author = self.author_service.resolve(request, workspace)
        moment = self.renderer.now()
        timestamp = self.renderer.format_timestamp(moment)

        target_directory = project.directory / Config.STORED_PROCEDURES_DIR / request.module
        return ResolvedContext(
            project=project,
            target_directory=target_directory,
            target_file=target_directory / self.renderer.file_name(timestamp, request.name),
            config_file=project.path,
            author=author,
            timestamp=timestamp,
            date=self.renderer.format_date(moment),
            created_at=moment
        )

    def generate(self, request: GenerationRequest, workspace: Optional[Workspace]) -> GenerationResult:
        """
        Genera el stub y lo registra. No sobrescribe archivos existentes.
        Si el registro falla, el stub ya escrito se queda en disco.

        Args:
            request: Petición validada
            workspace: Espacio de trabajo activo

        Returns:
            Resultado de la generación

        Raises:
            GeneratorError: En la primera comprobación que falle
        """
        context = self.resolve(request, workspace)
        self.logger.debug(f"Proyecto: {context.project.name} - Autor: {context.author}")

        if context.target_file.exists():
            self.logger.info(f"El archivo ya existe, no se genera: {context.target_file}")
            return GenerationResult(
                status=GenerationResult.EXISTS,
                file_path=context.target_file,
                author=context.author
            )

        entry = RegistrationEntry(
            relative_path=self.registration_service.relative_path(
                context.target_file, context.project.directory
            ),
            schema=request.schema,
            module=request.module
        )

        if request.preview:
            self.logger.info(f"Vista previa: se crearía {context.target_file}")
            self.logger.info(f"Vista previa: se registraría {entry.relative_path} en {context.config_file}")
            return GenerationResult(
                status=GenerationResult.PREVIEW,
                file_path=context.target_file,
                config_path=context.config_file,
                author=context.author
            )

        stub = self.renderer.render(request, context.author, context.created_at)
        try:
            context.target_directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise GenerationIOError(f"No se pudo crear {context.target_directory}: {e}") from e

        try:
            with open(context.target_file, 'x', encoding='utf-8', newline='') as f:
                f.write(stub.content)
        except FileExistsError:
            self.logger.info(f"El archivo ya existe, no se genera: {context.target_file}")
            return GenerationResult(
                status=GenerationResult.EXISTS,
                file_path=context.target_file,
                author=context.author
            )
        except OSError as e:
            raise GenerationIOError(f"No se pudo escribir {context.target_file}: {e}") from e

        self.logger.info(f"Creado: {context.target_file}")

        registered = self.registration_service.register(context.config_file, entry)
        return GenerationResult(
            status=GenerationResult.CREATED,
            file_path=context.target_file,
            config_path=context.config_file,
            registered=registered,
            author=context.author
        )
