"""
Renderizado del archivo .sql del procedimiento almacenado
"""
from datetime import datetime
from typing import Callable, Optional
from ..config import Config
from ..models import GenerationRequest, StubFile

HEADER_TEMPLATE = (
    "-- =============================================\n"
    "-- Author:      {author}\n"
    "-- Object:      [{schema}].[{name}]\n"
    "-- Create date: {date}\n"
    "-- =============================================\n"
)

BODY_TEMPLATE = (
    "IF OBJECT_ID('[{schema}].[{name}]', 'P') IS NOT NULL DROP PROCEDURE [{schema}].[{name}];\n"
    "GO\n"
    "\n"
    "CREATE PROCEDURE [{schema}].[{name}]\n"
    "AS\n"
    "BEGIN\n"
    "    SET NOCOUNT ON;\n"
    "\n"
    "    RETURN 0;\n"
    "END\n"
    "GO\n"
)


class StubRenderer:
    """Genera nombre y contenido del stub a partir de la petición"""

    def __init__(self, clock: Optional[Callable[[], datetime]] = None):
        """
        Args:
            clock: Función que devuelve la hora local actual (inyectable en tests)
        """
        self.clock = clock or datetime.now

    def now(self) -> datetime:
        return self.clock()

    @staticmethod
    def format_timestamp(moment: datetime) -> str:
        """yyyyMMddHHmmss, ordenable y de ancho fijo"""
        return moment.strftime(Config.TIMESTAMP_FORMAT)

    @staticmethod
    def format_date(moment: datetime) -> str:
        """MM/dd/yyyy sin depender del locale"""
        return moment.strftime(Config.DATE_FORMAT)

    @staticmethod
    def file_name(timestamp: str, name: str) -> str:
        return f"{timestamp}_{name}.sql"

    def render(self, request: GenerationRequest, author: str, moment: datetime) -> StubFile:
        """
        Renderiza el stub

        Args:
            request: Petición validada
            author: Autor ya resuelto
            moment: Instante de generación

        Returns:
            StubFile con cabecera y cuerpo
        """
        values = {
            'author': author,
            'schema': request.schema,
            'name': request.name,
            'date': self.format_date(moment),
        }
        return StubFile(
            file_name=self.file_name(self.format_timestamp(moment), request.name),
            header=HEADER_TEMPLATE.format(**values),
            body=BODY_TEMPLATE.format(**values)
        )
