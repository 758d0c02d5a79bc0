"""
Servicios de la aplicación
"""
from .author_service import AuthorService
from .generator_service import GeneratorService
from .host_detection_service import HostDetectionService
from .registration_service import RegistrationService, insert_entry_under_label
from .stub_renderer import StubRenderer

__all__ = [
    'AuthorService',
    'GeneratorService',
    'HostDetectionService',
    'RegistrationService',
    'StubRenderer',
    'insert_entry_under_label'
]
