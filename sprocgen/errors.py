"""
Jerarquía de errores del generador
"""


class GeneratorError(Exception):
    """Error base: cualquier fallo que aborta la generación"""


class ValidationError(GeneratorError):
    """Parámetros de entrada ausentes o inválidos"""


class HostEnvironmentError(GeneratorError):
    """No hay solución o espacio de trabajo activo"""


class ProjectNotFoundError(GeneratorError):
    """Ningún proyecto tiene la carpeta Migrations al lado"""


class GenerationIOError(GeneratorError, OSError):
    """No se pudo escribir el archivo del procedimiento"""


class RegistrationError(GeneratorError, OSError):
    """No se pudo leer, modificar o escribir el archivo de proyecto"""
