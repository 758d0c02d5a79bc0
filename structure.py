"""
sprocgen/
│
├── sprocgen/
│   ├── __init__.py
│   ├── cli.py                        # Argumentos y punto de entrada
│   ├── config.py                     # Configuración y constantes
│   ├── errors.py                     # Jerarquía de errores
│   ├── logger.py                     # Servicio de logging
│   ├── models.py                     # Modelos de datos
│   ├── repositories/
│   │   ├── __init__.py
│   │   ├── base_repository.py        # Repositorio base del espacio de trabajo
│   │   ├── solution_repository.py    # Lectura de archivos .sln
│   │   └── directory_repository.py   # Escaneo de directorios
│   ├── services/
│   │   ├── __init__.py
│   │   ├── generator_service.py      # Orquestación de la generación
│   │   ├── host_detection_service.py # Proyecto con carpeta Migrations
│   │   ├── author_service.py         # Resolución del autor
│   │   ├── stub_renderer.py          # Contenido del .sql
│   │   └── registration_service.py   # Registro en el .csproj
│   └── factories/
│       ├── __init__.py
│       └── workspace_factory.py      # Factory de repositorios
│
├── tests/
│   ├── test_generator.py             # Tests unitarios
│   └── test_registration.py          # Tests del registro en el proyecto
│
├── main.py                           # Punto de entrada
├── pyproject.toml
├── .env.example
└── README.md
"""
