#!/usr/bin/env python3
"""
Generador de stubs de procedimientos almacenados
Punto de entrada principal

Uso:
    python main.py -n usp_Users_GetAll -s WIRE             # Crear y registrar
    python main.py -n usp_Users_GetAll -s WIRE --preview   # Solo mostrar
    python main.py --help                                  # Ayuda
"""
import sys
from pathlib import Path

# Agregar el directorio del proyecto al path
sys.path.insert(0, str(Path(__file__).parent))

from sprocgen.cli import main


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\nPrograma interrumpido por el usuario")
        sys.exit(0)
    except Exception as e:
        print(f"Error crítico: {e}")
        import traceback
        traceback.print_exc()
        sys.exit(1)
