#!/usr/bin/env python3
"""
Backup de bases de datos MySQL a un servidor FTP
Punto de entrada principal

Pensado para lanzarse desde un programador externo (cron, systemd timer...).

Uso:
    python main.py                     # Ejecutar backup con ./config.json
    python main.py --config otra.json  # Usar otro archivo de configuración
    python main.py --init              # Crear archivos de configuración
    python main.py --help              # Ayuda
"""
import sys
import argparse
from pathlib import Path

# Agregar directorio raíz al path
sys.path.insert(0, str(Path(__file__).parent))

from backupify.config import Config
from backupify.errors import BackupifyError
from backupify.logger import LoggerService
from backupify.repositories.config_repository import ConfigRepository
from backupify.services.backup_service import BackupService


def parse_arguments(argv=None):
    """
    Parsea argumentos de línea de comandos

    Returns:
        Namespace con los argumentos parseados
    """
    parser = argparse.ArgumentParser(
        description='Backup de bases de datos MySQL a un servidor FTP',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Ejemplos:
  python main.py                      # Ejecutar backup
  python main.py --config prod.json   # Usar otra configuración
  python main.py --init               # Crear archivos de configuración
        """
    )

    parser.add_argument(
        '--config',
        type=Path,
        default=Config.CONFIG_FILE,
        metavar='RUTA',
        help=f'Archivo de configuración (default: {Config.CONFIG_FILE})'
    )

    parser.add_argument(
        '--init',
        action='store_true',
        help='Crear archivos de configuración de ejemplo'
    )

    return parser.parse_args(argv)


def initialize_config(config_file: Path):
    """
    Inicializa archivos de configuración si no existen

    Returns:
        True si se creó algún archivo
    """
    logger = LoggerService.get_logger("Init")
    config_repo = ConfigRepository(config_file)

    created_files = []

    if not config_file.exists():
        if config_repo.create_example_config():
            created_files.append(str(config_file))
            logger.info(f"Creado: {config_file}")

    env_example = config_file.parent / ".env.example"
    if not env_example.exists():
        try:
            with open(env_example, 'w', encoding='utf-8') as f:
                f.write(Config.ENV_EXAMPLE)
            created_files.append(str(env_example))
            logger.info(f"Creado: {env_example}")
        except OSError as e:
            logger.error(f"Error creando .env.example: {e}")

    if created_files:
        logger.info("=" * 70)
        logger.info("ARCHIVOS DE CONFIGURACIÓN CREADOS")
        logger.info("=" * 70)
        for file in created_files:
            logger.info(f"  - {file}")
        logger.info("")
        logger.info("IMPORTANTE:")
        logger.info("1. Copia .env.example como .env")
        logger.info("2. Edita .env con tus credenciales")
        logger.info("3. Edita config.json con tus bases de datos y servidor FTP")
        logger.info("4. Ejecuta nuevamente este script")
        logger.info("=" * 70)
        return True

    return False


def fatal(logger, message: str) -> int:
    """Registra un error fatal, lo escribe en stderr y devuelve el código de salida"""
    logger.error(message)
    print(f"Error: {message}", file=sys.stderr)
    return 1


def main(argv=None, service_factory=BackupService) -> int:
    """
    Función principal

    Returns:
        0 si el archivo se subió correctamente, 1 ante cualquier error fatal
    """
    args = parse_arguments(argv)

    if args.init:
        initialize_config(args.config)
        return 0

    logger = LoggerService.get_logger("Main")

    try:
        config = ConfigRepository(args.config).get_config()
    except BackupifyError as e:
        return fatal(logger, f"no se pudo cargar la configuración: {e}")

    logger.info(f"Bases de datos configuradas: {len(config.databases)}")

    try:
        summary = service_factory(config).run()
    except BackupifyError as e:
        return fatal(logger, str(e))

    logger.info(f"Backup completado: {summary.remote_path}")
    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\nPrograma interrumpido por el usuario", file=sys.stderr)
        sys.exit(130)
