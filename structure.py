"""
backupify/
│
├── backupify/
│   ├── __init__.py
│   ├── config.py                 # Configuración y constantes
│   ├── errors.py                 # Excepciones (recuperables y fatales)
│   ├── logger.py                 # Servicio de logging
│   ├── models.py                 # Modelos de datos
│   ├── repositories/
│   │   ├── __init__.py
│   │   └── config_repository.py  # Carga de config.json
│   ├── strategies/
│   │   ├── __init__.py
│   │   ├── base_strategy.py      # Volcado base (subprocess -> archivo)
│   │   └── mysql_strategy.py     # Estrategia mysqldump
│   └── services/
│       ├── __init__.py
│       ├── archive_service.py    # Empaquetado .tar.gz
│       ├── transfer_service.py   # Subida FTP
│       └── backup_service.py     # Orquestación de la ejecución
│
├── tests/
│   ├── __init__.py
│   ├── fakes.py                  # mysqldump falso y cliente FTP en memoria
│   ├── test_backup.py            # Modelos y configuración
│   ├── test_dump.py
│   ├── test_archive.py
│   ├── test_transfer.py
│   └── test_run.py               # Ejecución completa y códigos de salida
│
├── main.py                       # Punto de entrada (lanzado por cron)
├── pyproject.toml
└── config.json.example
"""
