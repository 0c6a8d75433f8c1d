# config.py
from pathlib import Path
import os

BASE_DIR = Path(__file__).resolve().parent

HOST = os.environ.get('CUSTOMER_REGISTRY_HOST', '0.0.0.0')
PORT = int(os.environ.get('CUSTOMER_REGISTRY_PORT', '3000'))

LOG_LEVEL = os.environ.get('CUSTOMER_REGISTRY_LOG_LEVEL', 'INFO').upper()

STATIC_DIR = Path(os.environ.get('CUSTOMER_REGISTRY_STATIC_DIR', BASE_DIR / 'static'))
