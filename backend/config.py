import os
from pathlib import Path
from dotenv import load_dotenv

from storefront.services.env_utils import sanitize_env_value, parse_csv_env, parse_int_env

load_dotenv()

# 项目根目录
PROJECT_ROOT = Path(__file__).parent.parent


class Config:
    """Application settings."""
    SECRET_KEY = sanitize_env_value(os.getenv('SECRET_KEY'), 'psm-storefront-secret')

    # Catalog source:
    # 1) DATA_PATH points at a JSON list of products
    # 2) empty means the seeded catalog bundled with the repository
    DATA_PATH = sanitize_env_value(os.getenv('DATA_PATH'), '')

    # Outbound messaging (WhatsApp click-to-chat)
    WHATSAPP_NUMBER = sanitize_env_value(os.getenv('WHATSAPP_NUMBER'), '584146395496')
    WHATSAPP_BASE = sanitize_env_value(os.getenv('WHATSAPP_BASE'), 'https://wa.me/')

    # Catalog behaviour
    MAX_RELATED = parse_int_env(os.getenv('MAX_RELATED'), 4)
    SEARCH_DEBOUNCE_MS = parse_int_env(os.getenv('SEARCH_DEBOUNCE_MS'), 250)
    FEATURED_LIMIT = parse_int_env(os.getenv('FEATURED_LIMIT'), 4)

    # API 配置
    API_PREFIX = '/api/v1'

    # CORS allowlist (comma-separated origins)
    # Example:
    # CORS_ALLOWED_ORIGINS=https://phonestoreca.com,https://www.phonestoreca.com
    CORS_ALLOWED_ORIGINS = parse_csv_env(os.getenv('CORS_ALLOWED_ORIGINS'))

    # Flask 环境
    FLASK_ENV = os.getenv('FLASK_ENV', 'development')
    LOG_LEVEL = sanitize_env_value(os.getenv('LOG_LEVEL'), 'INFO').upper()
