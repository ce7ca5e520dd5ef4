import os
from typing import Dict, Any
from dotenv import load_dotenv

# Load environment variables from .env and .env.local; exported values win
load_dotenv()
load_dotenv('.env.local')

class Config:
    """Base configuration"""
    DEBUG = False
    TESTING = False

    # Logging settings
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'WARNING').upper()
    LOG_FILE = os.getenv('LOG_FILE')

    # WordPress settings
    WORDPRESS_API_PATH = '/wp-json/wp/v2'
    WORDPRESS_TIMEOUT = float(os.getenv('WORDPRESS_TIMEOUT', '10'))

    # Secrets CLI settings
    SECRETS_CLI = os.getenv('SECRETS_CLI', 'npx supabase')
    SECRETS_TIMEOUT = int(os.getenv('SECRETS_TIMEOUT', '60'))

    # Site configuration storage
    SITES_CONFIG_DIR = os.getenv('SITES_CONFIG_DIR', os.path.join('config', 'sites'))

    @classmethod
    def to_dict(cls) -> Dict[str, Any]:
        """Convert config to dictionary"""
        return {
            key: getattr(cls, key)
            for key in dir(cls)
            if not key.startswith('_') and key.isupper()
        }

class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()

class TestingConfig(Config):
    """Testing configuration"""
    TESTING = True
    LOG_LEVEL = 'DEBUG'
    LOG_FILE = None
    WORDPRESS_TIMEOUT = 1.0
    SECRETS_CLI = 'secrets-cli'

class ProductionConfig(Config):
    """Production configuration"""
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'ERROR').upper()

# Map environment to config class
config_by_name = {
    'development': DevelopmentConfig,
    'testing': TestingConfig,
    'production': ProductionConfig
}

# Active configuration
active_config = config_by_name[os.getenv('PIPELINE_ENV', 'development')]
