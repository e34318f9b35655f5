from mini_file_server.app.core.config import Settings, get_settings
from mini_file_server.app.core.logging_config import setup_logging

__all__ = ['Settings',
           'get_settings',
           'setup_logging']
