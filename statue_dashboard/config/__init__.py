"""
Config package for statue_dashboard.

Responsible for:
- the GlobalConfig model
- reading config/global.json (load_global_config)
"""

from .model import GlobalConfig
from .loader import load_global_config
