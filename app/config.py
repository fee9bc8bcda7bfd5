# app/config.py
"""
Application configuration and defaults.
"""

from dataclasses import dataclass
from typing import List, Tuple


@dataclass
class AppConfig:
    """Global application configuration."""
    
    # App metadata
    app_name: str = "MoleculeCraft"
    app_subtitle: str = "Lewis Structures & VSEPR Geometry"
    version: str = "0.1.0"
    
    # Data provider
    model_name: str = "gemini-2.5-flash"
    api_key_env_vars: Tuple[str, ...] = ("GEMINI_API_KEY", "API_KEY")
    offline_env_var: str = "MOLCRAFT_OFFLINE"
    
    # Formula form
    example_formulas: List[str] = None
    
    # Default view toggles
    default_show_lone_pairs: bool = True
    default_show_charges: bool = True
    default_show_labels_3d: bool = True
    default_spin: bool = True
    
    # Viewers
    spin_rate: float = 0.1  # rad/s about the vertical axis
    n_spin_frames: int = 120
    spin_fps: float = 30.0
    lewis_height: int = 480
    model_height: int = 480
    
    # Logging
    log_level: str = "INFO"
    
    def __post_init__(self):
        if self.example_formulas is None:
            self.example_formulas = ['H2O', 'C6H6', 'SF6']


# Global config instance
CONFIG = AppConfig()
