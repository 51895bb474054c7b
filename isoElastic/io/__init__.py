"""
Input files for material calculations.
"""

from .config import load_config, parse_config, setup_calculator_from_config
