"""
mdoge: MasterDoge network parameters and genesis bootstrap
"""
# __init__.py
from mdoge.params import NetworkID, NetworkProfile, get_registry, select_params, select_params_from_command_line

__version__ = "0.1.0"
