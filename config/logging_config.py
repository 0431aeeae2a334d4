"""
Logging configuration for EV Range Studio
Easy switching between different logging modes
"""

import os

# =============================================================================
# LOGGING CONFIGURATIONS
# =============================================================================

# Production mode - minimal logging
PRODUCTION_LOGGING = {
    'log_level': 'WARNING',
    'enable_console': True,
    'enable_file': False,
    'detailed_logging': False,
    'log_format': 'minimal'
}

# Development mode - standard logging
DEVELOPMENT_LOGGING = {
    'log_level': 'INFO',
    'enable_console': True,
    'enable_file': False,
    'detailed_logging': False,
    'log_format': 'simple'
}

# Debug mode - detailed logging
DEBUG_LOGGING = {
    'log_level': 'DEBUG',
    'enable_console': True,
    'enable_file': True,
    'detailed_logging': True,
    'log_format': 'detailed'
}

# Silent mode - no logging
SILENT_LOGGING = {
    'log_level': 'CRITICAL',
    'enable_console': False,
    'enable_file': False,
    'detailed_logging': False,
    'log_format': 'minimal'
}

# Testing mode - debug level, no handlers on disk
TESTING_LOGGING = {
    'log_level': 'DEBUG',
    'enable_console': False,
    'enable_file': False,
    'detailed_logging': False,
    'log_format': 'detailed'
}

# =============================================================================
# QUICK SWITCHES
# =============================================================================

# Options: PRODUCTION, DEVELOPMENT, DEBUG, SILENT, TESTING
CURRENT_LOGGING_MODE = os.getenv('RANGE_STUDIO_LOG_MODE', 'DEVELOPMENT').upper()

# =============================================================================
# MODULE-SPECIFIC LOGGING
# =============================================================================

MODULE_LOGGING = {
    'driving_mix': True,
    'range_estimator': True,
    'long_distance': True,
    'comparison_tray': True,
    'catalog_service': True,
}

# =============================================================================
# DETAILED LOGGING SETTINGS
# =============================================================================

DETAILED_LOGGING_COMPONENTS = {
    'range_factors': False,       # every factor on every recompute, very verbose
    'drag_events': False,         # every pointer move while a divider is captured
}

# =============================================================================
# LOG FILE SETTINGS
# =============================================================================

LOG_DIR = "debug_logs"

# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================

def get_logging_config(mode: str = None) -> dict:
    """Get logging configuration for specified mode"""
    if mode is None:
        mode = CURRENT_LOGGING_MODE

    configs = {
        'PRODUCTION': PRODUCTION_LOGGING,
        'DEVELOPMENT': DEVELOPMENT_LOGGING,
        'DEBUG': DEBUG_LOGGING,
        'SILENT': SILENT_LOGGING,
        'TESTING': TESTING_LOGGING
    }

    return configs.get(mode.upper(), DEVELOPMENT_LOGGING)

def is_module_logging_enabled(module_name: str) -> bool:
    """Check if logging is enabled for a specific module"""
    return MODULE_LOGGING.get(module_name, True)

def is_detailed_logging_enabled(component: str) -> bool:
    """Check if detailed logging is enabled for a specific component"""
    return DETAILED_LOGGING_COMPONENTS.get(component, False)

def switch_mode(mode: str):
    """Switch the current logging mode"""
    global CURRENT_LOGGING_MODE
    CURRENT_LOGGING_MODE = mode.upper()

def enable_module_logging(module_name: str):
    """Enable logging for a specific module"""
    MODULE_LOGGING[module_name] = True

def disable_module_logging(module_name: str):
    """Disable logging for a specific module"""
    MODULE_LOGGING[module_name] = False

def enable_detailed_logging(component: str):
    """Enable detailed logging for a specific component"""
    DETAILED_LOGGING_COMPONENTS[component] = True

def disable_detailed_logging(component: str):
    """Disable detailed logging for a specific component"""
    DETAILED_LOGGING_COMPONENTS[component] = False
