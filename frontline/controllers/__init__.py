"""
Controllers reachable through the front controller, keyed by class name.
"""

from .base_controller import BaseController
from .home_controller import HomeController

CONTROLLERS = {
    "HomeController": HomeController,
}

__all__ = ['BaseController', 'HomeController', 'CONTROLLERS']
