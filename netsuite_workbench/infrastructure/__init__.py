"""Infrastructure layer for the workbench.

Adapters for uploads, export files, mapping template storage and console
logging. They implement the ports defined in the application layer.
"""

from .container import DependencyContainer, create_default_container

__all__ = ["DependencyContainer", "create_default_container"]
