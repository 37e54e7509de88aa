"""
Target language profiles.

Each sub-package exports one ``TargetLanguage`` profile; ``wsdl_codegen.registry``
registers them under their names and aliases.
"""

from .python import PYTHON_TARGET
from .php import PHP_TARGET

__all__ = ["PYTHON_TARGET", "PHP_TARGET"]
