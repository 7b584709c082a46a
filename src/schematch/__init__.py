"""draft-04 json schema validation from composable keyword matchers"""
__version__ = "0.1.0"
from . import caches, checker, exceptions, json, utils
from .arrays import *
from .exceptions import *
from .numbers import *
from .objects import *
from .schema import *
from .strings import *
from .types import *
from .validators import *
