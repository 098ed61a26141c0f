# -*- coding: utf-8 -*-
# (c) Nelen & Schuurmans

from .client import *  # NOQA
from .config import *  # NOQA
from .exceptions import *  # NOQA
from .headers import *  # NOQA
from .paths import *  # NOQA
from .response import *  # NOQA
from .status_code import *  # NOQA
from .tables import *  # NOQA
from .timeouts import *  # NOQA
from .value_object import ValueObject  # NOQA

# fmt: off
__version__ = '0.0.1.dev0'
# fmt: on
