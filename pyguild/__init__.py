"""
Discord guild member API wrapper
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

A small wrapper around the Discord API centred on guild members.

:copyright: (c) 2022 Gael, 2026 pyguild contributors
:license: MIT, see LICENSE for more details.
"""

__title__ = "pyguild"
__author__ = "pyguild contributors"
__license__ = "MIT"
__copyright__ = "Copyright (c) 2022 Gael, 2026 pyguild contributors"
__version__ = "0.1.0a"

from typing import NamedTuple, Literal

from .errors import *
from .enums import *
from .cache import CacheManager
from .http import HTTPClient, Route

from .models.abc import *
from .models.activity import *
from .models.ban import *
from .models.guild import *
from .models.member import *
from .models.presence import *
from .models.raw import *
from .models.role import *
from .models.user import *
from . import utils


class VersionInfo(NamedTuple):
    major: int
    minor: int
    micro: int
    release_level: Literal["alpha", "beta", "candidate", "final"]
    serial: int


version_info: VersionInfo = VersionInfo(major=0, minor=1, micro=0, release_level="alpha", serial=0)
