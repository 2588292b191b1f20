#
# Unix-ts -- Unix timestamp manipulation and conversion
#
# Copyright (c) 2013, Hard Consulting Corporation.
#
# Unix-ts is free software: you can redistribute it and/or modify it under the
# terms of the GNU General Public License as published by the Free Software
# Foundation, either version 3 of the License, or (at your option) any later
# version.  See the LICENSE file at the top of the source tree.
#
# Unix-ts is distributed in the hope that it will be useful, but WITHOUT ANY
# WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS FOR
# A PARTICULAR PURPOSE.  See the GNU General Public License for more details.
#

__author__                      = "Perry Kundert"
__email__                       = "perry@hardconsulting.com"
__copyright__                   = "Copyright (c) 2013 Hard Consulting Corporation"
__license__                     = "Dual License: GPLv3 (or later) and Commercial (see LICENSE)"

from .version	import __version__, __version_info__
from .misc	import *
from .span	import *
from .timestamp	import *
from .literal	import *
from .times	import get_localzone, timezone_info, parse_offset, format_offset
