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


"""
unix_ts.defaults -- System-wide default (global) values

"""
__all__				= [ 'nanos_per_second', 'digits_max',
                                    'seconds_min', 'seconds_max', 'span_seconds_max',
                                    'precision', 'render_format', 'timezone_env' ]

nanos_per_second		= 1000000000	# sub-second offsets are nanoseconds in [0,nanos_per_second)
digits_max			= 9		# 10**9 == nanos_per_second; precision exponents are 0-9

# timestamp seconds are kept within a signed 64-bit range; span seconds within unsigned 64-bit
seconds_min			= -2**63
seconds_max			=  2**63 - 1
span_seconds_max		=  2**64 - 1

# Rendering of timestamps as civil time, eg. '2014-04-01 10:11:12.345 MDT'
precision			= 3		# How many default sub-second digits
render_format			= '%Y-%m-%d %H:%M:%S'

# Environment variable consulted (first) for the host's local timezone; a zone name or tzfile path
timezone_env			= 'TZ'
