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

__all__				= [ "span" ]

import datetime

from .		import defaults
from .misc	import normalize


class span( object ):
    """A non-negative duration of whole seconds plus a sub-second offset in nanoseconds.  Unlike a
    timestamp, a span has no sign; attempting to create a negative span raises ValueError.

    """
    __slots__			= ( '_seconds', '_nanos' )

    def __init__( self, seconds=0, nanos=0 ):
        if seconds < 0:
            raise ValueError( "Invalid span of %r seconds; must be non-negative" % ( seconds, ))
        self._seconds,self._nanos = normalize( seconds, nanos, lo=0, hi=defaults.span_seconds_max )

    @classmethod
    def from_timedelta( cls, td ):
        """Convert a non-negative datetime.timedelta (microsecond precision) into a span."""
        if td < datetime.timedelta( 0 ):
            raise ValueError( "Invalid span from %r; must be non-negative" % ( td, ))
        return cls( td.days * 86400 + td.seconds, td.microseconds * 1000 )

    def to_timedelta( self ):
        """Produce a datetime.timedelta; any sub-microsecond nanos are truncated."""
        return datetime.timedelta( seconds=self._seconds, microseconds=self._nanos // 1000 )

    @property
    def seconds( self ):
        return self._seconds

    @property
    def nanos( self ):
        return self._nanos

    def total_seconds( self ):
        return self._seconds + self._nanos / defaults.nanos_per_second

    def __float__( self ):
        return self.total_seconds()

    def __repr__( self ):
        return 'span( %d, %d )' % ( self._seconds, self._nanos )

    def _key( self ):
        return self._seconds,self._nanos

    def __hash__( self ):
        return hash( self._key() )

    def __eq__( self, rhs ):
        if not isinstance( rhs, span ):
            return NotImplemented
        return self._key() == rhs._key()
    def __ne__( self, rhs ):
        if not isinstance( rhs, span ):
            return NotImplemented
        return self._key() != rhs._key()
    def __lt__( self, rhs ):
        if not isinstance( rhs, span ):
            return NotImplemented
        return self._key() < rhs._key()
    def __le__( self, rhs ):
        if not isinstance( rhs, span ):
            return NotImplemented
        return self._key() <= rhs._key()
    def __gt__( self, rhs ):
        if not isinstance( rhs, span ):
            return NotImplemented
        return self._key() > rhs._key()
    def __ge__( self, rhs ):
        if not isinstance( rhs, span ):
            return NotImplemented
        return self._key() >= rhs._key()
