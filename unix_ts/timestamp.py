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

__all__				= [ "timestamp" ]

import logging
import re

from .		import defaults, misc, times
from .misc	import is_integer, normalize, scale_of
from .span	import span

log				= logging.getLogger( __package__ )


class timestamp( object ):
    """A UNIX timestamp; whole seconds since the epoch, plus a sub-second offset in nanoseconds.

    The nanos are *always* a non-negative offset added to the seconds, even when the timestamp is
    negative.  Therefore, a timestamp of -0.25 seconds is timestamp( -1, 750000000 ); never
    ( 0, -250000000 ).  This keeps the natural (seconds, nanos) ordering monotonic with real time,
    so all comparisons are simply lexicographic over the pair.

    Timestamps are immutable values; all arithmetic produces a new (normalized) timestamp, and the
    augmented assignment operators (+=, -=) just rebind the name.  The seconds are limited to a
    signed 64-bit range; anything that would exceed it raises OverflowError.

    """
    __slots__			= ( '_seconds', '_nanos' )

    _units			= {
        'millis':	1000,
        'micros':	1000000,
        'nanos':	1000000000,
    }

    def __init__( self, seconds=0, nanos=0 ):
        """Create a timestamp from seconds and a non-negative nanos offset, which may exceed one
        second; any whole seconds are carried into seconds.  To represent -0.25 seconds, use
        timestamp( -1, 750000000 ).

        """
        self._seconds,self._nanos = normalize( seconds, nanos )

    @classmethod
    def from_seconds( cls, seconds ):
        return cls( seconds, 0 )

    @classmethod
    def _from_units( cls, value, unit ):
        """Split a signed count of 1/unit seconds into floor seconds and a non-negative remainder,
        eg. -1750 millis is -2 seconds + 250 millis.

        """
        if not is_integer( value ):
            raise TypeError( "Invalid count of %s: %r; must be an integer" % ( type( value ), value ))
        seconds,remains		= divmod( value, unit )
        return cls( seconds, remains * ( defaults.nanos_per_second // unit ))

    @classmethod
    def from_millis( cls, value ):
        return cls._from_units( value, cls._units['millis'] )

    @classmethod
    def from_micros( cls, value ):
        return cls._from_units( value, cls._units['micros'] )

    @classmethod
    def from_nanos( cls, value ):
        return cls._from_units( value, cls._units['nanos'] )

    @classmethod
    def now( cls ):
        """The current wall-clock time.  The clock is assumed to be at or after the epoch; if not (a
        badly misconfigured host), ValueError is raised.

        """
        elapsed			= misc.timer_ns()
        if elapsed < 0:
            log.warning( "System clock is before the epoch: %d ns", elapsed )
            raise ValueError( "System clock reports %d ns; before the epoch" % ( elapsed ))
        return cls.from_nanos( elapsed )

    @classmethod
    def from_span( cls, dur ):
        return cls( dur.seconds, dur.nanos )

    @classmethod
    def from_datetime( cls, dt ):
        """Convert a datetime (naive datetimes are taken to be UTC), to microsecond precision."""
        return cls( *times.parts_from_datetime( dt ))

    @classmethod
    def from_string( cls, s, tzinfo=None ):
        """Parse a 'YYYY-MM-DD HH:MM:SS[.#########] [TZ]' time (default: UTC)."""
        return cls( *times.parts_from_string( s, tzinfo=tzinfo ))

    def seconds( self ):
        """The whole seconds; sub-second values are discarded.  For a negative timestamp, this is the
        floor (eg. -1 for -0.25 seconds), not the value rounded toward zero.

        """
        return self._seconds

    def at_precision( self, e ):
        """The time since the epoch as an integer count of 10**-e seconds (eg. 3 for milliseconds, 6
        for microseconds); e must be 0-9.

        """
        divisor			= scale_of( e )
        return self._seconds * 10 ** e + self._nanos // divisor

    def subsec( self, e ):
        """The sub-second component as an integer count of 10**-e seconds; never negative."""
        return self._nanos // scale_of( e )

    def to_span( self ):
        """The (non-negative) span since the epoch; a negative timestamp raises ValueError."""
        if self._seconds < 0:
            raise ValueError( "Invalid span from negative %r" % ( self, ))
        return span( self._seconds, self._nanos )

    # Civil time conversions.  All sub-microsecond nanos are truncated.
    def to_datetime( self, tzinfo ):
        return times.datetime_from_parts( self._seconds, self._nanos, tzinfo=tzinfo )

    def to_utc_datetime( self ):
        return times.datetime_from_parts( self._seconds, self._nanos )

    def to_naive_datetime( self ):
        return self.to_utc_datetime().replace( tzinfo=None )

    def render( self, tzinfo=None, ms=True ):
        """Render the time in the specified zone (default: UTC), eg. '2014-05-05 21:42:21.999 MDT';
        see unix_ts.times.render_parts.

        """
        return times.render_parts( self._seconds, self._nanos, tzinfo=tzinfo, ms=ms )

    @property
    def utc( self ):
        return self.render( ms=True )

    @property
    def local( self ):
        """The time in the host's local timezone wall-clock time, in seconds + timezone."""
        return self.render( tzinfo=times.get_localzone(), ms=False )

    # Numeric and text forms.
    def format( self, precision=None ):
        """Whole seconds (eg. '1335020400') by default.  With a precision, render seconds + nanos as a
        floating point value to that many decimal places (eg. '1335020400.00').  Beyond about 6
        decimal places, the limited precision of a float begins to show.

        """
        if precision is None:
            return '%d' % ( self._seconds )
        return '%.*f' % ( precision, float( self ))

    _format_spec		= re.compile( r'^\.(\d+)f?$' )

    def __format__( self, spec ):
        if not spec:
            return self.format()
        match			= self._format_spec.match( spec )
        if not match:
            raise ValueError( "Invalid format specifier %r for timestamp; expect '.<precision>[f]'" % ( spec ))
        return self.format( int( match.group( 1 )))

    def __str__( self ):
        return self.format()

    def __repr__( self ):
        return 'timestamp( %d, %d )' % ( self._seconds, self._nanos )

    def __int__( self ):
        return self._seconds

    def __float__( self ):
        return self._seconds + self._nanos / defaults.nanos_per_second

    # Comparisons.  Always lexicographically, over (seconds, nanos).
    def _key( self ):
        return self._seconds,self._nanos

    def __hash__( self ):
        return hash( self._key() )

    def __eq__( self, rhs ):
        if not isinstance( rhs, timestamp ):
            return NotImplemented
        return self._key() == rhs._key()
    def __ne__( self, rhs ):
        if not isinstance( rhs, timestamp ):
            return NotImplemented
        return self._key() != rhs._key()
    def __lt__( self, rhs ):
        if not isinstance( rhs, timestamp ):
            return NotImplemented
        return self._key() < rhs._key()
    def __le__( self, rhs ):
        if not isinstance( rhs, timestamp ):
            return NotImplemented
        return self._key() <= rhs._key()
    def __gt__( self, rhs ):
        if not isinstance( rhs, timestamp ):
            return NotImplemented
        return self._key() > rhs._key()
    def __ge__( self, rhs ):
        if not isinstance( rhs, timestamp ):
            return NotImplemented
        return self._key() >= rhs._key()

    # Arithmetic.  Integers are whole seconds; timestamps and spans carry seconds and nanos.
    def _parts( self, rhs ):
        """The (seconds, nanos) of the right-hand operand, or None if it isn't a supported type."""
        if isinstance( rhs, (timestamp, span) ):
            return ( rhs._seconds, rhs._nanos )
        if is_integer( rhs ):
            return ( rhs, 0 )
        return None

    def __add__( self, rhs ):
        parts			= self._parts( rhs )
        if parts is None:
            return NotImplemented
        seconds,nanos		= parts
        return timestamp( self._seconds + seconds, self._nanos + nanos )

    def __radd__( self, lhs ):
        if not is_integer( lhs ):
            return NotImplemented
        return self.__add__( lhs )

    def __sub__( self, rhs ):
        """Subtract seconds, a span, or another timestamp.  If the subtrahend's nanos exceed ours,
        borrow one whole second, just like elementary subtraction.

        """
        parts			= self._parts( rhs )
        if parts is None:
            return NotImplemented
        seconds,nanos		= parts
        if nanos > self._nanos:
            return timestamp( self._seconds - seconds - 1,
                              self._nanos + defaults.nanos_per_second - nanos )
        return timestamp( self._seconds - seconds, self._nanos - nanos )

    def __mod__( self, rhs ):
        """The seconds modulo an integer; the nanos are untouched.  Like all Python integer modulo, the
        result takes the sign of the divisor.

        """
        if not is_integer( rhs ):
            return NotImplemented
        return timestamp( self._seconds % rhs, self._nanos )
