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
unix_ts.times -- Conversion of (seconds, nanos) pairs to/from civil time in a timezone

Nothing here knows about the timestamp type; everything consumes or produces a plain (seconds,
nanos) pair, with nanos always a non-negative offset added to the (possibly negative) seconds.

"""

__all__				= [ "UTC", "EPOCH", "get_localzone", "timezone_info",
                                    "parse_offset", "format_offset",
                                    "datetime_from_parts", "parts_from_datetime",
                                    "parts_from_string", "render_parts" ]

import calendar
import datetime
import logging
import os
import string

# Installed packages (eg. pip/setup.py install pytz tzlocal)
import pytz
import tzlocal

from .		import defaults
from .misc	import is_integer, scale_of

log				= logging.getLogger( __package__ )

UTC				= pytz.utc
EPOCH				= datetime.datetime( 1970, 1, 1, tzinfo=UTC )

_timeseps			= str.maketrans( ":-.", "   " )


def TZ_wrapper():
    """Wrap get_localzone in a handler that respects a TZ variable before attempting other host-specific
    local timezone detection.

    """
    def decorate( func ):
        def call( *args, **kwds ):
            # TZ environment variable?  Either a tzinfo file or a timezone name.
            tzenv		= os.environ.get( defaults.timezone_env )
            if tzenv:
                if os.path.exists( tzenv ):
                    with open( tzenv, 'rb' ) as tzfile:
                        return pytz.tzfile.build_tzinfo( 'local', tzfile )
                return pytz.timezone( tzenv )
            return func( *args, **kwds )
        return call
    return decorate


@TZ_wrapper()
def get_localzone():
    """Find the host's local timezone (via tzlocal), as a pytz timezone.  Raises
    pytz.UnknownTimeZoneError if the host has no (recognizable) timezone configuration.

    """
    tzname			= tzlocal.get_localzone_name()
    if not tzname:
        raise pytz.UnknownTimeZoneError( 'Can not find any timezone configuration' )
    log.detail( "Local timezone: %s", tzname )
    return pytz.timezone( tzname )


def parse_offset( term, symbols='<>' ):
    """Convert a string like '</> h:mm:ss.sss' into -'ve/+'ve seconds."""
    try:
        sign		= max( *map( term.find, symbols ))
        assert sign >= 0, "missing sign"
        assert term[:sign].strip() == '', "garbage before sign"
        hms		= term[sign+1:].split( ':' )
        assert 1 <= len( hms ) <= 3, "only h:mm:ss.s allowed"
        while hms[0] == '':
            hms		= hms[1:] # <:02.5 is OK
        offset		= 0
        for v in hms:
            offset	= offset * 60 + float( v )
        if term[sign] == symbols[0]:
            offset	= -offset
    except Exception as exc:
        raise ValueError( "Invalid offset %r; must be %s[[h:]m:]s[.s]: %s" % ( term, '/'.join( symbols ), exc ))
    return offset


def format_offset( dt, ms=True, symbols='<>' ):
    """Convert a floating point number of -'ve/+'ve seconds into '</> h:mm:ss.sss'"""
    return (( symbols[0] if dt < 0 else symbols[1] ) + "%2d:%02d:" + ( "%06.3f" if ms else "%02d" )) % (
        int( abs( dt ) // 3600 ),
        int( abs( dt ) % 3600 // 60 ),
        abs( dt ) % 60 )


def timezone_info( tzinfo ):
    """Return a tzinfo for the supplied zone designation (default: UTC).  Accepts a tzinfo, a pytz
    timezone name (eg. 'America/Edmonton'), an offset string (eg. '< 7:00:00'), or a numeric UTC
    offset in seconds.  Fixed offsets must be whole minutes.

    """
    if tzinfo is None:
        return UTC
    if isinstance( tzinfo, datetime.tzinfo ):
        return tzinfo
    if isinstance( tzinfo, str ):
        if tzinfo.strip()[:1] not in ( '<', '>' ):
            return pytz.timezone( tzinfo.strip() )
        offset			= parse_offset( tzinfo )
    elif is_integer( tzinfo ) or isinstance( tzinfo, float ):
        offset			= tzinfo
    else:
        raise TypeError( "Invalid timezone of %s: %r" % ( type( tzinfo ), tzinfo ))
    minutes,remains		= divmod( offset, 60 )
    if remains:
        raise ValueError( "Invalid timezone offset %s; must be whole minutes" % (
            format_offset( offset )))
    return pytz.FixedOffset( int( minutes ))


def datetime_from_parts( seconds, nanos, tzinfo=None ):
    """Convert a UNIX (seconds, nanos) into a timezone-aware datetime in the specified timezone.  UNIX
    epoch times are unambiguous; the target timezone's is_dst hint is not required.

    A datetime only carries microseconds, so any sub-microsecond nanos are truncated.  Raises
    OverflowError if the time lies outside of the years datetime supports (1-9999).

    """
    tzinfo			= timezone_info( tzinfo )
    try:
        utc			= EPOCH + datetime.timedelta( seconds=seconds, microseconds=nanos // 1000 )
        return utc.astimezone( tzinfo )
    except OverflowError as exc:
        raise OverflowError( "Timestamp %d.%09d outside of datetime range: %s" % ( seconds, nanos, exc ))


def parts_from_datetime( dt ):
    """Convert a datetime to a UNIX (seconds, nanos).  You'd think strftime( "%s.%f" )?  You'd be
    wrong; a timezone-aware datetime should always strftime to the same (correct) UNIX timestamp via
    its "%s" format, but this also doesn't work.

    Convert the time to a UTC time tuple, then use calendar.timegm to take a UTC time tuple and
    compute the UNIX timestamp.  A naive datetime (no tzinfo) is taken to be in UTC.

    """
    return calendar.timegm( dt.utctimetuple() ), dt.microsecond * 1000


def parts_from_string( s, tzinfo=None ):
    """Parse a time, in the specified timezone (default: UTC), into a UNIX (seconds, nanos).  If the
    time is followed by a timezone (any terms after the date and time), use that instead:

        2014-11-01 01:02:03.456 America/Edmonton   (Nov 1 2014 -- DST *is* in effect)
        2014-11-01 01:02:03.456 < 6:00:00          (6 hours behind UTC)

    Up to 9 digits of sub-second precision are retained exactly.  Be aware that attempting to parse
    ambiguous or nonexistent times in a DST timezone will raise an exception (eg. during spring-ahead
    time gap, or during fall-back time overlap).

    """
    try:
        terms			= str( s ).split()
        assert len( terms ) >= 2, "missing date or time"
        if len( terms ) > 2:
            tzinfo		= ' '.join( terms[2:] )
        tzinfo			= timezone_info( tzinfo )

        ymdhms			= ' '.join( terms[:2] ).translate( _timeseps ).split()
        assert 6 <= len( ymdhms ) <= 7, "%d terms unexpected" % len( ymdhms )
        fraction		= ymdhms[6] if len( ymdhms ) == 7 else ''
        assert all( c in string.digits for c in fraction ), "sub-second must be decimal digits"
        assert len( fraction ) <= defaults.digits_max, "too many sub-second digits"
        nanos			= int(( fraction + '0' * defaults.digits_max )[:defaults.digits_max] )

        # Create a "naive" datetime (no tzinfo), and then localize it to the target tzinfo.  We
        # cannot use the datetime.datetime( ..., tzinfo=... ) keyword with a pytz timezone, because
        # it doesn't handle dates in daylight savings time.
        naive			= datetime.datetime( *map( int, ymdhms[:6] ))
        if hasattr( tzinfo, 'localize' ):
            dt			= tzinfo.localize( naive, is_dst=None )
        else:
            dt			= naive.replace( tzinfo=tzinfo )
        seconds,_		= parts_from_datetime( dt )
    except Exception as exc:
        raise ValueError( "Invalid time format %r; expect YYYY-MM-DD HH:MM:SS[.#########] [TZ]: %s" % ( s, exc ))
    return seconds,nanos


def render_parts( seconds, nanos, tzinfo=None, ms=True ):
    """Render the UNIX (seconds, nanos) in the specified zone, optionally with sub-second digits (True
    for the default precision, or 0-9 digits).  If the resultant timezone is not UTC, include the
    timezone designation in the output.

    The sub-second digits are truncated from the exact nanos, never rounded; a time never renders
    in a later second (or millisecond) than it actually occurs.

    """
    subsecond			= defaults.precision if ms is True else int( ms ) if ms else 0
    divisor			= scale_of( subsecond )
    dt				= datetime_from_parts( seconds, nanos, tzinfo=tzinfo )
    result			= dt.strftime( defaults.render_format )
    if subsecond:
        result	       += '.%0*d' % ( subsecond, nanos // divisor )
    if dt.tzinfo is not UTC:
        result	       += ' ' + ( dt.tzname() or format_offset( dt.utcoffset().total_seconds(), ms=False ))
    return result
