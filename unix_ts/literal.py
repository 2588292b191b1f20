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
unix_ts.literal -- Parse decimal UNIX timestamp numerals, eg. '1335020400.25' or '-.5'

"""

__all__				= [ "ts", "LiteralError" ]

import logging
import string

from .		import defaults
from .misc	import is_integer
from .timestamp	import timestamp

log				= logging.getLogger( __package__ )


class LiteralError( ValueError ):
    pass


def _digits( term, what, literal ):
    if not term or any( c not in string.digits for c in term ):
        raise LiteralError( "Invalid timestamp %r; %s %r must be decimal digits" % ( literal, what, term ))
    return term


def ts( literal ):
    """Create a timestamp from a signed decimal numeral, eg:

        >>> ts( '1335020400.25' )
        timestamp( 1335020400, 250000000 )
        >>> ts( '-.5' )
        timestamp( -1, 500000000 )

    At most 9 sub-second digits (nanoseconds) are significant; any more are truncated.  A negative
    numeral with a non-zero fraction lands on the *next lower* whole second, and the fractional digits
    are kept unchanged as the nanos: -10000.25 yields timestamp( -10001, 250000000 ).  An integer is
    accepted as a count of whole seconds.  Raises LiteralError (a ValueError) on any malformed
    numeral, including one with no digits at all (eg. '.').

    """
    if is_integer( literal ):
        return timestamp.from_seconds( literal )
    if not isinstance( literal, str ):
        raise TypeError( "Invalid timestamp literal of %s: %r" % ( type( literal ), literal ))

    src				= literal.strip()
    if not src:
        raise LiteralError( "Invalid timestamp %r; no numeral" % ( literal ))

    # Deal with (and remember) any sign, leaving just the magnitude
    neg				= src.startswith( '-' )
    if neg:
        src			= src[1:].strip()

    # No decimal point; an integer number of seconds.  No fraction, so nothing to normalize
    if '.' not in src:
        seconds			= int( _digits( src, "seconds", literal ))
        return timestamp( -seconds if neg else seconds, 0 )

    # Supply the implied zero in eg. '.5', and split off the fraction
    if src == '.':
        raise LiteralError( "Invalid timestamp %r; no digits" % ( literal ))
    if src.startswith( '.' ):
        src			= '0' + src
    terms			= src.split( '.' )
    if len( terms ) > 2:
        raise LiteralError( "Invalid timestamp %r; multiple decimal points" % ( literal ))
    whole,fraction		= terms
    seconds			= int( _digits( whole, "seconds", literal ))
    if fraction:
        _digits( fraction, "fraction", literal )
    nanos			= ( fraction + '0' * defaults.digits_max )[:defaults.digits_max]

    # The nanos always count *up* from the seconds, so any negative value with a fraction must start
    # one second further from zero, eg. -0.5 == -1 + .5.  Since the sign is still separate here, that
    # means adding one to the magnitude.
    if neg and int( nanos ):
        seconds		       += 1
    if neg:
        seconds			= -seconds
    log.trace( "Timestamp %r: seconds %d, nanos %s", literal, seconds, nanos )
    return timestamp( seconds, int( nanos ))
