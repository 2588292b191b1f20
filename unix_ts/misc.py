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

import logging
import numbers
import sys
import time

from . import defaults

__author__                      = "Perry Kundert"
__email__                       = "perry@hardconsulting.com"
__copyright__                   = "Copyright (c) 2013 Hard Consulting Corporation"
__license__                     = "Dual License: GPLv3 (or later) and Commercial (see LICENSE)"

__all__				= [ "log_cfg", "timer", "timer_ns", "near", "is_integer", "normalize", "scale_of" ]

"""
Miscellaneous functionality used by various other modules.
"""

log_cfg				= {
    "level":	logging.WARNING,
    "datefmt":	'%m-%d %H:%M:%S',
    "format":	'%(asctime)s.%(msecs).03d %(threadName)10.10s %(name)-8.8s %(levelname)-8.8s %(funcName)-10.10s %(message)s',
}

# 
# misc.timer	-- The wall-clock time, in float seconds since the epoch
# misc.timer_ns	-- The wall-clock time, in integer nanoseconds since the epoch
# 
timer				= time.time
timer_ns			= time.time_ns

# 
# logging.normal	-- regular program output 
# logging.detail	-- detail in addition to normal output
# logging.trace		-- logs less relevant than debug (eg. multiline logs)
# 
#     Augment logging with some new levels, between INFO and WARNING, used for normal/detail output.
# 
#     The logging module finds the logging function's name by walking the call stack past its own
# source file; our wrappers add a frame, so ask it to skip one more.  Prior to Python 3.11, the
# stacklevel was counted from the first frame outside the logging module (ie. our wrapper).
# 
#      .FATAL 		       == 50
#      .ERROR 		       == 40
#      .WARNING 	       == 30
logging.NORMAL			= logging.INFO+5
logging.DETAIL			= logging.INFO+3
#      .INFO    	       == 20
#      .DEBUG    	       == 10
logging.TRACE			= logging.NOTSET+5
#      .NOTSET    	       == 0

logging.addLevelName( logging.NORMAL,	'NORMAL' )
logging.addLevelName( logging.DETAIL,	'DETAIL' )
logging.addLevelName( logging.TRACE,	'TRACE' )

_stacklevel			= 2 if sys.version_info[0:2] >= (3,11) else 1

def _level_method( level ):
    def method( self, msg, *args, **kwargs ):
        if self.isEnabledFor( level ):
            kwargs.setdefault( 'stacklevel', _stacklevel )
            self._log( level, msg, args, **kwargs )
    return method

def _level_root( name ):
    def function( msg, *args, **kwargs ):
        if len( logging.root.handlers ) == 0:
            logging.basicConfig()
        kwargs.setdefault( 'stacklevel', _stacklevel + 1 )
        getattr( logging.root, name )( msg, *args, **kwargs )
    return function

logging.Logger.normal		= _level_method( logging.NORMAL )
logging.Logger.detail		= _level_method( logging.DETAIL )
logging.Logger.trace		= _level_method( logging.TRACE )

logging.normal			= _level_root( 'normal' )
logging.detail			= _level_root( 'detail' )
logging.trace			= _level_root( 'trace' )

# 
# near          -- True iff the specified values are within 'significance' of each-other
# 
def near( a, b, significance = 1.0e-4 ):
    """ Returns True iff the difference between the values is within the factor 'significance' of
    one of the original values.  Default is to within 4 decimal places. """
    return abs( a - b ) <= significance * max( abs( a ), abs( b ))

# 
# is_integer	-- True iff the value is an integral number (but not a bool)
# 
def is_integer( value ):
    return isinstance( value, numbers.Integral ) and not isinstance( value, bool )

# 
# normalize	-- Carry whole seconds out of a non-negative nanosecond offset
# 
#     This is the one place where a (seconds, nanos) pair is brought into canonical form; the nanos
# are always a non-negative offset *added* to the (possibly negative) seconds, so -0.25s is
# (-1, 750000000).  Every timestamp and span is constructed through here.
# 
def normalize( seconds, nanos, lo=defaults.seconds_min, hi=defaults.seconds_max ):
    """Return the (seconds, nanos) pair with nanos reduced to [0,1e9), carrying any whole seconds
    into seconds.  The nanos must be a non-negative integer; raises OverflowError if the resultant
    seconds fall outside [lo,hi].

    """
    if not is_integer( seconds ) or not is_integer( nanos ):
        raise TypeError( "Invalid seconds/nanos %r/%r; must be integers" % ( seconds, nanos ))
    if nanos < 0:
        raise ValueError( "Invalid nanos %d; must be a non-negative offset" % ( nanos ))
    carry,nanos			= divmod( int( nanos ), defaults.nanos_per_second )
    seconds			= int( seconds ) + carry
    if not lo <= seconds <= hi:
        raise OverflowError( "Seconds %d outside of range [%d,%d]" % ( seconds, lo, hi ))
    return seconds,nanos

# 
# scale_of	-- The divisor converting nanos to 10**e sub-second units
# 
def scale_of( e ):
    """Return 10**(9-e) for a precision exponent e in 0-9, the number of nanoseconds in one unit of
    10**-e seconds."""
    if not is_integer( e ) or not 0 <= e <= defaults.digits_max:
        raise ValueError( "Invalid precision %r; must be 0-%d digits" % ( e, defaults.digits_max ))
    return 10 ** ( defaults.digits_max - e )
