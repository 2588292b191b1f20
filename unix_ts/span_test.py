import datetime

import pytest

from unix_ts.misc import near
from unix_ts.span import span


def test_span_normalize():
    assert span( 1, 1500000000 ) == span( 2, 500000000 )
    d				= span( 86400, 1 )
    assert d.seconds == 86400
    assert d.nanos == 1
    assert span() == span( 0, 0 )
    assert repr( span( 1, 2 )) == "span( 1, 2 )"

    assert span( 2**64 - 1, 999999999 ).seconds == 2**64 - 1
    with pytest.raises( OverflowError ):
        span( 2**64 - 1, 1000000000 )
    with pytest.raises( ValueError ):
        span( -1 )
    with pytest.raises( ValueError ):
        span( 0, -1 )
    with pytest.raises( TypeError ):
        span( 1.5 )


def test_span_timedelta():
    assert span.from_timedelta( datetime.timedelta( days=1, microseconds=5 )) == span( 86400, 5000 )
    assert span.from_timedelta( datetime.timedelta( 0 )) == span( 0 )
    with pytest.raises( ValueError ):
        span.from_timedelta( datetime.timedelta( microseconds=-1 ))

    # Sub-microsecond nanos are lost
    assert span( 1, 1999 ).to_timedelta() == datetime.timedelta( seconds=1, microseconds=1 )
    assert span( 90061, 5000 ).to_timedelta() == datetime.timedelta( days=1, hours=1, minutes=1, seconds=1, microseconds=5 )


def test_span_cmp():
    assert span( 1, 999999999 ) < span( 2 )
    assert span( 2 ) > span( 1, 999999999 )
    assert span( 2 ) >= span( 2 ) and span( 2 ) <= span( 2 )
    assert span( 2 ) != span( 2, 1 )
    assert not ( span( 2 ) == 2 )
    assert len( set( [ span( 1 ), span( 0, 1000000000 ) ] )) == 1

    assert near( span( 1, 500000000 ).total_seconds(), 1.5 )
    assert float( span( 0, 250000000 )) == 0.25
