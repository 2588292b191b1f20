import logging

import pytest

from unix_ts.misc import near, normalize, scale_of, is_integer


def test_normalize():
    assert normalize( 1, 0 ) == ( 1, 0 )
    assert normalize( 1, 1000000000 ) == ( 2, 0 )
    assert normalize( -1, 1750000000 ) == ( 0, 750000000 )
    assert normalize( 0, 5999999999 ) == ( 5, 999999999 )

    assert normalize( 2**63 - 1, 999999999 ) == ( 2**63 - 1, 999999999 )
    try:
        normalize( 2**63 - 1, 1000000000 )
        assert False, "Should have overflowed"
    except OverflowError as exc:
        assert "outside of range" in str( exc )
    assert normalize( 5, 0, lo=0, hi=5 ) == ( 5, 0 )
    with pytest.raises( OverflowError ):
        normalize( -1, 0, lo=0, hi=5 )

    with pytest.raises( ValueError ):
        normalize( 0, -1 )
    with pytest.raises( TypeError ):
        normalize( 0.5, 0 )


def test_scale_of():
    assert scale_of( 0 ) == 1000000000
    assert scale_of( 3 ) == 1000000
    assert scale_of( 9 ) == 1
    for e in ( -1, 10, 3.0, None, False ):
        with pytest.raises( ValueError ):
            scale_of( e )


def test_is_integer():
    assert is_integer( 1 ) and is_integer( -2**70 )
    assert not is_integer( True )
    assert not is_integer( 1.0 )
    assert not is_integer( "1" )


def test_near():
    assert near( 1.00001, 1.0 )
    assert not near( 1.001, 1.0 )


def test_logging_levels( caplog ):
    assert logging.WARNING > logging.NORMAL > logging.DETAIL > logging.INFO
    assert logging.TRACE < logging.DEBUG
    assert logging.getLevelName( logging.NORMAL ) == 'NORMAL'

    log				= logging.getLogger( 'unix_ts.misc_test' )
    caplog.set_level( logging.TRACE, logger='unix_ts.misc_test' )
    log.normal( "normal %d", 1 )
    log.detail( "detail %d", 2 )
    log.trace( "trace %d", 3 )
    assert [ ( r.levelname, r.getMessage() ) for r in caplog.records ] \
        == [ ( 'NORMAL', 'normal 1' ), ( 'DETAIL', 'detail 2' ), ( 'TRACE', 'trace 3' ) ]
    assert all( r.funcName == 'test_logging_levels' for r in caplog.records )


def test_logging_root( caplog ):
    caplog.set_level( logging.TRACE )
    logging.normal( "root normal" )
    logging.detail( "root detail %s", "two" )
    logging.trace( "root trace" )
    records			= [ r for r in caplog.records if r.name == 'root' ]
    assert [ ( r.levelname, r.getMessage() ) for r in records ] \
        == [ ( 'NORMAL', 'root normal' ), ( 'DETAIL', 'root detail two' ), ( 'TRACE', 'root trace' ) ]
    assert all( r.funcName == 'test_logging_root' for r in records )
