"""
Small numeric helpers that go with the keying functions: float->int
rounding and bounded random integers.
"""
from numpy.random import RandomState
from .errors import report_error

def round_ftoi(fval):
    """ Round to nearest int, halves away from zero (symmetric about 0) """
    if fval<0.0:
        return -round_ftoi(-fval)
    i = int(fval)
    # fval-i is exact, unlike fval+0.5
    if fval - i>=0.5:
        i += 1
    return i

def floor_ftoi(fval):
    """ Largest integer not greater than fval """
    i = int(fval)
    if i>fval:
        i -= 1
    return i

def ceil_ftoi(fval):
    """ Smallest integer not less than fval """
    i = int(fval)
    if i<fval:
        i += 1
    return i

def random_int_on_interval(start, end, seed=None, log=None):
    """
    Random integer in [start, end] (start can be negative)

    [seed=None] - positive int (< 2^32) for a reproducible draw. None, 0 or a
                  negative seed draws from fresh entropy. Never touches the
                  global numpy state.
    """
    if end<start:
        report_error('invalid range [%d, %d]'%(start, end), 'random_int_on_interval', 0, log)
    if seed is not None and seed>=(1<<32):
        report_error('seed must be < 2^32', 'random_int_on_interval', 0, log)
    rs = RandomState(seed=seed if seed is not None and seed>0 else None)
    return int(rs.randint(start, end+1))
