"""
64-bit hash keys for strings, integer points and doubles.

Keys are meant to be reduced mod a prime bucket count (see hashkeys.primes).
None of these are cryptographic. The constants below are part of the key
format: change them and every persisted key changes too.

Each hasher has a scalar version (python ints) and an array version (numpy
uint64, with the same wraparound) that agree element-wise.
"""
from math import isfinite
from numpy import require, empty, zeros, full, uint8, uint64, int64, float64, \
    fmod, trunc, where, errstate, frombuffer
from numpy import isfinite as np_isfinite
from .errors import report_error

MASK64 = (1<<64) - 1

# Quality string hash. No collisions over all 26^5 lowercase 5-letter strings
STR_SEED = 104395301
STR_MULP = 26544357894361247 # prime, about 1/700 of the max uint64
STR_SHIFT = 7 # shifts of 1...23 are ok
STR_FINAL_SHIFT = 37

# Fast string hash (Kernighan & Pike)
FAST_MULP = 37

# Point hash. No collisions for any of the 400M points with 0<=x,y<=20000
PT_CX = 2173249142.3849
PT_CY = 3763193258.6227

# Float hash, different scale for each sign
FLOAT_POS = 847019.66701
FLOAT_NEG = -217324.91613

# Bytes >=128 are signed chars, i.e. c-256 wrapped to 64 bits
_SIGNED_CHAR_OFFSET = (1<<64) - 256

def _as_bytes(s, procname, log):
    if isinstance(s, str):
        try:
            s = s.encode('utf-8')
        except UnicodeEncodeError:
            report_error('str is not valid utf-8', procname, 0, log)
    elif isinstance(s, (bytes, bytearray, memoryview)):
        s = bytes(s)
    elif s is not None:
        report_error('str must be str or bytes, not %s'%type(s).__name__, procname, 0, log)

    if not s:
        report_error('str not defined or empty', procname, 0, log)
    return s

def hash_string(s, log=None):
    """
    Hash a non-empty string (str is encoded as utf-8) to a 64-bit key,
    mapping the string as randomly as possible into 64 bits.

    For N random strings the collision probability is about N^2/2^64, so for
    a million strings roughly 1 in 16 million.
    """
    data = _as_bytes(s, 'hash_string', log)
    h = STR_SEED
    for c in data:
        if c>=128:
            c -= 256
        h = (h + (((c * STR_MULP) & MASK64) ^ (h >> STR_SHIFT))) & MASK64
    return (h ^ (h << STR_FINAL_SHIFT)) & MASK64

def hash_string_fast(s, log=None):
    """
    Simple polynomial hash h = 37*h + c (from 'The Practice of Programming',
    Kernighan & Pike). Quicker than hash_string, more collisions.
    """
    data = _as_bytes(s, 'hash_string_fast', log)
    h = 0
    for c in data:
        h = (FAST_MULP * h + c) & MASK64
    return h

def _trunc_u64(v):
    """ truncate a double towards zero, modulo 2^64 (non-finite -> 0) """
    if not isfinite(v):
        return 0
    return int(v) & MASK64

def hash_point(x, y):
    """
    Hash the point (x,y) to a 64-bit key. Designed for 0<=x,y<=20000, other
    values still give a key (just without the no-collision guarantee).
    """
    return _trunc_u64(PT_CX * x + PT_CY * y)

def hash_float64(val):
    """
    Hash a double to a 64-bit key. Positive and negative values are scaled
    differently so that v and -v do not collide. NaN and inf give 0.
    """
    val = float(val)
    if val>=0.0:
        return _trunc_u64(FLOAT_POS * val)
    return _trunc_u64(FLOAT_NEG * val)

def string_array(strings, log=None):
    """
    Pack a sequence of equal-length strings (str or bytes) into an (N,L)
    uint8 array for hash_strings and hash_strings_fast
    """
    data = [_as_bytes(s, 'string_array', log) for s in strings]
    if len(data)==0:
        return empty((0,1), dtype=uint8)
    length = len(data[0])
    if any(len(d)!=length for d in data):
        report_error('strings must all have the same length', 'string_array', 0, log)
    return frombuffer(b''.join(data), dtype=uint8).reshape((len(data), length))

def _char_rows(arr, procname, log):
    a = require(arr, dtype=uint8, requirements=['C'])
    if a.ndim==1:
        a = a.reshape((1, len(a)))
    assert(a.ndim==2)
    if a.shape[1]==0:
        report_error('str not defined or empty', procname, 0, log)
    return a

def hash_strings(arr, log=None):
    """
    As for hash_string(..) but for each row of an (N,L) array of bytes

    returns (N,) uint64 array of keys
    """
    a = _char_rows(arr, 'hash_strings', log)
    mulp, shift = uint64(STR_MULP), uint64(STR_SHIFT)

    h = full(a.shape[0], STR_SEED, dtype=uint64)
    for j in range(a.shape[1]):
        col = a[:,j]
        c = col.astype(uint64)
        c[col>=128] += uint64(_SIGNED_CHAR_OFFSET)
        h += (c * mulp) ^ (h >> shift)
    return h ^ (h << uint64(STR_FINAL_SHIFT))

def hash_strings_fast(arr, log=None):
    """
    As for hash_string_fast(..) but for each row of an (N,L) array of bytes
    """
    a = _char_rows(arr, 'hash_strings_fast', log)
    mulp = uint64(FAST_MULP)

    h = zeros(a.shape[0], dtype=uint64)
    for j in range(a.shape[1]):
        h = h * mulp + a[:,j].astype(uint64)
    return h

def _trunc_u64_array(v):
    """
    Truncate doubles towards zero, modulo 2^64, as uint64 (non-finite -> 0).
    fmod is exact, and anything >=2^63 is a multiple of 2^11, so the shift
    into int64 range is exact too.
    """
    out = zeros(len(v), dtype=uint64)
    ok = np_isfinite(v)
    r = fmod(trunc(v[ok]), 2.0**64)
    r[r>=2.0**63] -= 2.0**64
    r[r<-2.0**63] += 2.0**64
    out[ok] = r.astype(int64).view(uint64)
    return out

def hash_points(pts):
    """
    As for hash_point(..) but for an (N,2) array of points

    returns (N,) uint64 array of keys
    """
    p = require(pts, dtype=float64, requirements=['C'])
    npts = p.shape[0]
    assert(p.shape==(npts,2))
    with errstate(over='ignore', invalid='ignore'):
        v = PT_CX * p[:,0] + PT_CY * p[:,1]
    return _trunc_u64_array(v)

def hash_float64s(vals):
    """
    As for hash_float64(..) but for an array of doubles (any shape,
    keys are returned flattened)
    """
    v = require(vals, dtype=float64, requirements=['C']).ravel()
    with errstate(over='ignore', invalid='ignore'):
        v = where(v>=0.0, FLOAT_POS * v, FLOAT_NEG * v)
    return _trunc_u64_array(v)
