"""
Gray code for 32-bit unsigned integers: successive integers have gray codes
that differ in exactly one bit.

Both functions take a python int (reduced to 32 bits first) or a numpy
integer array (converted to uint32).
"""
from numpy import ndarray, uint32

MASK32 = 0xffffffff

def _u32(val):
    if isinstance(val, ndarray):
        return val.astype(uint32)
    return int(val) & MASK32

def gray_encode(val):
    """ binary -> gray """
    val = _u32(val)
    return val ^ (val >> 1)

def gray_decode(val):
    """ gray -> binary, undoing the xor cascade of gray_encode """
    val = _u32(val)
    for shift in (1, 2, 4, 8, 16):
        val ^= val >> shift
    return val
