"""
Primes for sizing hash tables. Keys from hashkeys.hashing are reduced mod a
prime bucket count, which avoids systematic clustering of the multiplicative
hashes.

Primality is by trial division, so the cost is O(sqrt(n)) - fine for bucket
counts, not for cryptographic sizes.
"""
from math import isqrt, pi
from numbers import Integral
from .errors import report_error

MAX_UINT64 = (1<<64) - 1

def _check_int(n, name, procname, sentinel, log):
    if isinstance(n, bool) or not isinstance(n, Integral):
        report_error('%s must be an integer, not %s'%(name, type(n).__name__), procname, sentinel, log)
    return int(n)

def is_prime(n, return_factor=False, log=None):
    """
    Test n (a positive integer < 2^64) for primality by trial division

    n               - number for testing
    [return_factor] - also return the smallest factor found (0 if prime)
    [log=None]      - optional file for error messages

    Even numbers are reported composite with factor 2 *including* 2 itself,
    and 1 is reported prime (there is nothing to divide it by). Odd numbers
    are divided by 3,5,7... up to and including isqrt(n).

    returns is_prime, or (is_prime, factor) if return_factor
    """
    sentinel = (False, 0) if return_factor else False
    n = _check_int(n, 'n', 'is_prime', sentinel, log)
    if n<=0:
        report_error('n must be > 0', 'is_prime', sentinel, log)
    if n>MAX_UINT64:
        report_error('n must be < 2^64', 'is_prime', sentinel, log)

    factor = 0
    if n%2==0:
        factor = 2
    else:
        for div in range(3, isqrt(n)+1, 2):
            if n%div==0:
                factor = div
                break

    if return_factor:
        return factor==0, factor
    return factor==0

def next_prime(start, log=None):
    """
    First prime strictly larger than start (a positive integer)
    """
    start = _check_int(start, 'start', 'next_prime', 0, log)
    if start<=0:
        report_error('start must be > 0', 'next_prime', 0, log)

    n = start + 1
    while not is_prime(n):
        n += 1
    return n

def smallest_prime_atleast(m, log=None):
    """
    Find the first prime >= m, i.e. the bucket count for a table that needs
    at least m buckets
    """
    m = _check_int(m, 'm', 'smallest_prime_atleast', 0, log)
    if m<=0:
        report_error('m must be > 0', 'smallest_prime_atleast', 0, log)
    n=m
    while not is_prime(n):
        n+=1
    return n

def bucket_primes(size0=1024, count=23, divisor=pi, log=None):
    """
    Prime bucket counts for a run of power-of-two table sizes

    For each hsize = size0<<i (i in 0...count-1) find the prime closest to
    hsize/divisor, looking both above and below the guess.

    returns list of count primes
    """
    hash_primes = []
    for i in range(count):
        hsize = size0<<i
        guess = hsize/divisor
        nprime = smallest_prime_atleast(max(int(guess), 1))
        guess2 = 2*guess - nprime # look lower as well as higher
        if guess2>=1:
            nprime2 = smallest_prime_atleast(int(guess2))
            if guess-nprime2<nprime-guess:
                nprime = nprime2

        if log is not None:
            print(hsize, nprime, file=log)
        hash_primes.append(nprime)
    return hash_primes

if __name__=='__main__':
    import sys
    assert(is_prime(17)==True)
    assert(is_prime(18)==False)
    print('Finding large hashtable prime for mod 2<32')
    n = int(1.5*2**31)
    best = smallest_prime_atleast(n)
    print('Searched', best-n, 'composites')
    print('Use', best)

    hash_primes = bucket_primes(log=sys.stdout)
    print('{'+', '.join(str(N) for N in hash_primes)+'};')
    print('{'+','.join(hex(N) for N in hash_primes)+'};')
