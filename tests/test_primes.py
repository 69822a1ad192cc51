from io import StringIO
import pytest
from hashkeys.primes import is_prime, next_prime, smallest_prime_atleast, bucket_primes
from hashkeys.errors import InvalidArgument
# Primes up to 200
small_primes = (2,3,5,7,11,13,17,19,23,29,31,37,41,43,47,53,59,61,67,71,73,79,
                83,89,97,101,103,107,109,113,127,131,137,139,149,151,157,163,
                167,173,179,181,191,193,197,199)
def test_200():
    """
    test known primes (2 is classed with the even numbers)
    """
    for i in range(3,200):
        if is_prime(i) != (i in small_primes):
            raise Exception('Failed at %d'%i)

def test_two():
    """ 2 is reported composite with factor 2 """
    assert(is_prime(2)==False)
    assert(is_prime(2, return_factor=True)==(False, 2))

def test_factors():
    """ Smallest factor of composites, 0 for primes """
    assert(is_prime(97, return_factor=True)==(True, 0))
    assert(is_prime(91, return_factor=True)==(False, 7))
    assert(is_prime(1024, return_factor=True)==(False, 2))
    assert(is_prime(1, return_factor=True)==(True, 0))
    for i in range(3,200,2):
        is_p, factor = is_prime(i, return_factor=True)
        if is_p:
            assert(factor==0)
        else:
            assert(factor in small_primes and i%factor==0)
            assert(not any(i%p==0 for p in small_primes if p<factor))

def test_odd_squares():
    """ Squares of primes are composite (divisor at exactly sqrt(n)) """
    for p in (3,5,7,11,13,97,10007):
        assert(is_prime(p*p, return_factor=True)==(False, p))

def test_large():
    """ Near 2^31, 2^32 and 2^64 """
    assert(is_prime(2147483647)) # 2^31-1
    assert(is_prime(1000000007))
    assert(is_prime(4294967311)) # 2^32+15
    assert(is_prime((1<<64)-1, return_factor=True)==(False, 3))

def test_next_prime():
    """ Strictly larger """
    assert(next_prime(10)==11)
    assert(next_prime(7)==11)
    assert(next_prime(11)==13)
    assert(next_prime(1)==3)
    assert(next_prime(2)==3)
    assert(next_prime(23)==29)
    for i in range(1, len(small_primes)-1):
        for j in range(small_primes[i], small_primes[i+1]):
            assert(next_prime(j)==small_primes[i+1])

def test_smallest_prime_atleast():
    """ Finding next prime """
    for i in range(1, len(small_primes)-1):
        assert(smallest_prime_atleast(small_primes[i])==small_primes[i])
        for j in range(small_primes[i]+1, small_primes[i+1]):
            assert(smallest_prime_atleast(j)==small_primes[i+1])

def test_bucket_primes():
    """ Primes close to 1024<<i / pi """
    from math import pi
    primes = bucket_primes(size0=1024, count=8)
    assert(len(primes)==8)
    for i, p in enumerate(primes):
        assert(is_prime(p))
        guess = (1024<<i)/pi
        assert(abs(p-guess)<100)

def test_invalid():
    """ Zero, negative and non-integer input """
    with pytest.raises(InvalidArgument) as e:
        is_prime(0)
    assert(e.value.value==False)
    assert(e.value.procname=='is_prime')

    with pytest.raises(InvalidArgument) as e:
        is_prime(0, return_factor=True)
    assert(e.value.value==(False, 0))

    for bad in (-7, 1<<64, 3.0, '7', None, True):
        with pytest.raises(InvalidArgument):
            is_prime(bad)

    for bad in (0, -1):
        with pytest.raises(InvalidArgument) as e:
            next_prime(bad)
        assert(e.value.value==0)
        with pytest.raises(InvalidArgument):
            smallest_prime_atleast(bad)

def test_log():
    """ Error message goes to the log """
    log = StringIO()
    with pytest.raises(InvalidArgument):
        next_prime(0, log=log)
    assert(log.getvalue()=='Error in next_prime: start must be > 0\n')

    # nothing written on success
    log = StringIO()
    assert(is_prime(13, log=log))
    assert(log.getvalue()=='')

if __name__=='__main__':
    test_200()
