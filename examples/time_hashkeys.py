import sys
from time import time
import numpy as np
from numpy.random import RandomState
from hashkeys import hash_string, hash_string_fast, hash_strings, hash_strings_fast, \
    hash_points, smallest_prime_atleast

def time_hashes(n, length=8, log=sys.stdout):
    """ Quality vs fast string hashes, and points, for n random keys """
    rs = RandomState(seed=123)
    arr = rs.randint(ord('a'), ord('z')+1, size=(n, length)).astype(np.uint8)
    words = [row.tobytes() for row in arr]

    nbuckets = smallest_prime_atleast(n)
    print('{:,} keys of length {}, {:,} buckets'.format(n, length, nbuckets), file=log)

    times = {}
    for name, f in [('quality', hash_string), ('fast', hash_string_fast)]:
        t0 = time()
        keys = [f(w) for w in words]
        times[name] = '%.3f'%(time() - t0)
        used = len(set(k%nbuckets for k in keys))
        print(name, 'scalar', times[name], 's, buckets used {:,}'.format(used), file=log)

    for name, f in [('quality', hash_strings), ('fast', hash_strings_fast)]:
        t0 = time()
        keys = f(arr)
        print(name, 'array %.3f s'%(time() - t0), file=log)

    pts = rs.randint(0, 20001, size=(n,2))
    t0 = time()
    keys = hash_points(pts)
    print('points array %.3f s'%(time() - t0), 'unique {:,}'.format(len(np.unique(keys))), file=log)

    print('times =', str(times), file=log)

if __name__=='__main__':
    from sys import argv
    n = int(argv[1]) if len(argv)>1 else 100000
    time_hashes(n)
