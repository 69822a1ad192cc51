from .hashing import hash_string, hash_string_fast, hash_point, hash_float64, \
    hash_strings, hash_strings_fast, hash_points, hash_float64s, string_array
from .primes import is_prime, next_prime, smallest_prime_atleast, bucket_primes
from .gray import gray_encode, gray_decode
from .errors import InvalidArgument
from .version import __version__, version_string
