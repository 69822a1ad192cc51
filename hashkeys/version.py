__version__ = '0.1.0'

def version_string():
    """ e.g. 'hashkeys-0.1.0' """
    return 'hashkeys-'+__version__
